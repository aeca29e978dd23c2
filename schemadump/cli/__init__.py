"""
schemadump CLI

Command-line interface and file generation.
"""

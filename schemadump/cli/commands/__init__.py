"""
schemadump CLI Commands
"""

from schemadump.cli.commands.dump_command import dump
from schemadump.cli.commands.tables_command import tables

__all__ = [
    "dump",
    "tables",
]

"""
schemadump Setup Configuration

Generate Ecto schemas from an existing MySQL or PostgreSQL database.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="schemadump",
    version="0.1.0",

    description="Generate Ecto schemas from an existing MySQL or PostgreSQL database",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "schemadump.cli": ["templates/*.j2"],
    },
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "sqlalchemy>=1.4.0",
        "python-dotenv>=1.0.0",
        "inflect>=6.0.0",
    ],
    extras_require={
        "mysql": ["pymysql>=1.0.0"],
        "postgres": ["psycopg2-binary>=2.9.0"],
        "test": ["pytest>=7.0.0,<9"],
        "dev": [
            "pytest>=7.0.0,<9",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "schemadump=schemadump.cli.main:cli",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Database",
    ],
    keywords="ecto elixir schema generator mysql postgresql information_schema",
)

"""
schemadump Exceptions

Every failure the generator reports to the user derives from SchemaDumpError.
"""

from typing import Optional


class SchemaDumpError(Exception):
    """
    Base error with an optional actionable suggestion.

    Attributes:
        message: Error message
        suggestion: Actionable suggestion for the user
        error_code: Optional error code for documentation reference
    """

    def __init__(self, message: str, suggestion: Optional[str] = None, error_code: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        super().__init__(message)


class OptionsError(SchemaDumpError):
    """Invalid command-line options (bad regular expression, missing app name)."""


class RepositoryError(SchemaDumpError):
    """A repository could not be resolved or connected to."""


class UnsupportedEngineError(RepositoryError):
    """The database behind a repository is neither MySQL nor PostgreSQL."""

    def __init__(self, dialect: str):
        self.dialect = dialect
        super().__init__(
            f"Unsupported database engine: {dialect}",
            suggestion="Only MySQL/MariaDB and PostgreSQL repositories are supported.",
            error_code="E021",
        )

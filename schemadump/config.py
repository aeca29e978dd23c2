"""
schemadump Configuration

Defaults for the generator, overridable from a .env file or SCHEMADUMP_*
environment variables. Command-line flags always take precedence.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from schemadump.logging import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


class Config:
    """
    Generator configuration settings.

    Organized into:
    - Internal: naming conventions of the generated files (DO NOT MODIFY)
    - Env: Environment file configuration
    - User Settings: defaults for the command-line flags
    """

    class Internal:
        """
        Generator internals.

        These values define the shape of the generated Ecto schemas and
        cannot be overridden by subclasses or environment variables.
        """
        MODELS_DIR_NAME = "models"
        FILE_EXTENSION = ".ex"
        ID_COLUMN = "id"
        DEFAULT_INSERTED_AT = "inserted_at"
        CREATED_AT = "created_at"  # Stands in for inserted_at when that column is absent
        UPDATED_AT = "updated_at"
        FOREIGN_KEY_SUFFIX = "_id"
        POSTGRES_SCHEMA = "public"

    class Env:
        """Environment file configuration"""
        file = ".env"
        auto_load = True
        override = False  # Real environment variables win over the .env file

    # User-Configurable Settings
    # ============================

    DATABASE_URL = None  # Fallback repository when no --repo is given
    APP = None  # Application module, e.g. "MyApp" (read from mix.exs if unset)
    OUTPUT_DIR = "lib"
    INSERTED_AT = "inserted_at"
    DATETIME_TYPE = None  # e.g. ":utc_datetime"

    LOG_LEVEL = "WARNING"
    VERBOSE_LOGGING = False

    def __init_subclass__(cls, **kwargs):
        """Refuse subclasses that replace Config.Internal."""
        super().__init_subclass__(**kwargs)

        if 'Internal' in cls.__dict__:
            raise TypeError(
                f"Cannot override Config.Internal in {cls.__name__}. "
                "Config.Internal defines the generated file layout."
            )

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None):
        """
        Load configuration from .env file and environment variables.

        All environment variables must be prefixed with SCHEMADUMP_*

        Args:
            env_file: Path to .env file (overrides Config.Env.file)

        Example .env file:
            SCHEMADUMP_DATABASE_URL=postgresql://localhost/shop
            SCHEMADUMP_APP=Shop
            SCHEMADUMP_INSERTED_AT=created_at
            SCHEMADUMP_LOG_LEVEL=INFO
        """
        env_file_path = env_file or cls.Env.file

        if cls.Env.auto_load:
            env_path = Path(env_file_path)
            if env_path.exists():
                load_dotenv(env_path, override=cls.Env.override)
                if cls.VERBOSE_LOGGING:
                    logger.info(f"Loaded environment from: {env_path}")
            elif cls.VERBOSE_LOGGING:
                logger.info(f".env file not found: {env_path}")

        def auto_detect(env_value: str):
            """Convert an environment string to None, bool or str."""
            if env_value.lower() in ('null', 'none', '~', ''):
                return None

            if env_value.lower() in ('true', 'false', 'yes', 'no', 'on', 'off'):
                return env_value.lower() in ('true', 'yes', 'on')

            return env_value

        for env_key, env_value in os.environ.items():
            if not env_key.startswith('SCHEMADUMP_'):
                continue

            attr_name = env_key.replace('SCHEMADUMP_', '', 1)

            if attr_name in ('INTERNAL', 'ENV') or hasattr(cls.Internal, attr_name):
                logger.warning(f"Cannot override internal generator setting: {env_key}")
                continue

            parsed_value = auto_detect(env_value)

            if attr_name == 'LOG_LEVEL':
                if not isinstance(parsed_value, str) or parsed_value.upper() not in VALID_LOG_LEVELS:
                    logger.warning(
                        f"Invalid LOG_LEVEL: {env_value}. "
                        f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}. "
                        f"Using default value."
                    )
                    continue
                parsed_value = parsed_value.upper()

            setattr(cls, attr_name, parsed_value)

            if cls.VERBOSE_LOGGING:
                logger.info(f"Auto-set {attr_name} (from {env_key})")

        return cls

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration settings.

        Returns:
            True if configuration is valid
        """
        if not cls.Internal.FILE_EXTENSION.startswith("."):
            raise ValueError("Internal.FILE_EXTENSION must start with a dot")

        if cls.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}")

        if not cls.INSERTED_AT:
            raise ValueError("INSERTED_AT cannot be empty")

        return True


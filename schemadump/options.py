"""
Generator options.

GeneratorOptions is built once from the command-line flags (falling back to
Config) and never changes afterwards.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Type

from schemadump.config import Config
from schemadump.core.naming import camelize, underscore
from schemadump.exceptions import OptionsError

MIX_APP_PATTERN = re.compile(r'\bapp:\s*:"?([a-z_][a-zA-Z0-9_]*)"?')


@dataclass(frozen=True)
class GeneratorOptions:
    """Immutable options for one generator run."""
    repos: Tuple[str, ...] = ()
    app: str = "App"
    include: Optional[re.Pattern] = None
    exclude: Optional[re.Pattern] = None
    prefixes: Tuple[str, ...] = ()
    not_prefixes: Tuple[str, ...] = ()
    inserted_at: str = Config.Internal.DEFAULT_INSERTED_AT
    datetime_type: Optional[str] = None
    output_dir: Path = Path("lib")
    dry_run: bool = False

    @property
    def app_dir(self) -> str:
        """Directory of the application under output_dir, e.g. MyApp -> my_app."""
        return '/'.join(underscore(part) for part in self.app.split('.'))

    @property
    def models_dir(self) -> Path:
        return self.output_dir / self.app_dir / Config.Internal.MODELS_DIR_NAME


def compile_filter(pattern: Optional[str], flag: str) -> Optional[re.Pattern]:
    """
    Compile a table filter.

    Raises:
        OptionsError: If the regular expression is malformed
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise OptionsError(
            f"Invalid regular expression for {flag}: {pattern!r} ({e})",
            suggestion="Check the pattern syntax, e.g. --include '^pub_' --exclude '_archive$'.",
            error_code="E003",
        ) from e


def split_names(values: Iterable[str]) -> Tuple[str, ...]:
    """Flatten repeated and comma-separated flag values."""
    names = []
    for value in values or ():
        names.extend(item.strip() for item in value.split(',') if item.strip())
    return tuple(names)


def detect_app_name(project_dir: Path) -> Optional[str]:
    """
    Read the application name from a Mix project.

    Examples:
        app: :my_shop -> MyShop
    """
    mix_file = Path(project_dir) / "mix.exs"
    if not mix_file.is_file():
        return None

    match = MIX_APP_PATTERN.search(mix_file.read_text(encoding="utf-8"))
    if not match:
        return None
    return camelize(match.group(1))


def build_options(
    config: Type[Config] = Config,
    repos: Iterable[str] = (),
    app: Optional[str] = None,
    include: Optional[str] = None,
    exclude: Optional[str] = None,
    prefixes: Iterable[str] = (),
    not_prefixes: Iterable[str] = (),
    inserted_at: Optional[str] = None,
    datetime_type: Optional[str] = None,
    output_dir: Optional[str] = None,
    dry_run: bool = False,
    project_dir: Optional[Path] = None,
) -> GeneratorOptions:
    """
    Fold command-line flags and configuration into GeneratorOptions.

    Flags win over Config values. Repository resolution happens later, so
    ``repos`` may be empty here.

    Raises:
        OptionsError: On a malformed filter or when no application name can be found
    """
    app_name = app or config.APP or detect_app_name(project_dir or Path.cwd())
    if not app_name:
        raise OptionsError(
            "Could not determine the application name",
            suggestion="Pass --app MyApp, set SCHEMADUMP_APP, or run inside a Mix project.",
            error_code="E002",
        )

    return GeneratorOptions(
        repos=tuple(repos or ()),
        app=app_name,
        include=compile_filter(include, "--include"),
        exclude=compile_filter(exclude, "--exclude"),
        prefixes=split_names(prefixes),
        not_prefixes=split_names(not_prefixes),
        inserted_at=inserted_at or config.INSERTED_AT or Config.Internal.DEFAULT_INSERTED_AT,
        datetime_type=datetime_type or config.DATETIME_TYPE,
        output_dir=Path(output_dir or config.OUTPUT_DIR),
        dry_run=dry_run,
    )

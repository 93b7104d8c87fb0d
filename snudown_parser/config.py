"""Configuration loading and management."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from .constants import DEFAULT_LINK

CONFIG_TABLE = "snudown-parser"
MAX_FILE_SIZE_ENV_VAR = "SNUDOWN_PARSER_MAX_FILE_SIZE"


@dataclass
class ParserConfig:
    """Configuration for scanning Snudown HTML.

    Attributes:
        default_link: Link target recorded for anchors without an ``href``.
        escaped_quotes: Attribute quoting convention. When True, attribute
            values and tag-table keys use Snudown's JSON-escaped ``\\"``
            delimiters; when False, plain ``"`` delimiters.
        max_file_size: Maximum file size in bytes accepted by `parse_file`.
        outline_indent: Indentation per nesting level in rendered outlines.

    Examples:
        ParserConfig(default_link="https://example.com", escaped_quotes=False)
    """

    default_link: str = DEFAULT_LINK
    escaped_quotes: bool = True

    # Limits
    max_file_size: int = 10 * 1024 * 1024

    # Formatting
    outline_indent: str = "    "

    @property
    def quote_width(self) -> int:
        """Number of delimiter characters wrapping each attribute value."""
        return 2 if self.escaped_quotes else 1


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`default_link` must not be empty")
    """


def load_config(search_path: Path) -> ParserConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.snudown-parser]`` table from `pyproject.toml` and the
    ``[snudown-parser]`` or ``[tool.snudown-parser]`` table from
    `.snudown-parser.toml`. Returns defaults when no configuration is found.
    TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for lookup.

    Returns:
        ParserConfig: Loaded configuration with defaults applied.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{CONFIG_TABLE}.toml",
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ParserConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> ParserConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ParserConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys are conventionally dashed; dataclass fields are not.
    normalized = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return ParserConfig(**normalized)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ParserConfig) -> None:
    """Validate a `ParserConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a field has the wrong type, a string field is empty, or
            the size limit is not a positive integer.
    """
    if not isinstance(config.default_link, str) or not config.default_link:
        raise ConfigError("`default_link` must be a non-empty string")
    if not isinstance(config.escaped_quotes, bool):
        raise ConfigError("`escaped_quotes` must be a boolean")
    if not isinstance(config.outline_indent, str) or not config.outline_indent:
        raise ConfigError("`outline_indent` must be a non-empty string")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: ParserConfig, **overrides: object) -> ParserConfig:
    """Apply override values to a `ParserConfig`.

    Args:
        config: Base configuration to update.
        overrides: Values keyed by field name; None values are ignored.

    Returns:
        ParserConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not a `ParserConfig` field.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def get_max_file_size(default: int) -> int:
    """Resolve the maximum file size, honouring the environment override.

    Args:
        default: Fallback value in bytes when the variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ConfigError: If the environment value is not a positive integer.
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        raise ConfigError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        ) from error

    if max_size <= 0:
        raise ConfigError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}.")
    return max_size


def build_config(search_path: Path, **overrides: object) -> ParserConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        ParserConfig: Validated configuration.

    Raises:
        ConfigError: If loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), escaped_quotes=False)
    """
    config = load_config(search_path)
    try:
        config = apply_overrides(config, **overrides)
    except TypeError as error:
        raise ConfigError(str(error)) from error
    validate_config(config)
    return config

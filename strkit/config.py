"""Configuration loading and management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_FILLER, DEFAULT_MAX_INPUT_SIZE
from .models import CODEC_SPECS, CaseStyle

logger = logging.getLogger(__name__)


@dataclass
class StrkitConfig:
    """Defaults applied by the `strkit` command line.

    Attributes:
        filler: Text appended by ``truncate``.
        case_sensitive: Whether ``count`` matches case-sensitively.
        allow_overlapping: Whether ``count`` allows overlapping matches.
        codec: Named codec used by ``encode``/``decode`` (``"binary"``,
            ``"hex"``, ``"decimal"``, or the aliases ``"bin"``/``"dec"``).
        strict_codec: Whether ``encode`` rejects code units that do not fit
            in a digit group.
        case_style: Default style for ``case`` (``"camel"``, ``"studly"``,
            ``"kebab"``, ``"snake"``, or the alias ``"pascal"``).
        slug_fallback: Value printed by ``slugify`` when the slug is empty.
        max_input_size: Maximum input file size in bytes.

    Examples:
        StrkitConfig(codec="binary", filler=" [more]")
    """

    # Truncation
    filler: str = DEFAULT_FILLER

    # Counting
    case_sensitive: bool = True
    allow_overlapping: bool = False

    # Codec
    codec: str = "hex"
    strict_codec: bool = False

    # Case conversion and slugs
    case_style: str = "camel"
    slug_fallback: str = ""

    # Limits
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`codec` must be one of: binary, hex, decimal")
    """


_CODEC_ALIASES = {"bin": "binary", "dec": "decimal"}
_CASE_STYLE_ALIASES = {"pascal": "studly"}


def load_config(search_path: Path) -> StrkitConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.strkit]`` table from `pyproject.toml` and the ``[strkit]`` or
    ``[tool.strkit]`` table from `.strkit.toml` when present. Returns default
    values when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        StrkitConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "strkit")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".strkit.toml",
            table_paths=[("strkit",), ("tool", "strkit")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    logger.debug("No strkit configuration found above %s; using defaults", search_path)
    return StrkitConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> StrkitConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.warning("Skipping unreadable configuration file %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        logger.debug("Loading [%s] from %s", ".".join(table_path), config_file)
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
) -> StrkitConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return StrkitConfig()

    try:
        return StrkitConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: StrkitConfig) -> StrkitConfig:
    """Resolve codec and case style aliases to their canonical names."""
    codec = config.codec
    if isinstance(codec, str):
        codec = _CODEC_ALIASES.get(codec.lower(), codec.lower())

    case_style = config.case_style
    if isinstance(case_style, str):
        case_style = _CASE_STYLE_ALIASES.get(case_style.lower(), case_style.lower())

    return replace(config, codec=codec, case_style=case_style)


def validate_config(config: StrkitConfig) -> None:
    """Validate a `StrkitConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a field has the wrong type, names an unknown codec or
            case style, or the input size limit is not a positive integer.

    Examples:
        validate_config(StrkitConfig(codec="decimal"))
    """
    config = normalize_config(config)

    for key in ("filler", "slug_fallback"):
        if not isinstance(getattr(config, key), str):
            raise ConfigError(f"`{key}` must be a string")

    for key in ("case_sensitive", "allow_overlapping", "strict_codec"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")

    if config.codec not in CODEC_SPECS:
        raise ConfigError(
            "`codec` must be one of: " + ", ".join([*CODEC_SPECS, *_CODEC_ALIASES])
        )

    styles = [style.value for style in CaseStyle]
    if config.case_style not in styles:
        raise ConfigError(
            "`case_style` must be one of: " + ", ".join([*styles, *_CASE_STYLE_ALIASES])
        )

    _ensure_integers({"max_input_size": config.max_input_size})
    _ensure_positive({"max_input_size": config.max_input_size})


def apply_overrides(config: StrkitConfig, **overrides: object) -> StrkitConfig:
    """Apply override values to a `StrkitConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        StrkitConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `StrkitConfig`.

    Examples:
        updated = apply_overrides(config, codec="binary", filler=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> StrkitConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        StrkitConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), codec="dec")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")

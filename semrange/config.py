"""Configuration file loader for semrange.

Configuration only affects the command-line interface; the library API
takes no configuration. Two file formats are supported:

- ``semrange.toml`` — settings under the ``[semrange]`` table
- ``pyproject.toml`` — settings under the ``[tool.semrange]`` table

Discovery order:

1. Explicit path from ``--config`` or ``SEMRANGE_CONFIG``
2. ``semrange.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.semrange]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``semrange.toml``)::

    [semrange]
    default_format = "simple"
    fail_on_mismatch = false
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import tomli as tomllib

from semrange.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_FAIL_ON_MISMATCH,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)
from semrange.exceptions import ConfigError
from semrange.utils.logger import get_logger

logger = get_logger("config")


@dataclass
class SemRangeConfig:
    """Parsed and validated semrange configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        default_format: Output format used when ``--format`` is omitted.
        fail_on_mismatch: Make ``check`` exit with status 1 when a version
            does not satisfy the range.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    default_format: str = DEFAULT_OUTPUT_FORMAT
    fail_on_mismatch: bool = DEFAULT_FAIL_ON_MISMATCH

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the user-facing options for debug logging."""
        return {
            "default_format": self.default_format,
            "fail_on_mismatch": self.fail_on_mismatch,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    standalone = cwd / CONFIG_FILE_NAME
    if standalone.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, standalone)
        return standalone

    pyproject = cwd / "pyproject.toml"
    if pyproject.is_file() and _pyproject_has_semrange_section(pyproject):
        logger.debug("Found [tool.semrange] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_semrange_section(path: Path) -> bool:
    """Return True if ``path`` parses and holds a ``[tool.semrange]`` table.

    A pyproject.toml that fails to parse is treated as having no section;
    it belongs to the project, not to semrange.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and "semrange" in tool


def load_config(config_path: Optional[Path] = None) -> SemRangeConfig:
    """Load and validate semrange configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`SemRangeConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return SemRangeConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("semrange", {})
    else:
        section = raw.get("semrange", {})

    if not section:
        logger.debug("Config file found but no semrange section, using defaults")
        return SemRangeConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> SemRangeConfig:
    """Validate a ``[semrange]`` or ``[tool.semrange]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or an unknown output format.
    """
    config = SemRangeConfig()

    known = {"default_format", "fail_on_mismatch"}
    unknown = set(section.keys()) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "default_format" in section:
        val = section["default_format"]
        if not isinstance(val, str):
            raise ConfigError(
                f"default_format must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="default_format",
            )
        if val.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"default_format must be one of "
                f"{', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=config_path,
                option="default_format",
            )
        config.default_format = val.lower()

    if "fail_on_mismatch" in section:
        val = section["fail_on_mismatch"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"fail_on_mismatch must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="fail_on_mismatch",
            )
        config.fail_on_mismatch = val

    return config

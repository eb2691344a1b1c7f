"""Central configuration and constants for ``tracecov``.

Settings come from the ``[tool.tracecov]`` table of ``pyproject.toml``::

    [tool.tracecov]
    folder = "src"
    source_suffix = ".py"
    format = "lcov"
    output = "lcov.info"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from tracecov._meta import logger
from tracecov.errors import ConfigError
from tracecov.render.render import FORMATS
from tracecov.traces.discover import DEFAULT_SOURCE_SUFFIX

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

DEFAULT_FOLDER = "src"
DEFAULT_FORMAT = "human"


@dataclass(frozen=True, slots=True)
class TracecovConfig:
    folder: Path = Path(DEFAULT_FOLDER)
    source_suffix: str = DEFAULT_SOURCE_SUFFIX
    format: str = DEFAULT_FORMAT
    output: Path | None = None


def _get_tool_table(pyproject: Path) -> dict[str, object] | None:
    """Extract the ``[tool.tracecov]`` table from *pyproject*."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return None

    table = data.get("tool", {}).get("tracecov")
    return table if isinstance(table, dict) else None


def _str_option(table: dict[str, object], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str) or not value:
        msg = f"[tool.tracecov] {key} must be a non-empty string, got {value!r}"
        raise ConfigError(msg)
    return value


def config_from_table(table: dict[str, object]) -> TracecovConfig:
    """Validate a ``[tool.tracecov]`` table and build a :class:`TracecovConfig`."""
    unknown = sorted(set(table) - {"folder", "source_suffix", "format", "output"})
    if unknown:
        logger.warning("ignoring unknown [tool.tracecov] keys: %s", ", ".join(unknown))

    folder = _str_option(table, "folder", DEFAULT_FOLDER)
    suffix = _str_option(table, "source_suffix", DEFAULT_SOURCE_SUFFIX)
    if not suffix.startswith("."):
        msg = f"[tool.tracecov] source_suffix must start with '.', got {suffix!r}"
        raise ConfigError(msg)
    fmt = _str_option(table, "format", DEFAULT_FORMAT).lower()
    if fmt not in FORMATS:
        msg = f"[tool.tracecov] format must be one of {', '.join(FORMATS)}, got {fmt!r}"
        raise ConfigError(msg)
    output = _str_option(table, "output", "-") if "output" in table else None

    return TracecovConfig(
        folder=Path(folder),
        source_suffix=suffix,
        format=fmt,
        output=Path(output) if output is not None else None,
    )


def load_config(pyproject: Path | None = None) -> TracecovConfig:
    """Load settings from *pyproject* (default ``./pyproject.toml``).

    A missing or unreadable file yields the defaults; an invalid value
    raises :class:`~tracecov.errors.ConfigError`.
    """
    path = pyproject if pyproject is not None else Path("./pyproject.toml").resolve()
    if not path.exists():
        return TracecovConfig()
    table = _get_tool_table(path)
    if table is None:
        return TracecovConfig()
    logger.debug("using [tool.tracecov] settings from %s", path)
    return config_from_table(table)


__all__ = [
    "DEFAULT_FOLDER",
    "DEFAULT_FORMAT",
    "LOG_FORMAT",
    "TracecovConfig",
    "config_from_table",
    "load_config",
]

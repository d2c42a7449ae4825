# topmark:header:start
#
#   project      : RstExtract
#   file         : loaders.py
#   file_relpath : src/rstextract/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is read from ``rstextract.toml`` (top-level table) or from the
``[tool.rstextract]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures; typed getters validate
individual values and raise `ConfigError` naming the file and key.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from rstextract.config.logging import get_logger
from rstextract.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE, RSTEXTRACT_TOML_NAME
from rstextract.errors import ConfigError

if TYPE_CHECKING:
    from rstextract.config.logging import RstExtractLogger
    from rstextract.config.types import TomlTable

logger: RstExtractLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        TomlTable: Parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError("Cannot read config file", path=path, cause=exc) from exc
    try:
        data: TomlTable = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError("Malformed TOML in", path=path, cause=exc) from exc
    logger.debug("Loaded TOML from %s (%d top-level key(s))", path, len(data))
    return data


def extract_config_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the RstExtract table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.rstextract]`` (None when absent); any
    other file is taken as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(PYPROJECT_TOOL_TABLE)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_TABLE}] is not a table", path=path)
    return table


def discover_config_file(start: Path) -> Path | None:
    """Return the config file that applies to directory ``start``, if any.

    ``rstextract.toml`` wins over ``pyproject.toml``; the latter only counts
    when it has a ``[tool.rstextract]`` table.
    """
    candidate: Path = start / RSTEXTRACT_TOML_NAME
    if candidate.is_file():
        logger.debug("Discovered config file: %s", candidate)
        return candidate
    candidate = start / PYPROJECT_TOML_NAME
    if (
        candidate.is_file()
        and extract_config_table(load_toml_dict(candidate), candidate) is not None
    ):
        logger.debug("Discovered config file: %s", candidate)
        return candidate
    return None


# --- Typed getters ---


def get_string_value_or_none(table: TomlTable, key: str, path: Path | None) -> str | None:
    """Return ``table[key]`` as a string, None if missing.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Expected a string for '{key}', got {value!r}", path=path)
    return value


def get_bool_value_or_none(table: TomlTable, key: str, path: Path | None) -> bool | None:
    """Return ``table[key]`` as a bool, None if missing.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"Expected true/false for '{key}', got {value!r}", path=path)
    return value


def get_list_value(table: TomlTable, key: str, path: Path | None) -> list[str]:
    """Return ``table[key]`` as a list of strings (empty if missing).

    Raises:
        ConfigError: If the value is present but not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Expected a list of strings for '{key}', got {value!r}", path=path)
    return [str(v) for v in value]


def get_path_value_or_none(table: TomlTable, key: str, path: Path | None) -> Path | None:
    """Return ``table[key]`` as a Path, resolved against the config file's directory."""
    raw: str | None = get_string_value_or_none(table, key, path)
    if raw is None:
        return None
    p = Path(raw)
    if not p.is_absolute() and path is not None:
        p = path.parent / p
    return p

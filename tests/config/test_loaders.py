# topmark:header:start
#
#   project      : RstExtract
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading, config discovery and typed getters."""

from __future__ import annotations

from pathlib import Path

import pytest

from rstextract.config.loaders import (
    discover_config_file,
    extract_config_table,
    get_bool_value_or_none,
    get_list_value,
    get_path_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from rstextract.errors import ConfigError
from tests.conftest import parametrize


def test_load_toml_dict_returns_plain_values(tmp_path: Path) -> None:
    """Parsed documents are plain dicts and lists."""
    cfg = tmp_path / "rstextract.toml"
    cfg.write_text('marker = "+doc"\nexclude = ["*_test.go"]\n', encoding="utf-8")

    data = load_toml_dict(cfg)

    assert data == {"marker": "+doc", "exclude": ["*_test.go"]}
    assert type(data) is dict
    assert type(data["exclude"]) is list


def test_load_toml_dict_malformed(tmp_path: Path) -> None:
    """Invalid TOML raises ConfigError naming the file."""
    cfg = tmp_path / "rstextract.toml"
    cfg.write_text("marker = \n", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        load_toml_dict(cfg)

    assert exc_info.value.path == cfg
    assert exc_info.value.cause is not None


def test_load_toml_dict_missing(tmp_path: Path) -> None:
    """A missing file raises ConfigError with the OSError as cause."""
    with pytest.raises(ConfigError) as exc_info:
        load_toml_dict(tmp_path / "nope.toml")

    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_extract_table_from_pyproject() -> None:
    """pyproject.toml contributes only its [tool.rstextract] table."""
    data = {"project": {"name": "x"}, "tool": {"rstextract": {"marker": "+m"}}}

    assert extract_config_table(data, Path("pyproject.toml")) == {"marker": "+m"}
    assert extract_config_table({"project": {}}, Path("pyproject.toml")) is None


def test_extract_table_from_dedicated_file() -> None:
    """Any other file is used whole."""
    data = {"marker": "+m"}

    assert extract_config_table(data, Path("custom.toml")) is data


def test_extract_table_rejects_non_table() -> None:
    """A scalar [tool.rstextract] is a configuration error."""
    with pytest.raises(ConfigError, match="is not a table"):
        extract_config_table({"tool": {"rstextract": 3}}, Path("pyproject.toml"))


def test_discovery_prefers_dedicated_file(tmp_path: Path) -> None:
    """rstextract.toml wins over pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text("[tool.rstextract]\n", encoding="utf-8")
    (tmp_path / "rstextract.toml").write_text("", encoding="utf-8")

    assert discover_config_file(tmp_path) == tmp_path / "rstextract.toml"


def test_discovery_needs_tool_table_in_pyproject(tmp_path: Path) -> None:
    """A pyproject.toml without our table is not a config file."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(tmp_path) is None

    pyproject.write_text('[tool.rstextract]\nmarker = "+m"\n', encoding="utf-8")

    assert discover_config_file(tmp_path) == pyproject


def test_discovery_accepts_empty_tool_table(tmp_path: Path) -> None:
    """An empty [tool.rstextract] table still marks pyproject.toml as the config file."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n\n[tool.rstextract]\n', encoding="utf-8")

    assert discover_config_file(tmp_path) == pyproject


def test_discovery_in_empty_directory(tmp_path: Path) -> None:
    """No candidates means no config file."""
    assert discover_config_file(tmp_path) is None


@parametrize(
    "getter, value",
    [
        (get_string_value_or_none, 3),
        (get_bool_value_or_none, "yes"),
        (get_list_value, "*.go"),
        (get_list_value, ["*.go", 1]),
        (get_path_value_or_none, ["a"]),
    ],
)
def test_typed_getters_reject_wrong_types(getter: object, value: object) -> None:
    """Values of the wrong type raise ConfigError naming the key."""
    with pytest.raises(ConfigError, match="'key'"):
        getter({"key": value}, "key", Path("rstextract.toml"))  # type: ignore[operator]


def test_typed_getters_missing_keys() -> None:
    """Missing keys yield None or an empty list."""
    assert get_string_value_or_none({}, "k", None) is None
    assert get_bool_value_or_none({}, "k", None) is None
    assert get_path_value_or_none({}, "k", None) is None
    assert get_list_value({}, "k", None) == []


def test_relative_paths_resolve_against_config_directory(tmp_path: Path) -> None:
    """Relative paths are anchored at the config file's directory."""
    cfg = tmp_path / "conf" / "rstextract.toml"

    assert get_path_value_or_none({"d": "src"}, "d", cfg) == tmp_path / "conf" / "src"
    assert get_path_value_or_none({"d": str(tmp_path)}, "d", cfg) == tmp_path
    assert get_path_value_or_none({"d": "src"}, "d", None) == Path("src")

# topmark:header:start
#
#   project      : RstExtract
#   file         : types.py
#   file_relpath : src/rstextract/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

# Plain-dict view of a parsed TOML table.
TomlTable = dict[str, Any]


class ErrorPolicy(str, Enum):
    """What to do when a single output document cannot be written."""

    FAIL_FAST = "fail-fast"
    KEEP_GOING = "keep-going"

    @classmethod
    def from_name(cls, key_name: str | None) -> ErrorPolicy | None:
        """Find the ErrorPolicy member by its value or case-insensitive name.

        Accepts ``"fail-fast"``, ``"fail_fast"`` and ``"FAIL_FAST"`` alike.

        Args:
            key_name (str | None): The string name of the member or None.

        Returns:
            ErrorPolicy | None: The matching member, or None if the key is None or unmatched.
        """
        if key_name is None:
            return None
        target_name: str = key_name.strip().upper().replace("-", "_")
        return cls.__members__.get(target_name)

# topmark:header:start
#
#   project      : RstExtract
#   file         : __init__.py
#   file_relpath : src/rstextract/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for RstExtract.

Re-exports the config model so callers can write ``from rstextract.config import Config``.
"""

from __future__ import annotations

from rstextract.config.model import Config, MutableConfig
from rstextract.config.types import ArgsLike, ErrorPolicy

__all__ = [
    "ArgsLike",
    "Config",
    "ErrorPolicy",
    "MutableConfig",
]

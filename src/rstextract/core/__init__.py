# topmark:header:start
#
#   project      : RstExtract
#   file         : __init__.py
#   file_relpath : src/rstextract/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extraction core: file ordering, marker detection and per-unit extraction.

Everything in this package is pure: no I/O, no global state, no exceptions on
well-formed input.
"""

from __future__ import annotations

from rstextract.core.extractor import extract_unit
from rstextract.core.marker import extract_payload, is_marked
from rstextract.core.model import CompilationUnit, MemberFile, UnitSet, base_name_of, strip_ext
from rstextract.core.ordering import FileTier, classify_file, file_sort_key, order_files, sort_files

__all__ = [
    "CompilationUnit",
    "FileTier",
    "MemberFile",
    "UnitSet",
    "base_name_of",
    "classify_file",
    "extract_payload",
    "extract_unit",
    "file_sort_key",
    "is_marked",
    "order_files",
    "sort_files",
    "strip_ext",
]

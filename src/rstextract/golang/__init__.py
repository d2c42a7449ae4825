# topmark:header:start
#
#   project      : RstExtract
#   file         : __init__.py
#   file_relpath : src/rstextract/golang/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Go source support: package clause, comment grouping and comment text."""

from __future__ import annotations

from rstextract.golang.comments import comment_group_text, is_directive
from rstextract.golang.scanner import GoSyntaxError, ParsedFile, parse_file, scan_tokens

__all__ = [
    "GoSyntaxError",
    "ParsedFile",
    "comment_group_text",
    "is_directive",
    "parse_file",
    "scan_tokens",
]

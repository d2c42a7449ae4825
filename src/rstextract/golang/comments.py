# topmark:header:start
#
#   project      : RstExtract
#   file         : comments.py
#   file_relpath : src/rstextract/golang/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalize a Go comment group into plain text.

The rules follow ``go/ast.CommentGroup.Text``:

- ``//`` is removed together with one following space; ``/*`` and ``*/`` are removed;
- ``//`` directive comments (``//line``, ``//go:generate`` and the like) are dropped;
- trailing whitespace is stripped from every line;
- leading blank lines are dropped and interior runs of blank lines collapse to one;
- trailing blank lines are dropped and non-empty text ends with one newline.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_DIRECTIVE_PREFIXES: tuple[str, ...] = ("line ", "extern ", "export ")
_TOOL_DIRECTIVE_RE: re.Pattern[str] = re.compile(r"[a-z0-9]+:[a-z0-9]")

_TRAILING_WS: str = " \t\n\r"


def is_directive(text: str) -> bool:
    """Return True if a ``//`` comment body (without the slashes) is a directive.

    Args:
        text (str): Comment text following ``//``.

    Returns:
        bool: True for ``line``/``extern``/``export`` directives and for
            ``tool:directive`` forms such as ``go:generate``.
    """
    if text.startswith(_DIRECTIVE_PREFIXES):
        return True
    return _TOOL_DIRECTIVE_RE.match(text) is not None


def _strip_delimiters(comment: str) -> str | None:
    """Return the body of one raw comment, or None when it is a directive."""
    if comment.startswith("//"):
        body: str = comment[2:]
        if body.startswith(" "):
            return body[1:]
        if body and is_directive(body):
            return None
        return body
    if comment.startswith("/*"):
        return comment[2:-2]
    return comment


def comment_group_text(comments: Iterable[str]) -> str:
    """Return the normalized text of a comment group.

    Args:
        comments (Iterable[str]): Raw comments of the group, delimiters included.

    Returns:
        str: Newline-joined text; empty if the group holds no text.
    """
    lines: list[str] = []
    for comment in comments:
        body: str | None = _strip_delimiters(comment)
        if body is None:
            continue
        lines.extend(line.rstrip(_TRAILING_WS) for line in body.split("\n"))

    kept: list[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)

    while kept and not kept[-1]:
        kept.pop()
    if not kept:
        return ""
    return "\n".join(kept) + "\n"

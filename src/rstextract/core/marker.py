# topmark:header:start
#
#   project      : RstExtract
#   file         : marker.py
#   file_relpath : src/rstextract/core/marker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker detection for documentation comment blocks.

A comment block is documentation payload when its first line, stripped of
surrounding whitespace, is exactly the marker token. The payload is everything
after that first line, verbatim.
"""

from __future__ import annotations

from rstextract.constants import DEFAULT_MARKER


def extract_payload(text: str, marker: str = DEFAULT_MARKER) -> str | None:
    """Return the payload of a normalized comment block, or None if it is not marked.

    Args:
        text (str): Delimiter-stripped, newline-joined comment text.
        marker (str): Marker token expected alone on the first line.

    Returns:
        str | None: Text after the first newline (``""`` when the block is only the
            marker line), or None when the first line is not the marker.
    """
    head, _, rest = text.partition("\n")
    if head.strip() != marker:
        return None
    return rest


def is_marked(text: str, marker: str = DEFAULT_MARKER) -> bool:
    """Return True if ``text`` carries the marker on its first line."""
    return extract_payload(text, marker) is not None

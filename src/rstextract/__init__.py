# topmark:header:start
#
#   project      : RstExtract
#   file         : __init__.py
#   file_relpath : src/rstextract/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RstExtract package.

RstExtract is a build-time documentation extractor. It reads the Go files of a
source directory, picks the comment blocks whose first line is the ``+rst``
marker, and writes their text, in a predictable order, to one reStructuredText
document per package.
"""

from __future__ import annotations

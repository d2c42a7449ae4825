# topmark:header:start
#
#   project      : RstExtract
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for extraction driver tests.

Key utilities:
  * TWO_UNIT_SOURCES: a small tree with two documented packages and one
    undocumented package.
  * FailingSink: a sink that refuses to write the documents of chosen units,
    standing in for an unwritable output file.
  * RecordingSink: a sink that keeps rendered documents in memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rstextract.errors import OutputFileError
from rstextract.writer import WriteResult, WriteStatus

if TYPE_CHECKING:
    from pathlib import Path

TWO_UNIT_SOURCES: dict[str, str] = {
    "alpha.go": "package alpha\n\n// +rst\n// Alpha docs.\n",
    "beta.go": "package beta\n\n/* +rst\nBeta docs.\n*/\n",
    "gamma.go": "package gamma\n\n// Not documented.\n",
}


@dataclass
class RecordingSink:
    """Sink keeping every document it receives, keyed by path."""

    documents: dict[Path, str] = field(default_factory=lambda: {})

    def write(self, path: Path, text: str) -> WriteResult:
        """Record ``text`` for ``path``."""
        self.documents[path] = text
        return WriteResult(status=WriteStatus.WRITTEN, path=path, bytes_written=len(text))


@dataclass
class FailingSink:
    """Sink raising `OutputFileError` for the documents of ``failing_units``."""

    failing_units: frozenset[str]
    inner: RecordingSink = field(default_factory=RecordingSink)

    def write(self, path: Path, text: str) -> WriteResult:
        """Fail for listed units, delegate otherwise."""
        if path.stem in self.failing_units:
            raise OutputFileError("Cannot create", path=path, cause=PermissionError(13, "denied"))
        return self.inner.write(path, text)

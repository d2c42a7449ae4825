# topmark:header:start
#
#   project      : RstExtract
#   file         : writer.py
#   file_relpath : src/rstextract/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render and write per-unit documentation files.

Sinks
-----
- FileSystemSink: creates or overwrites ``<output_dir>/<unit><suffix>``.
- NullSink: dry run; reports the document without touching the filesystem.

Documents are written as UTF-8 with newline translation disabled, so repeated
runs over unchanged input produce byte-identical files on every platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from rstextract.config.logging import get_logger
from rstextract.constants import OUTPUT_DIR_MODE
from rstextract.errors import OutputDirectoryError, OutputFileError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from rstextract.config.logging import RstExtractLogger

logger: RstExtractLogger = get_logger(__name__)


def render_document(payloads: Iterable[str]) -> str:
    """Concatenate payloads, each followed by exactly one newline."""
    return "".join(f"{payload}\n" for payload in payloads)


def ensure_output_dir(path: Path) -> None:
    """Create ``path`` (and parents) if needed.

    Raises:
        OutputDirectoryError: If the directory cannot be created.
    """
    try:
        path.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError("Cannot create", path=path, cause=exc) from exc


class WriteStatus(Enum):
    """Outcome of handing a document to a sink."""

    WRITTEN = "written"
    PREVIEWED = "previewed"


@dataclass(frozen=True)
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    path: Path
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for sinks receiving rendered documents."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Deliver ``text`` destined for ``path``.

        Args:
            path (Path): Target document path.
            text (str): Rendered document.

        Returns:
            WriteResult: What happened and how many bytes were written.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, path: Path, text: str) -> WriteResult:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: would write %d chars to %s", len(text), path)
        return WriteResult(status=WriteStatus.PREVIEWED, path=path, bytes_written=0)


class FileSystemSink:
    """Filesystem sink that creates or truncates the target document."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Write ``text`` to ``path``.

        Raises:
            OutputFileError: If the file cannot be created or written.
        """
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            raise OutputFileError("Cannot create", path=path, cause=exc) from exc
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(status=WriteStatus.WRITTEN, path=path, bytes_written=bytes_written)


def select_sink(*, dry_run: bool) -> WriteSink:
    """Return `NullSink` for dry runs, `FileSystemSink` otherwise."""
    if dry_run:
        logger.debug("Selected NULL sink (dry run)")
        return NullSink()
    return FileSystemSink()

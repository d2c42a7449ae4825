# topmark:header:start
#
#   project      : RstExtract
#   file         : errors.py
#   file_relpath : src/rstextract/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised at the I/O boundary of RstExtract.

The extraction core (ordering, marker detection, unit extraction) is total and
never raises. Everything that can fail lives around it: reading configuration,
reading and parsing sources, creating the output directory and writing output
files. Each exception keeps the offending path and the underlying cause so the
CLI can report it once with enough context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class RstExtractError(Exception):
    """Base class for all RstExtract errors.

    Attributes:
        path (Path | None): File or directory the error relates to.
        cause (BaseException | None): Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: Path | None = path
        self.cause: BaseException | None = cause

    def __str__(self) -> str:
        if self.path is None and self.cause is None:
            return self.message
        if self.cause is None:
            return f"{self.message}: {self.path}"
        if self.path is None:
            return f"{self.message}: {self.cause}"
        return f"{self.message} {self.path}: {self.cause}"


class ConfigError(RstExtractError):
    """Configuration file is unreadable, malformed, or has invalid values."""


class SourceDirectoryError(RstExtractError):
    """The source directory is missing, not a directory, or cannot be listed."""


class SourceParseError(RstExtractError):
    """A source file cannot be read, decoded, or parsed."""


class OutputDirectoryError(RstExtractError):
    """The output directory cannot be created."""


class OutputFileError(RstExtractError):
    """An output document cannot be created or written."""

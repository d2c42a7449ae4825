# topmark:header:start
#
#   project      : RstExtract
#   file         : console.py
#   file_relpath : src/rstextract/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output of the ``rstextract`` command.

`ExtractionConsole` renders one line per compilation unit (``Wrote ...``,
``Would write ...``, ``Skipped ...``, ``Failed ...``) and the final error
line, filtered by the verbosity chosen with ``-v``/``-q``. Diagnostics go
through `logging` instead (see `rstextract.config.logging`).

Per-unit lines go to stdout except failures, which go to stderr with the
error message.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import click

if TYPE_CHECKING:
    from pathlib import Path


class ConsoleLike(Protocol):
    """Output surface used by the command and its error classes."""

    def unit_written(self, path: Path) -> None:
        """Report a document written to ``path``."""
        ...

    def unit_previewed(self, path: Path) -> None:
        """Report a document that a dry run would write to ``path``."""
        ...

    def unit_skipped(self, unit: str) -> None:
        """Report a unit without documentation."""
        ...

    def unit_failed(self, unit: str, error: Exception) -> None:
        """Report a unit whose document could not be written."""
        ...

    def usage(self, text: str) -> None:
        """Print the usage line."""
        ...

    def error(self, message: str) -> None:
        """Print a fatal error message."""
        ...


class ExtractionConsole:
    """Click-backed `ConsoleLike`.

    Args:
        verbosity (int): Output threshold as a logging level; ``Wrote`` lines need
            WARNING or lower, ``Skipped`` lines INFO or lower.
        enable_color (bool): If True, styles skipped units dim and errors red.
        out (TextIO | None): Stream for per-unit lines. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for failures. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        verbosity: int = logging.WARNING,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.verbosity: int = verbosity
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _echo(self, text: str, *, to_err: bool = False, **style: object) -> None:
        if self.enable_color and style:
            text = click.style(text, **style)  # type: ignore[arg-type]
        click.echo(text, file=self.err if to_err else self.out, color=self.enable_color)

    def unit_written(self, path: Path) -> None:
        """Print ``Wrote <path>`` unless quiet."""
        if self.verbosity <= logging.WARNING:
            self._echo(f"Wrote {path}")

    def unit_previewed(self, path: Path) -> None:
        """Print ``Would write <path>`` unless quiet."""
        if self.verbosity <= logging.WARNING:
            self._echo(f"Would write {path}")

    def unit_skipped(self, unit: str) -> None:
        """Print ``Skipped <unit>: no documentation`` with ``-v``."""
        if self.verbosity <= logging.INFO:
            self._echo(f"Skipped {unit}: no documentation", dim=True)

    def unit_failed(self, unit: str, error: Exception) -> None:
        """Print ``Failed <unit>: <error>`` to stderr, even when quiet."""
        self._echo(f"Failed {unit}: {error}", to_err=True, fg="yellow")

    def usage(self, text: str) -> None:
        """Print the usage line to stdout."""
        self._echo(text)

    def error(self, message: str) -> None:
        """Print ``Error: <message>`` to stderr."""
        self._echo(f"Error: {message}", to_err=True, fg="bright_red")

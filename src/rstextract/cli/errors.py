# topmark:header:start
#
#   project      : RstExtract
#   file         : errors.py
#   file_relpath : src/rstextract/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the RstExtract CLI.

Usage:
    Domain errors raised by the driver (`rstextract.errors`) are converted with
    `cli_error_from` into Click exceptions carrying a sysexits-aligned exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from rstextract.cli.exit_codes import ExitCode
from rstextract.errors import (
    ConfigError,
    OutputDirectoryError,
    OutputFileError,
    RstExtractError,
    SourceDirectoryError,
    SourceParseError,
)

if TYPE_CHECKING:
    from rstextract.cli.console import ConsoleLike


class RstExtractCliError(click.ClickException):
    """Base class for all RstExtract CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console: ConsoleLike | None = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(self.format_message())


class UsageCliError(RstExtractCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ConfigCliError(RstExtractCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class FileNotFoundCliError(RstExtractCliError):
    """Error when the source directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PermissionDeniedCliError(RstExtractCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class IOCliError(RstExtractCliError):
    """Error for I/O errors reading sources or writing documents."""

    exit_code = ExitCode.IO_ERROR


class EncodingCliError(RstExtractCliError):
    """Error for source files that cannot be decoded or parsed."""

    exit_code = ExitCode.ENCODING_ERROR


class UnexpectedCliError(RstExtractCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def cli_error_from(exc: RstExtractError) -> RstExtractCliError:
    """Map a domain error onto the CLI exception with the matching exit code.

    Permission problems map to `PermissionDeniedCliError` whatever stage they
    occur in; otherwise the domain error class decides.

    Args:
        exc (RstExtractError): The error raised by the driver or config layer.

    Returns:
        RstExtractCliError: Click exception carrying the message and exit code.
    """
    message: str = str(exc)
    if isinstance(exc, ConfigError):
        return ConfigCliError(message)
    if isinstance(exc.cause, PermissionError):
        return PermissionDeniedCliError(message)
    if isinstance(exc, SourceDirectoryError):
        if exc.cause is None or isinstance(exc.cause, FileNotFoundError):
            return FileNotFoundCliError(message)
        return IOCliError(message)
    if isinstance(exc, SourceParseError):
        if isinstance(exc.cause, OSError):
            return IOCliError(message)
        return EncodingCliError(message)
    if isinstance(exc, (OutputDirectoryError, OutputFileError)):
        return IOCliError(message)
    return UnexpectedCliError(message)

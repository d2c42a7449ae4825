# topmark:header:start
#
#   project      : RstExtract
#   file         : options.py
#   file_relpath : src/rstextract/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, extraction
settings) and their resolution logic, so the command itself can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import ParamSpec, TypeVar

import click

from rstextract.cli.errors import UsageCliError

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": 5,  # Custom TRACE (5) sits below logging.DEBUG.
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity as a logging level (lower means chattier).

    Raises:
        UsageCliError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise UsageCliError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, color_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. CLI override: ``ALWAYS`` gives True, ``NEVER`` gives False.
        2. Environment: ``FORCE_COLOR`` (set and not ``"0"``) gives True,
           ``NO_COLOR`` (set to any value) gives False.
        3. Auto: whether stdout is a TTY.

    Args:
        color_mode: Parsed ``--color`` value; None means not provided.
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled.
    """
    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v also reports packages without documentation).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def extraction_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the options controlling what is extracted and how it is written.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--marker",
        type=str,
        default=None,
        help="Token marking a documentation comment (default: +rst).",
    )(f)
    f = click.option(
        "--suffix",
        "source_suffix",
        type=str,
        default=None,
        help="Suffix of the source files to read (default: .go).",
    )(f)
    f = click.option(
        "--output-suffix",
        "output_suffix",
        type=str,
        default=None,
        help="Suffix of the generated documents (default: .rst).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Skip source files matching these gitignore-style patterns.",
    )(f)
    f = click.option(
        "--keep-going",
        "keep_going",
        is_flag=True,
        help="Keep processing other units when a document cannot be written.",
    )(f)
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Report the documents that would be written without writing them.",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Read settings from this TOML file (after any discovered config).",
    )(f)
    return f

# topmark:header:start
#
#   project      : RstExtract
#   file         : main.py
#   file_relpath : src/rstextract/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RstExtract command-line entry point.

Usage::

    rstextract [OPTIONS] SOURCE_DIR OUTPUT_DIR

Reads the Go files in SOURCE_DIR and writes one ``<package>.rst`` document per
package into OUTPUT_DIR, made of the comment blocks whose first line is the
``+rst`` marker. Without positional arguments (and without directories set in a
config file) the usage line is printed and the command exits successfully.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from rstextract.cli.console import ExtractionConsole
from rstextract.cli.errors import RstExtractCliError, cli_error_from
from rstextract.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    extraction_options,
    resolve_color_mode,
    resolve_verbosity,
)
from rstextract.config import Config, MutableConfig
from rstextract.config.logging import get_logger, resolve_env_log_level, setup_logging
from rstextract.constants import RSTEXTRACT_VERSION
from rstextract.errors import RstExtractError
from rstextract.pipeline import UnitStatus, run_extraction

if TYPE_CHECKING:
    from collections.abc import Callable

    from rstextract.cli.console import ConsoleLike
    from rstextract.config.logging import RstExtractLogger
    from rstextract.pipeline import ExtractionReport, UnitResult

logger: RstExtractLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    setup_logging(level=resolve_env_log_level())

    effective_mode: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    enable_color: bool = resolve_color_mode(color_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ExtractionConsole(
        verbosity=ctx.obj["verbosity_level"], enable_color=enable_color
    )


def _report_unit(console: ConsoleLike) -> Callable[[UnitResult], None]:
    """Return an ``on_result`` callback rendering each unit on ``console``."""

    def _report(result: UnitResult) -> None:
        if result.status is UnitStatus.FAILED and result.error is not None:
            console.unit_failed(result.unit, result.error)
        elif result.status is UnitStatus.EMPTY:
            console.unit_skipped(result.unit)
        elif result.path is not None:
            if result.status is UnitStatus.PREVIEWED:
                console.unit_previewed(result.path)
            else:
                console.unit_written(result.path)

    return _report


@click.command(
    name="rstextract",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Extract reStructuredText from marked source comments, one document per package.",
)
@click.argument("source_dir", required=False, type=click.Path(path_type=Path))
@click.argument("output_dir", required=False, type=click.Path(path_type=Path))
@extraction_options
@common_verbose_options
@common_color_options
@click.version_option(RSTEXTRACT_VERSION, "--version", prog_name="rstextract")
@click.pass_context
def cli(
    ctx: click.Context,
    source_dir: Path | None,
    output_dir: Path | None,
    marker: str | None,
    source_suffix: str | None,
    output_suffix: str | None,
    exclude_patterns: tuple[str, ...],
    keep_going: bool,
    dry_run: bool,
    config_file: Path | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the RstExtract CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    args: dict[str, Any] = {
        "source_dir": source_dir,
        "output_dir": output_dir,
        "marker": marker,
        "source_suffix": source_suffix,
        "output_suffix": output_suffix,
        "exclude_patterns": exclude_patterns,
        "keep_going": keep_going,
        "dry_run": dry_run,
    }
    try:
        config: Config = MutableConfig.load_merged(args, config_file=config_file).freeze()
    except RstExtractError as exc:
        raise cli_error_from(exc) from exc

    if config.source_dir is None or config.output_dir is None:
        console.usage(ctx.get_usage())
        return

    logger.debug("Effective config: %s", config)
    try:
        report: ExtractionReport = run_extraction(
            config, on_result=_report_unit(console)
        )
    except RstExtractError as exc:
        raise cli_error_from(exc) from exc

    if not report.ok:
        raise RstExtractCliError(f"{len(report.failed)} document(s) could not be written")


if __name__ == "__main__":
    cli()

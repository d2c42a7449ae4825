# topmark:header:start
#
#   project      : RstExtract
#   file         : pipeline.py
#   file_relpath : src/rstextract/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extraction driver: source directory in, one document per unit out.

Steps:
    1. load and group the source files (`rstextract.sources.load_units`);
    2. create the output directory (skipped for dry runs);
    3. for each unit, in name order, extract its payloads and hand non-empty
       results to the sink; units without payloads produce no file.

Failures while loading sources or creating the output directory always abort
the run. A failure to write one document aborts the run under
`ErrorPolicy.FAIL_FAST` (default) and is recorded in the report under
`ErrorPolicy.KEEP_GOING`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from rstextract.config.logging import get_logger
from rstextract.config.types import ErrorPolicy
from rstextract.core.extractor import extract_unit
from rstextract.errors import OutputFileError
from rstextract.sources import load_units
from rstextract.writer import WriteStatus, ensure_output_dir, render_document, select_sink

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from rstextract.config import Config
    from rstextract.config.logging import RstExtractLogger
    from rstextract.core.model import UnitSet
    from rstextract.writer import WriteResult, WriteSink

logger: RstExtractLogger = get_logger(__name__)


class UnitStatus(Enum):
    """Per-unit outcome of an extraction run."""

    WRITTEN = "written"
    PREVIEWED = "previewed"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class UnitResult:
    """Outcome for one compilation unit.

    Attributes:
        unit (str): Unit name.
        payload_count (int): Number of documentation payloads extracted.
        status (UnitStatus): What happened to the unit's document.
        path (Path | None): Target document path (None for empty units).
        bytes_written (int): Bytes written to ``path``.
        error (OutputFileError | None): Write failure under the keep-going policy.
    """

    unit: str
    payload_count: int
    status: UnitStatus
    path: Path | None = None
    bytes_written: int = 0
    error: OutputFileError | None = None


@dataclass
class ExtractionReport:
    """Per-unit results of a run, in processing order."""

    results: list[UnitResult] = field(default_factory=lambda: [])

    def by_status(self, status: UnitStatus) -> list[UnitResult]:
        """Return the results having ``status``."""
        return [r for r in self.results if r.status is status]

    @property
    def failed(self) -> list[UnitResult]:
        """Units whose document could not be written."""
        return self.by_status(UnitStatus.FAILED)

    @property
    def ok(self) -> bool:
        """True when no document failed."""
        return not self.failed


_STATUS_FROM_WRITE: dict[WriteStatus, UnitStatus] = {
    WriteStatus.WRITTEN: UnitStatus.WRITTEN,
    WriteStatus.PREVIEWED: UnitStatus.PREVIEWED,
}


def run_extraction(
    config: Config,
    *,
    sink: WriteSink | None = None,
    on_result: Callable[[UnitResult], None] | None = None,
) -> ExtractionReport:
    """Run a full extraction as described by ``config``.

    Args:
        config (Config): Run configuration; ``source_dir`` and ``output_dir`` must be set.
        sink (WriteSink | None): Destination for documents; defaults to the sink
            matching ``config.dry_run``.
        on_result (Callable[[UnitResult], None] | None): Called after each unit,
            e.g. to print progress.

    Returns:
        ExtractionReport: One result per unit.

    Raises:
        SourceDirectoryError: If the source directory cannot be read.
        SourceParseError: If a source file cannot be read or parsed.
        OutputDirectoryError: If the output directory cannot be created.
        OutputFileError: If a document cannot be written under the fail-fast policy.
    """
    units: UnitSet = load_units(config)

    if sink is None:
        sink = select_sink(dry_run=config.dry_run)
    if not config.dry_run and config.output_dir is not None:
        ensure_output_dir(config.output_dir)

    report = ExtractionReport()
    for unit in units:
        payloads: list[str] = extract_unit(unit, marker=config.marker)
        result: UnitResult
        if not payloads:
            logger.info("Unit '%s' has no documentation; no file written", unit.name)
            result = UnitResult(unit=unit.name, payload_count=0, status=UnitStatus.EMPTY)
        else:
            path: Path = config.output_path_for(unit.name)
            try:
                written: WriteResult = sink.write(path, render_document(payloads))
            except OutputFileError as exc:
                if config.error_policy is ErrorPolicy.FAIL_FAST:
                    raise
                logger.error("%s (continuing)", exc)
                result = UnitResult(
                    unit=unit.name,
                    payload_count=len(payloads),
                    status=UnitStatus.FAILED,
                    path=path,
                    error=exc,
                )
            else:
                result = UnitResult(
                    unit=unit.name,
                    payload_count=len(payloads),
                    status=_STATUS_FROM_WRITE[written.status],
                    path=written.path,
                    bytes_written=written.bytes_written,
                )
        report.results.append(result)
        if on_result is not None:
            on_result(result)

    logger.info(
        "Processed %d unit(s): %d written, %d empty, %d failed",
        len(report.results),
        len(report.by_status(UnitStatus.WRITTEN)),
        len(report.by_status(UnitStatus.EMPTY)),
        len(report.failed),
    )
    return report

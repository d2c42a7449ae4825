# topmark:header:start
#
#   project      : RstExtract
#   file         : extractor.py
#   file_relpath : src/rstextract/core/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extract the ordered documentation payloads of one compilation unit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rstextract.config.logging import get_logger
from rstextract.constants import DEFAULT_MARKER
from rstextract.core.marker import extract_payload
from rstextract.core.ordering import order_files

if TYPE_CHECKING:
    from rstextract.config.logging import RstExtractLogger
    from rstextract.core.model import CompilationUnit

logger: RstExtractLogger = get_logger(__name__)


def extract_unit(unit: CompilationUnit, *, marker: str = DEFAULT_MARKER) -> list[str]:
    """Return the payloads of ``unit`` in extraction order.

    Files are visited in `order_files` order and, within a file, comment blocks
    in source order. Unmarked blocks are skipped; nothing is deduplicated.

    Args:
        unit (CompilationUnit): The unit to extract.
        marker (str): Marker token flagging documentation blocks.

    Returns:
        list[str]: Payload strings, possibly empty.
    """
    payloads: list[str] = []
    for member in order_files(unit):
        for index, text in enumerate(member.comments):
            payload: str | None = extract_payload(text, marker)
            if payload is None:
                continue
            logger.trace("%s: block #%d matched (%d chars)", member.path, index, len(payload))
            payloads.append(payload)
    logger.debug(
        "Unit '%s': %d payload(s) from %d file(s)", unit.name, len(payloads), len(unit.files)
    )
    return payloads

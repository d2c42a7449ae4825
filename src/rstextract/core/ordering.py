# topmark:header:start
#
#   project      : RstExtract
#   file         : ordering.py
#   file_relpath : src/rstextract/core/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic ordering of the member files of a compilation unit.

Files are processed in this order:

1. the file whose base name equals the unit name (e.g. ``main.go`` in package ``main``);
2. the file whose base name is ``doc`` (``doc.go``);
3. every other file, in ascending lexicographic order of base name.

This lets authors put a document header in one of the first two files while
the rest of the package contributes in a stable, inspectable order.

Each file is classified into a `FileTier` once and files are sorted by the
composite key ``(tier, base_name, path)``, which is a total order regardless
of how the loader enumerated them.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from rstextract.constants import DOC_FILE_STEM

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rstextract.core.model import CompilationUnit, MemberFile


class FileTier(IntEnum):
    """Ordering priority class of a member file (lower sorts first)."""

    UNIT_NAME = 0
    DOC = 1
    OTHER = 2


def classify_file(base_name: str, unit_name: str, doc_name: str = DOC_FILE_STEM) -> FileTier:
    """Return the tier of a file within the unit called ``unit_name``.

    A unit-name match wins over a doc match, so in a unit named ``doc`` the file
    ``doc.go`` lands in the first tier.

    Args:
        base_name (str): Base name of the member file.
        unit_name (str): Name of the compilation unit.
        doc_name (str): Base name of the documentation file.

    Returns:
        FileTier: The file's tier.
    """
    if base_name == unit_name:
        return FileTier.UNIT_NAME
    if base_name == doc_name:
        return FileTier.DOC
    return FileTier.OTHER


def file_sort_key(member: MemberFile, unit_name: str) -> tuple[int, str, str]:
    """Return the composite sort key of ``member`` within ``unit_name``."""
    base_name: str = member.base_name
    # path breaks ties between files that share a base name (e.g. a.go and a.s)
    return (int(classify_file(base_name, unit_name)), base_name, member.path)


def sort_files(files: Iterable[MemberFile], unit_name: str) -> list[MemberFile]:
    """Return ``files`` ordered for extraction within the unit ``unit_name``."""
    return sorted(files, key=lambda member: file_sort_key(member, unit_name))


def order_files(unit: CompilationUnit) -> list[MemberFile]:
    """Return the member files of ``unit`` in extraction order."""
    return sort_files(unit.files, unit.name)

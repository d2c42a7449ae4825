# topmark:header:start
#
#   project      : RstExtract
#   file         : model.py
#   file_relpath : src/rstextract/core/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data shapes shared by the extraction core.

A source tree is grouped into compilation units (Go packages). Each unit owns
an unordered collection of member files, and each file owns the normalized
text of its comment blocks in source order. These shapes are produced by the
source loader and only read by the core.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import PurePath


def strip_ext(filename: str) -> str:
    """Drop everything from the last ``.`` in ``filename``.

    Unlike `pathlib.PurePath.stem`, a leading dot counts as an extension
    separator: ``".asdf"`` yields ``""``.

    Args:
        filename (str): A file name (without directory part).

    Returns:
        str: The name without its trailing extension.
    """
    idx: int = filename.rfind(".")
    if idx < 0:
        return filename
    return filename[:idx]


def base_name_of(path: str) -> str:
    """Return the directory-less, extension-less name of ``path``."""
    return strip_ext(PurePath(path).name)


@dataclass(frozen=True, slots=True)
class MemberFile:
    """A source file belonging to one compilation unit.

    Attributes:
        path (str): File name as enumerated by the loader (may include directories).
        comments (tuple[str, ...]): Normalized comment-block texts in source order.
    """

    path: str
    comments: tuple[str, ...] = ()

    @property
    def base_name(self) -> str:
        """File name with directory and trailing extension removed."""
        return base_name_of(self.path)


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """A named group of member files producing one output document.

    The order of ``files`` carries no meaning; consumers must sort explicitly.
    """

    name: str
    files: tuple[MemberFile, ...] = ()


@dataclass
class UnitSet:
    """Compilation units with lookup by name.

    Iteration yields units sorted by name so multi-unit runs are deterministic
    whatever order the loader discovered them in.
    """

    _units: dict[str, CompilationUnit] = field(default_factory=dict)

    @classmethod
    def from_units(cls, units: Iterable[CompilationUnit]) -> UnitSet:
        """Build a set from ``units``, merging units that share a name."""
        out = cls()
        for unit in units:
            out.add(unit)
        return out

    def add(self, unit: CompilationUnit) -> None:
        """Add ``unit``; files are merged into an existing unit of the same name."""
        existing: CompilationUnit | None = self._units.get(unit.name)
        if existing is None:
            self._units[unit.name] = unit
            return
        self._units[unit.name] = CompilationUnit(
            name=unit.name,
            files=existing.files + unit.files,
        )

    def add_file(self, unit_name: str, member: MemberFile) -> None:
        """Attach a single member file to the unit called ``unit_name``."""
        self.add(CompilationUnit(name=unit_name, files=(member,)))

    def get(self, name: str) -> CompilationUnit | None:
        """Return the unit called ``name`` or None."""
        return self._units.get(name)

    def names(self) -> list[str]:
        """Return unit names in iteration order."""
        return sorted(self._units)

    def __getitem__(self, name: str) -> CompilationUnit:
        return self._units[name]

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[CompilationUnit]:
        for name in self.names():
            yield self._units[name]

    def __len__(self) -> int:
        return len(self._units)

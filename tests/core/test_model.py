# topmark:header:start
#
#   project      : RstExtract
#   file         : test_model.py
#   file_relpath : tests/core/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the core data shapes."""

from __future__ import annotations

from rstextract.core.model import CompilationUnit, MemberFile, UnitSet, base_name_of, strip_ext
from tests.conftest import parametrize


@parametrize(
    "filename, expected",
    [
        ("foo.bar", "foo"),
        ("foo.bar.baz", "foo.bar"),
        ("foo", "foo"),
        (".asdf", ""),
        ("foo.", "foo"),
    ],
)
def test_strip_ext(filename: str, expected: str) -> None:
    """Only the last extension is removed."""
    assert strip_ext(filename) == expected


def test_base_name_ignores_directories() -> None:
    """Directories are dropped before the extension."""
    assert base_name_of("pkg/sub.dir/doc.go") == "doc"
    assert MemberFile(path="x/test.go").base_name == "test"


def test_unit_set_merges_units_with_the_same_name() -> None:
    """Adding a unit twice concatenates its files."""
    units = UnitSet.from_units(
        [
            CompilationUnit(name="a", files=(MemberFile(path="a.go"),)),
            CompilationUnit(name="b", files=(MemberFile(path="b.go"),)),
            CompilationUnit(name="a", files=(MemberFile(path="a2.go"),)),
        ]
    )

    assert len(units) == 2
    assert [f.path for f in units["a"].files] == ["a.go", "a2.go"]


def test_unit_set_iterates_in_name_order() -> None:
    """Units iterate sorted by name whatever the insertion order."""
    units = UnitSet()
    units.add_file("zeta", MemberFile(path="z.go"))
    units.add_file("alpha", MemberFile(path="a.go"))
    units.add_file("mid", MemberFile(path="m.go"))

    assert units.names() == ["alpha", "mid", "zeta"]
    assert [u.name for u in units] == ["alpha", "mid", "zeta"]


def test_unit_set_lookup() -> None:
    """Lookups by name return the unit or None."""
    units = UnitSet()
    units.add_file("test", MemberFile(path="test.go", comments=("x\n",)))

    assert "test" in units
    assert "other" not in units
    assert units.get("other") is None
    unit = units.get("test")
    assert unit is not None
    assert unit.files[0].comments == ("x\n",)

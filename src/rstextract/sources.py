# topmark:header:start
#
#   project      : RstExtract
#   file         : sources.py
#   file_relpath : src/rstextract/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve, read and parse the source files of a directory.

The source directory is scanned non-recursively for regular files ending in
the configured suffix. Files matching any gitignore-style exclude pattern
(evaluated relative to the source directory) are dropped. Every remaining file
is parsed and attached to the compilation unit named by its package clause.
The result is returned as a `UnitSet`, so nothing downstream depends on
directory listing order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from rstextract.config.logging import get_logger
from rstextract.core.model import MemberFile, UnitSet
from rstextract.errors import SourceDirectoryError, SourceParseError
from rstextract.golang.scanner import GoSyntaxError, parse_file

if TYPE_CHECKING:
    from pathlib import Path

    from rstextract.config import Config
    from rstextract.config.logging import RstExtractLogger
    from rstextract.golang.scanner import ParsedFile

logger: RstExtractLogger = get_logger(__name__)


def _require_source_dir(config: Config) -> Path:
    if config.source_dir is None:
        raise SourceDirectoryError("No source directory configured")
    src: Path = config.source_dir
    if not src.exists():
        raise SourceDirectoryError("Source directory does not exist", path=src)
    if not src.is_dir():
        raise SourceDirectoryError("Source path is not a directory", path=src)
    return src


def list_source_files(config: Config) -> list[Path]:
    """Return the source files to process, sorted by name.

    Args:
        config (Config): Supplies ``source_dir``, ``source_suffix`` and ``exclude_patterns``.

    Returns:
        list[Path]: Regular files directly inside the source directory.

    Raises:
        SourceDirectoryError: If the directory is missing, not a directory, or unreadable.
    """
    src: Path = _require_source_dir(config)
    try:
        entries: list[Path] = sorted(src.iterdir())
    except OSError as exc:
        raise SourceDirectoryError("Cannot read source directory", path=src, cause=exc) from exc

    candidates: list[Path] = [
        p for p in entries if p.name.endswith(config.source_suffix) and p.is_file()
    ]

    if config.exclude_patterns:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, config.exclude_patterns)
        kept: list[Path] = []
        for p in candidates:
            if spec.match_file(p.name):
                logger.debug("Excluded by pattern: %s", p)
                continue
            kept.append(p)
        candidates = kept

    logger.debug("Resolved %d source file(s) in %s", len(candidates), src)
    return candidates


def load_member_file(path: Path) -> tuple[str, MemberFile]:
    """Read and parse one source file.

    Args:
        path (Path): Source file.

    Returns:
        tuple[str, MemberFile]: Package name and the file's comment blocks.

    Raises:
        SourceParseError: If the file cannot be read, decoded, or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceParseError("Cannot decode", path=path, cause=exc) from exc
    except OSError as exc:
        raise SourceParseError("Cannot read", path=path, cause=exc) from exc

    try:
        parsed: ParsedFile = parse_file(text, filename=path.name)
    except GoSyntaxError as exc:
        raise SourceParseError("Cannot parse", path=path, cause=exc) from exc

    member = MemberFile(path=path.name, comments=parsed.comment_texts())
    logger.trace("%s: package %s, %d comment block(s)", path, parsed.package, len(member.comments))
    return parsed.package, member


def load_units(config: Config) -> UnitSet:
    """Group the configured source files into compilation units.

    Args:
        config (Config): Run configuration.

    Returns:
        UnitSet: Units keyed by package name.

    Raises:
        SourceDirectoryError: If the source directory cannot be listed.
        SourceParseError: On the first file that cannot be loaded.
    """
    units = UnitSet()
    for path in list_source_files(config):
        package, member = load_member_file(path)
        units.add_file(package, member)
    logger.info("Loaded %d unit(s): %s", len(units), ", ".join(units.names()))
    return units

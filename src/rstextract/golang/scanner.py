# topmark:header:start
#
#   project      : RstExtract
#   file         : scanner.py
#   file_relpath : src/rstextract/golang/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal Go lexer and comment-group parser.

Only what documentation extraction needs is recognized: comments, string and
rune literals (so comment delimiters inside them are not mistaken for
comments), identifiers, and single punctuation characters. On top of the token
stream, `parse_file` reads the package clause and groups comments the same way
the Go parser builds ``ast.CommentGroup`` values:

- a comment that starts on the same line as the preceding token opens a *line
  comment* group that only takes further comments starting on that group's
  last line;
- any other comment opens a group that keeps taking comments as long as each
  one starts at most one line after the previous one ends.

Comment groups are returned in source order, including groups that precede the
package clause.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import TYPE_CHECKING

from rstextract.config.logging import get_logger
from rstextract.golang.comments import comment_group_text

if TYPE_CHECKING:
    from rstextract.config.logging import RstExtractLogger

logger: RstExtractLogger = get_logger(__name__)

BOM: str = "\ufeff"


class GoSyntaxError(ValueError):
    """Raised when Go source cannot be tokenized or lacks a package clause.

    Attributes:
        filename (str): Name of the offending file.
        line (int): 1-based line number of the problem.
        reason (str): Short description.
    """

    def __init__(self, filename: str, line: int, reason: str) -> None:
        super().__init__(f"{filename}:{line}: {reason}")
        self.filename: str = filename
        self.line: int = line
        self.reason: str = reason


class TokenKind(Enum):
    """Coarse token classes."""

    COMMENT = "comment"
    IDENT = "ident"
    STRING = "string"
    CHAR = "char"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Token:
    """A scanned token with its line span (1-based, inclusive)."""

    kind: TokenKind
    text: str
    line: int
    end_line: int


@dataclass(frozen=True, slots=True)
class ParsedFile:
    """Result of `parse_file`.

    Attributes:
        package (str): Declared package name.
        comment_groups (tuple[tuple[str, ...], ...]): Raw comment texts (with
            delimiters) grouped as the Go parser groups them, in source order.
    """

    package: str
    comment_groups: tuple[tuple[str, ...], ...]

    def comment_texts(self) -> tuple[str, ...]:
        """Return the normalized text of every comment group."""
        return tuple(comment_group_text(group) for group in self.comment_groups)


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_ident_part(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


def scan_tokens(source: str, filename: str = "<source>") -> Iterator[Token]:
    """Yield the tokens of Go ``source``.

    Whitespace is skipped. Carriage returns are removed from comment text.

    Args:
        source (str): Go source text.
        filename (str): Name used in error messages.

    Yields:
        Token: Tokens in source order.

    Raises:
        GoSyntaxError: On an unterminated comment, string, or rune literal.
    """
    n: int = len(source)
    i: int = 1 if source.startswith(BOM) else 0
    line: int = 1

    while i < n:
        ch: str = source[i]

        if ch == "\n":
            line += 1
            i += 1
            continue
        if ch in " \t\r\f\v":
            i += 1
            continue

        if source.startswith("//", i):
            end: int = source.find("\n", i)
            if end < 0:
                end = n
            yield Token(TokenKind.COMMENT, source[i:end].replace("\r", ""), line, line)
            i = end
            continue

        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end < 0:
                raise GoSyntaxError(filename, line, "comment not terminated")
            text: str = source[i : end + 2]
            end_line: int = line + text.count("\n")
            yield Token(TokenKind.COMMENT, text.replace("\r", ""), line, end_line)
            line = end_line
            i = end + 2
            continue

        if ch == "`":
            end = source.find("`", i + 1)
            if end < 0:
                raise GoSyntaxError(filename, line, "raw string literal not terminated")
            text = source[i : end + 1]
            end_line = line + text.count("\n")
            yield Token(TokenKind.STRING, text, line, end_line)
            line = end_line
            i = end + 1
            continue

        if ch in "\"'":
            j: int = i + 1
            while True:
                if j >= n or source[j] == "\n":
                    what: str = "string" if ch == '"' else "rune"
                    raise GoSyntaxError(filename, line, f"{what} literal not terminated")
                if source[j] == "\\":
                    j += 2
                    continue
                if source[j] == ch:
                    break
                j += 1
            kind: TokenKind = TokenKind.STRING if ch == '"' else TokenKind.CHAR
            yield Token(kind, source[i : j + 1], line, line)
            i = j + 1
            continue

        if _is_ident_start(ch):
            j = i + 1
            while j < n and _is_ident_part(source[j]):
                j += 1
            yield Token(TokenKind.IDENT, source[i:j], line, line)
            i = j
            continue

        yield Token(TokenKind.OTHER, ch, line, line)
        i += 1


def _consume_group(tokens: list[Token], start: int, n: int) -> tuple[list[str], int]:
    """Collect one comment group beginning at ``tokens[start]``.

    Returns the raw comment texts and the index of the first token after the group.
    """
    group: list[str] = []
    endline: int = tokens[start].line
    idx: int = start
    while (
        idx < len(tokens)
        and tokens[idx].kind is TokenKind.COMMENT
        and tokens[idx].line <= endline + n
    ):
        group.append(tokens[idx].text)
        endline = tokens[idx].end_line
        idx += 1
    return group, idx


def group_comments(tokens: list[Token]) -> list[tuple[str, ...]]:
    """Group the comment tokens of a token list as the Go parser does."""
    groups: list[tuple[str, ...]] = []
    prev_line: int = 0  # line of the last non-comment token; 0 before the first one
    idx: int = 0
    while idx < len(tokens):
        tok: Token = tokens[idx]
        if tok.kind is not TokenKind.COMMENT:
            prev_line = tok.line
            idx += 1
            continue
        if tok.line == prev_line:
            group, idx = _consume_group(tokens, idx, 0)
            groups.append(tuple(group))
        while idx < len(tokens) and tokens[idx].kind is TokenKind.COMMENT:
            group, idx = _consume_group(tokens, idx, 1)
            groups.append(tuple(group))
    return groups


def _package_name(tokens: list[Token], filename: str) -> str:
    code: list[Token] = list(islice((t for t in tokens if t.kind is not TokenKind.COMMENT), 2))
    if not code or code[0].kind is not TokenKind.IDENT or code[0].text != "package":
        line: int = code[0].line if code else 1
        raise GoSyntaxError(filename, line, "expected 'package'")
    if len(code) < 2 or code[1].kind is not TokenKind.IDENT:
        raise GoSyntaxError(filename, code[0].line, "expected package name")
    name: str = code[1].text
    if name == "_":
        raise GoSyntaxError(filename, code[1].line, "invalid package name _")
    return name


def parse_file(source: str, filename: str = "<source>") -> ParsedFile:
    """Parse Go ``source`` into its package name and comment groups.

    Args:
        source (str): Go source text.
        filename (str): Name used in error messages.

    Returns:
        ParsedFile: Package name and grouped comments.

    Raises:
        GoSyntaxError: If the source cannot be tokenized or has no valid package clause.
    """
    tokens: list[Token] = list(scan_tokens(source, filename))
    package: str = _package_name(tokens, filename)
    groups: list[tuple[str, ...]] = group_comments(tokens)
    logger.trace("%s: package %s, %d comment group(s)", filename, package, len(groups))
    return ParsedFile(package=package, comment_groups=tuple(groups))

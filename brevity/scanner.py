"""
# Brevity: scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Line scanning: comment stripping and block body collection.
"""

from typing import Iterator, NamedTuple, Sequence

from brevity.constants import (
    BLOCK_CLOSING_DELIMITER,
    BLOCK_COMMENT_CLOSING_DELIMITER,
    BLOCK_COMMENT_OPENING_DELIMITER,
    BLOCK_OPENING_DELIMITER,
    COMMENT_MARKER,
    ESCAPE_CHARACTER,
    QUOTE_CHARACTERS,
)
from brevity.exceptions import UnclosedBlockCommentException, UnclosedBlockException


class ScannedLine(NamedTuple):
    line_number: int
    content: str


class BlockBody(NamedTuple):
    first_line_number: int
    lines: tuple[str, ...]


def split_lines(source: str) -> tuple[str, ...]:
    return tuple(source.split('\n'))


def remove_inline_comment(line: str) -> str:
    """
    Truncate a line at its first unquoted comment marker.

    The marker only counts at the start of the line or after whitespace,
    so that `div#main` keeps its id. A backslash escapes the next character,
    and inside quotes (`"` or `'`) the marker is not special.
    The result is trimmed.
    """
    quote_character = None
    escape_pending = False

    for index, character in enumerate(line):
        if escape_pending:
            escape_pending = False
            continue

        if character == ESCAPE_CHARACTER:
            escape_pending = True
            continue

        if quote_character is None:
            if character in QUOTE_CHARACTERS:
                quote_character = character
                continue
        elif character == quote_character:
            quote_character = None
            continue

        if quote_character is None and character == COMMENT_MARKER and (index == 0 or line[index - 1].isspace()):
            return line[:index].strip()

    return line.strip()


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_MARKER)


def is_block_comment_opening(line: str) -> bool:
    return line.startswith(BLOCK_COMMENT_OPENING_DELIMITER)


def is_block_comment_closing(line: str) -> bool:
    return line.endswith(BLOCK_COMMENT_CLOSING_DELIMITER)


class LineScanner:
    """
    Cursor over the lines of one compilation scope.

    Iterating yields the meaningful lines only (comment-stripped, trimmed, non-empty),
    each tagged with its absolute line number.
    After a block opening has been yielded, `take_block_body(...)` consumes the raw lines
    up to the matching closing delimiter, so that iteration resumes after the block.

    Raises UnclosedBlockCommentException from iteration if a block comment never closes,
    and UnclosedBlockException from `take_block_body(...)` if a block never closes;
    in both cases the remaining lines have been consumed.
    """
    _lines: tuple[str, ...]
    _first_line_number: int
    _index: int

    def __init__(self, lines: Sequence[str], first_line_number: int = 1):
        self._lines = tuple(lines)
        self._first_line_number = first_line_number
        self._index = 0

    def __iter__(self) -> Iterator['ScannedLine']:
        return self

    def __next__(self) -> 'ScannedLine':
        while self._index < len(self._lines):
            line_number = self._first_line_number + self._index
            line = self._lines[self._index].strip()
            self._index += 1

            if is_block_comment_opening(line):
                self._skip_block_comment(line_number)
                continue

            line = remove_inline_comment(line)
            if line == '' or is_comment(line):
                continue

            return ScannedLine(line_number, line)

        raise StopIteration

    def _skip_block_comment(self, opening_line_number: int):
        while self._index < len(self._lines):
            line = self._lines[self._index].strip()
            self._index += 1

            if is_block_comment_closing(line):
                return

        raise UnclosedBlockCommentException(opening_line_number)

    def take_block_body(self, tag_name: str, opening_line_number: int) -> 'BlockBody':
        """
        Consume the raw lines of a block whose opening line has just been scanned.

        Lines ending with the opening delimiter (ignoring trailing comments) increase the depth,
        lines consisting of the closing delimiter alone decrease it.
        The body is everything strictly between the opening line and the closing line at depth zero.
        """
        body_start_index = self._index
        depth = 1

        while self._index < len(self._lines):
            line = self._lines[self._index].strip()
            self._index += 1

            if line == BLOCK_CLOSING_DELIMITER:
                depth -= 1
                if depth == 0:
                    return BlockBody(
                        first_line_number=self._first_line_number + body_start_index,
                        lines=self._lines[body_start_index:self._index - 1],
                    )
            elif remove_inline_comment(line).endswith(BLOCK_OPENING_DELIMITER):
                depth += 1

        raise UnclosedBlockException(tag_name, opening_line_number)

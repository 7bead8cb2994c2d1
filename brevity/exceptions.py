"""
# Brevity: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""

from typing import Optional


class GrammarException(Exception):
    _token: str
    _line_number: Optional[int]

    def __init__(self, message: str, token: str, line_number: Optional[int] = None):
        super().__init__(message)
        self._token = token
        self._line_number = line_number

    @property
    def message(self) -> str:
        return self.args[0]

    @property
    def token(self) -> str:
        return self._token

    @property
    def line_number(self) -> Optional[int]:
        return self._line_number


class UnclosedBlockException(Exception):
    _tag_name: str
    _line_number: int

    def __init__(self, tag_name: str, line_number: int):
        super().__init__(f'Unclosed block starting with <{tag_name}>.')
        self._tag_name = tag_name
        self._line_number = line_number

    @property
    def message(self) -> str:
        return self.args[0]

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def line_number(self) -> int:
        return self._line_number


class UnclosedBlockCommentException(Exception):
    _line_number: int

    def __init__(self, line_number: int):
        super().__init__('Unclosed block comment.')
        self._line_number = line_number

    @property
    def message(self) -> str:
        return self.args[0]

    @property
    def line_number(self) -> int:
        return self._line_number


class EvaluationException(Exception):
    pass

"""
# Brevity: diagnostics.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Diagnostics collected during compilation.
"""

from typing import Iterator, NamedTuple, Optional


class Diagnostic(NamedTuple):
    """
    A line-tagged message describing a recoverable compilation problem.

    `line_number` is 1-based and absolute within the source passed to the compiler,
    or None when the problem cannot be attributed to a source line.
    """
    line_number: Optional[int]
    message: str

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message

        return f'line {self.line_number}: {self.message}'


class Diagnostics:
    """
    Ordered collection of diagnostics for one compilation scope.

    Nested scopes (block bodies) collect into their own instance,
    which the enclosing scope absorbs once the nested compilation returns.
    """
    _diagnostics: list['Diagnostic']

    def __init__(self):
        self._diagnostics = []

    def __iter__(self) -> Iterator['Diagnostic']:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        return len(self._diagnostics) > 0

    def report(self, line_number: Optional[int], message: str):
        self._diagnostics.append(Diagnostic(line_number, message))

    def absorb(self, diagnostics: 'Diagnostics'):
        self._diagnostics.extend(diagnostics)

    def to_list(self) -> list['Diagnostic']:
        return list(self._diagnostics)

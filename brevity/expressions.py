"""
# Brevity: expressions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Embedded expression substitution.

Spans of the form `<$ «expression» $>` are substituted after the whole document has been assembled,
so a span may straddle the tags emitted around it.
Evaluation is delegated to an Evaluator supplied by the host;
the compiler neither implements nor sandboxes execution, and imposes no timeout.
"""

import abc
import re
from typing import Any

from brevity.constants import EVALUATION_ERROR_MARKER, EXPRESSION_PATTERN
from brevity.diagnostics import Diagnostics
from brevity.exceptions import EvaluationException
from brevity.utilities import escape_html


class Evaluator(abc.ABC):
    """
    Base class for an expression evaluator.

    `evaluate(expression)` returns the value of the expression (None for no value),
    and signals failure by raising.
    """
    @abc.abstractmethod
    def evaluate(self, expression: str) -> Any:
        raise NotImplementedError


class UnavailableEvaluator(Evaluator):
    """
    Evaluator used when the host supplies none; every evaluation fails.
    """
    def evaluate(self, expression: str) -> Any:
        raise EvaluationException('no expression evaluator available')


class ExpressionSubstitutor:
    """
    Object substituting embedded expressions in assembled HTML.

    The value of each expression is converted with `str` and HTML-escaped (None becomes empty).
    A failing expression is replaced by an inline error marker and reported to the diagnostics.
    """
    _EXPRESSION_PATTERN_COMPILED = re.compile(pattern=EXPRESSION_PATTERN, flags=re.VERBOSE)

    _evaluator: 'Evaluator'

    def __init__(self, evaluator: 'Evaluator'):
        self._evaluator = evaluator

    def substitute(self, html: str, diagnostics: 'Diagnostics') -> str:
        def substitute_function(match: re.Match) -> str:
            expression = match.group('expression')

            try:
                value = self._evaluator.evaluate(expression)
                if value is None:
                    return ''

                return escape_html(str(value))
            except Exception as exception:
                diagnostics.report(
                    None,
                    f'Inline expression evaluation error: {exception} in expression "{expression}"',
                )
                return EVALUATION_ERROR_MARKER

        return re.sub(
            pattern=ExpressionSubstitutor._EXPRESSION_PATTERN_COMPILED,
            repl=substitute_function,
            string=html,
        )

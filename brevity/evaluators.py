"""
# Brevity: evaluators.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Host-side expression evaluators.
"""

from typing import Any, Optional

from jinja2 import StrictUndefined, TemplateSyntaxError
from jinja2.sandbox import ImmutableSandboxedEnvironment

from brevity.exceptions import EvaluationException
from brevity.expressions import Evaluator


class SandboxedEvaluator(Evaluator):
    """
    Evaluator of Jinja2 expressions in an immutable sandbox.

    For example, `<$ 6 * 7 $>` gives `42` and `<$ name | upper $>` gives the upper-cased `name`
    from the context. A bare undefined name gives no value, but any other use of it fails.
    """
    _environment: ImmutableSandboxedEnvironment
    _context: dict[str, Any]

    def __init__(self, context: Optional[dict[str, Any]] = None):
        self._environment = ImmutableSandboxedEnvironment(undefined=StrictUndefined)
        if context is None:
            self._context = {}
        else:
            self._context = dict(context)

    def evaluate(self, expression: str) -> Any:
        try:
            compiled_expression = self._environment.compile_expression(expression)
        except TemplateSyntaxError as syntax_error:
            raise EvaluationException(syntax_error.message) from syntax_error

        return compiled_expression(**self._context)

"""
# Brevity: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core compilation logic.

Brevity source is compiled line by line:
````
text → meaningful lines (scanner.py)
     → one node per line: block, inline, nesting, or sibling (parsing.py)
     → HTML, blocks recursing into this module (blocks.py, rendering.py)
     → expression substitution over the whole document (expressions.py)
````
Compilation never raises for malformed input. Problems are collected as diagnostics;
an unclosed block halts its enclosing scope, keeping the HTML produced so far.
For the syntax, see the constant `BREVITY_SYNTAX_HELP` in `constants.py`.
"""

import traceback
from typing import NamedTuple, Optional, Sequence

from brevity.blocks import BlockExpander, ScopeResult
from brevity.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from brevity.diagnostics import Diagnostic, Diagnostics
from brevity.exceptions import UnclosedBlockCommentException, UnclosedBlockException
from brevity.expressions import Evaluator, ExpressionSubstitutor, UnavailableEvaluator
from brevity.nodes import NODE_KIND_FROM_TYPE, BlockNode, Node
from brevity.parsing import LineParser
from brevity.rendering import render_combinator_node
from brevity.scanner import LineScanner, ScannedLine, split_lines


class CompilationResult(NamedTuple):
    html: str
    diagnostics: list['Diagnostic']


class Compiler:
    """
    Object compiling Brevity source to HTML.

    ## `compile`

    Compiles a whole document, substituting embedded expressions with the evaluator.

    ## `compile_scope`

    Compiles a sequence of lines (a document, or the body of a block) without expression substitution.
Traces are printed for the top-level scope only.
    """
    _verbose_mode_enabled: bool
    _block_expander: 'BlockExpander'
    _expression_substitutor: 'ExpressionSubstitutor'

    def __init__(self, evaluator: Optional['Evaluator'] = None, verbose_mode_enabled: bool = False):
        if evaluator is None:
            evaluator = UnavailableEvaluator()

        self._verbose_mode_enabled = verbose_mode_enabled
        self._block_expander = BlockExpander(self.compile_scope)
        self._expression_substitutor = ExpressionSubstitutor(evaluator)

    def compile(self, source: str) -> 'CompilationResult':
        try:
            html, diagnostics = self.compile_scope(
                split_lines(source),
                first_line_number=1,
                traces_enabled=self._verbose_mode_enabled,
            )
            html = self._expression_substitutor.substitute(html, diagnostics)
        except Exception as exception:
            if self._verbose_mode_enabled:
                traceback.print_exception(type(exception), exception, exception.__traceback__)

            return CompilationResult('', [Diagnostic(None, f'Unexpected error: {exception}')])

        return CompilationResult(html, diagnostics.to_list())

    def compile_scope(self, lines: Sequence[str], first_line_number: int,
                      traces_enabled: bool = False) -> 'ScopeResult':
        diagnostics = Diagnostics()
        scanner = LineScanner(lines, first_line_number)
        line_parser = LineParser(diagnostics)
        html = ''

        try:
            for scanned_line in scanner:
                node = line_parser.parse(scanned_line, scanner)
                if node is None:
                    continue

                node_html = self.render_node(node, diagnostics)
                if traces_enabled:
                    self.print_trace(scanned_line, node, node_html)

                html += node_html
        except UnclosedBlockException as exception:
            diagnostics.report(exception.line_number, exception.message)
        except UnclosedBlockCommentException as exception:
            diagnostics.report(exception.line_number, exception.message)

        return ScopeResult(html, diagnostics)

    def render_node(self, node: 'Node', diagnostics: 'Diagnostics') -> str:
        if isinstance(node, BlockNode):
            return self._block_expander.expand(node, diagnostics)

        return render_combinator_node(node)

    @staticmethod
    def print_trace(scanned_line: 'ScannedLine', node: 'Node', node_html: str):
        if node_html == '':
            no_output_indicator = ' (no output)'
        else:
            no_output_indicator = ''

        node_kind = NODE_KIND_FROM_TYPE[type(node)]
        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE line {scanned_line.line_number} ({node_kind})')
        print(scanned_line.content)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_output_indicator)
        print(node_html, end='')
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER line {scanned_line.line_number}')
        print('\n\n\n')


def compile_to_html(source: str, evaluator: Optional['Evaluator'] = None,
                    verbose_mode_enabled: bool = False) -> 'CompilationResult':
    """
    Compile Brevity to HTML.
    """
    compiler = Compiler(evaluator, verbose_mode_enabled)

    return compiler.compile(source)

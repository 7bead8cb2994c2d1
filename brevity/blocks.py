"""
# Brevity: blocks.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Block expansion.
"""

from typing import Callable, NamedTuple, Sequence

from brevity.constants import RAW_TAG_NAME, VERBATIM_TAG_NAMES
from brevity.diagnostics import Diagnostics
from brevity.nodes import BlockNode
from brevity.rendering import build_closing_tag, build_opening_tag
from brevity.repetition import substitute_index
from brevity.utilities import escape_html


class ScopeResult(NamedTuple):
    html: str
    diagnostics: 'Diagnostics'


class BlockExpander:
    """
    Object expanding block nodes to HTML.

    The body of a block is handled according to its tag:
    - `script`, `style`, `html`: kept verbatim
    - `raw`: HTML-escaped and emitted without a wrapping tag
    - anything else: compiled as Brevity in a scope of its own,
      whose diagnostics are merged into those of the enclosing scope

    Blocks do not repeat, but take part in index substitution as a single repetition.
    """
    _compile_scope: Callable[[Sequence[str], int], 'ScopeResult']

    def __init__(self, compile_scope: Callable[[Sequence[str], int], 'ScopeResult']):
        self._compile_scope = compile_scope

    def expand(self, block_node: 'BlockNode', diagnostics: 'Diagnostics') -> str:
        element = substitute_index(block_node.element, 1)
        body = block_node.body
        body_text = ''.join(f'{line}\n' for line in body.lines)

        if element.tag_name == RAW_TAG_NAME:
            return escape_html(body_text) + '\n'

        if element.tag_name in VERBATIM_TAG_NAMES:
            inner_html = body_text
        else:
            inner_html, body_diagnostics = self._compile_scope(body.lines, body.first_line_number)
            diagnostics.absorb(body_diagnostics)

        return f'{build_opening_tag(element)}\n{inner_html}{build_closing_tag(element)}\n'

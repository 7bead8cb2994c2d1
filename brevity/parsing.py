"""
# Brevity: parsing.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Classification of scanned lines into syntax tree nodes.
"""

from typing import Optional

from brevity.combinators import compute_combinator_chains
from brevity.constants import BLOCK_CLOSING_DELIMITER
from brevity.diagnostics import Diagnostics
from brevity.exceptions import GrammarException
from brevity.grammar import ElementGrammar
from brevity.nodes import BlockNode, ChainItem, InlineNode, LiteralNode, NestingNode, Node, SiblingNode
from brevity.scanner import LineScanner, ScannedLine


class LineParser:
    """
    Object turning scanned lines into nodes, in the following order of precedence:
    (1) a stray closing delimiter `\\}` is ignored;
    (2) a block opening consumes its body from the scanner (BlockNode);
    (3) a line that is a single element as a whole is an InlineNode;
    (4) otherwise the line is split on `+` and `>` (SiblingNode or NestingNode).

    In (4), a token failing the element grammar is reported to the diagnostics
    and kept as a LiteralNode, so that the rest of the chain still renders.
    """
    _diagnostics: 'Diagnostics'

    def __init__(self, diagnostics: 'Diagnostics'):
        self._diagnostics = diagnostics

    def parse(self, scanned_line: 'ScannedLine', scanner: 'LineScanner') -> Optional['Node']:
        line_number, line = scanned_line

        if line == BLOCK_CLOSING_DELIMITER:
            return None

        block_element = ElementGrammar.parse_block_opening(line)
        if block_element is not None:
            body = scanner.take_block_body(block_element.tag_name, line_number)
            return BlockNode(line_number, block_element, body)

        try:
            element = ElementGrammar.parse_element(line, line_number)
        except GrammarException:  # not a lone element, so try the combinators
            element = None

        if element is not None:
            return InlineNode(line_number, element)

        chains = tuple(
            self.parse_chain(tokens, line_number)
            for tokens in compute_combinator_chains(line)
        )

        if len(chains) == 0:
            return None

        if len(chains) == 1:
            return chains[0]

        return SiblingNode(line_number, chains)

    def parse_chain(self, tokens: list[str], line_number: int) -> 'NestingNode':
        items: list[ChainItem] = []

        for token in tokens:
            try:
                items.append(ElementGrammar.parse_element(token, line_number))
            except GrammarException as exception:
                self._diagnostics.report(line_number, exception.message)
                items.append(LiteralNode(token))

        return NestingNode(line_number, tuple(items))

"""
# Brevity: test_parsing.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `parsing.py`.
"""

import unittest

from brevity.diagnostics import Diagnostic, Diagnostics
from brevity.grammar import ElementDescriptor
from brevity.nodes import BlockNode, InlineNode, LiteralNode, NestingNode, SiblingNode
from brevity.parsing import LineParser
from brevity.scanner import BlockBody, LineScanner


def parse_first_line(lines: list[str]):
    diagnostics = Diagnostics()
    scanner = LineScanner(lines)
    node = LineParser(diagnostics).parse(next(scanner), scanner)

    return node, diagnostics.to_list(), scanner


class TestLineParser(unittest.TestCase):
    def test_inline(self):
        node, diagnostics, _ = parse_first_line(['li{a > b + c}*2'])
        self.assertEqual(node, InlineNode(1, ElementDescriptor('li', content='a > b + c', repeat_count=2)))
        self.assertEqual(diagnostics, [])

    def test_nesting(self):
        node, diagnostics, _ = parse_first_line(['ul > li{x}'])
        self.assertEqual(
            node,
            NestingNode(1, (ElementDescriptor('ul'), ElementDescriptor('li', content='x'))),
        )
        self.assertEqual(diagnostics, [])

    def test_siblings(self):
        node, diagnostics, _ = parse_first_line(['a{1} + b{2}'])
        self.assertEqual(
            node,
            SiblingNode(1, (
                NestingNode(1, (ElementDescriptor('a', content='1'),)),
                NestingNode(1, (ElementDescriptor('b', content='2'),)),
            )),
        )
        self.assertEqual(diagnostics, [])

    def test_block(self):
        node, diagnostics, scanner = parse_first_line(['div.box\\{', 'p{x}', '\\}', 'after'])
        self.assertEqual(
            node,
            BlockNode(1, ElementDescriptor('div', class_names=('box',)), BlockBody(2, ('p{x}',))),
        )
        self.assertEqual(diagnostics, [])
        self.assertEqual(next(scanner).content, 'after')

    def test_ignored_lines(self):
        self.assertIsNone(parse_first_line(['\\}'])[0])
        self.assertIsNone(parse_first_line(['+ >'])[0])

    def test_invalid_tokens(self):
        node, diagnostics, _ = parse_first_line(['div > ??? > p{x}'])
        self.assertEqual(
            node,
            NestingNode(1, (ElementDescriptor('div'), LiteralNode('???'), ElementDescriptor('p', content='x'))),
        )
        self.assertEqual(diagnostics, [Diagnostic(1, 'Invalid syntax near "???".')])

        node, diagnostics, _ = parse_first_line(['p{x}y'])
        self.assertEqual(node, NestingNode(1, (LiteralNode('p{x}y'),)))
        self.assertEqual(diagnostics, [Diagnostic(1, 'Invalid syntax near "p{x}y".')])

        _, diagnostics, _ = parse_first_line(['p*0 + q'])
        self.assertEqual(diagnostics, [Diagnostic(1, 'Repeat count must be positive near "p*0".')])


if __name__ == '__main__':
    unittest.main()

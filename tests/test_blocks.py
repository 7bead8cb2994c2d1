"""
# Brevity: test_blocks.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `blocks.py`.
"""

import unittest

from brevity.blocks import BlockExpander, ScopeResult
from brevity.diagnostics import Diagnostic, Diagnostics
from brevity.grammar import ElementDescriptor
from brevity.nodes import BlockNode
from brevity.scanner import BlockBody


def bracket_lines(lines, first_line_number):
    diagnostics = Diagnostics()
    diagnostics.report(first_line_number, 'nested')

    return ScopeResult(''.join(f'[{line}]' for line in lines), diagnostics)


class TestBlockExpander(unittest.TestCase):
    def setUp(self):
        self.block_expander = BlockExpander(bracket_lines)

    def test_expand(self):
        diagnostics = Diagnostics()
        self.assertEqual(
            self.block_expander.expand(
                BlockNode(1, ElementDescriptor('div', id_='x&index;', class_names=('c',)), BlockBody(2, ('a', 'b'))),
                diagnostics,
            ),
            '<div id="x1" class="c">\n[a][b]</div>\n',
        )
        self.assertEqual(diagnostics.to_list(), [Diagnostic(2, 'nested')])

    def test_expand_raw(self):
        diagnostics = Diagnostics()
        self.assertEqual(
            self.block_expander.expand(
                BlockNode(1, ElementDescriptor('raw'), BlockBody(2, ('<b>x</b>', '  & y'))),
                diagnostics,
            ),
            '&lt;b&gt;x&lt;/b&gt;\n  &amp; y\n\n',
        )
        self.assertEqual(diagnostics.to_list(), [])

    def test_expand_verbatim(self):
        diagnostics = Diagnostics()
        self.assertEqual(
            self.block_expander.expand(
                BlockNode(1, ElementDescriptor('style'), BlockBody(2, ('#x { color: red; }',))),
                diagnostics,
            ),
            '<style>\n#x { color: red; }\n</style>\n',
        )
        self.assertEqual(
            self.block_expander.expand(
                BlockNode(1, ElementDescriptor('script', 'type="module"'), BlockBody(2, ('if (a < b) {}',))),
                diagnostics,
            ),
            '<script type="module">\nif (a < b) {}\n</script>\n',
        )
        self.assertEqual(diagnostics.to_list(), [])


if __name__ == '__main__':
    unittest.main()

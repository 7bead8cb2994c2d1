"""
# Brevity: test_scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `scanner.py`.
"""

import unittest

from brevity.exceptions import UnclosedBlockCommentException, UnclosedBlockException
from brevity.scanner import BlockBody, LineScanner, ScannedLine, remove_inline_comment, split_lines


class TestScanner(unittest.TestCase):
    def test_split_lines(self):
        self.assertEqual(split_lines(''), ('',))
        self.assertEqual(split_lines('a\nb\n'), ('a', 'b', ''))

    def test_remove_inline_comment(self):
        self.assertEqual(remove_inline_comment(''), '')
        self.assertEqual(remove_inline_comment('# whole line'), '')
        self.assertEqual(remove_inline_comment('p{hi} # trailing comment'), 'p{hi}')
        self.assertEqual(remove_inline_comment('p{hi}\t#tab'), 'p{hi}')
        self.assertEqual(remove_inline_comment('  div#main.wide  '), 'div#main.wide')
        self.assertEqual(remove_inline_comment('a[title="x #y"] # c'), 'a[title="x #y"]')
        self.assertEqual(remove_inline_comment("a[title='#y']"), "a[title='#y']")
        self.assertEqual(remove_inline_comment('p{a \\#b}'), 'p{a \\#b}')

    def test_line_scanner(self):
        lines = split_lines(
            '#{\n'
            'block comment\n'
            '#}\n'
            'p{a}   # comment\n'
            '# full-line comment\n'
            '    \n'
            'div\\{\n'
            '  p{b}\n'
            '\\}\n'
        )
        self.assertEqual(
            list(LineScanner(lines)),
            [
                ScannedLine(4, 'p{a}'),
                ScannedLine(7, 'div\\{'),
                ScannedLine(8, 'p{b}'),
                ScannedLine(9, '\\}'),
            ],
        )
        self.assertEqual(list(LineScanner(['p{a}'], first_line_number=10)), [ScannedLine(10, 'p{a}')])
        self.assertEqual(list(LineScanner(['#{ opening', 'closing #}'])), [])

    def test_line_scanner_unclosed_block_comment(self):
        scanner = LineScanner(['p{a}', '#{', 'p{b}'])
        self.assertEqual(next(scanner), ScannedLine(1, 'p{a}'))

        with self.assertRaises(UnclosedBlockCommentException) as context:
            next(scanner)
        self.assertEqual(context.exception.line_number, 2)
        self.assertEqual(context.exception.message, 'Unclosed block comment.')

    def test_take_block_body(self):
        scanner = LineScanner(['div\\{', '  p\\{  # nested', '  x', '  \\}', '\\}', 'after'])
        self.assertEqual(next(scanner), ScannedLine(1, 'div\\{'))
        self.assertEqual(
            scanner.take_block_body('div', 1),
            BlockBody(2, ('  p\\{  # nested', '  x', '  \\}')),
        )
        self.assertEqual(next(scanner), ScannedLine(6, 'after'))
        self.assertRaises(StopIteration, next, scanner)

        scanner = LineScanner(['x', 'ul\\{', '\\}'], first_line_number=20)
        next(scanner)
        next(scanner)
        self.assertEqual(scanner.take_block_body('ul', 21), BlockBody(22, ()))

    def test_take_block_body_unclosed(self):
        scanner = LineScanner(['p{a}', 'div\\{', 'p{x}'])
        next(scanner)
        next(scanner)

        with self.assertRaises(UnclosedBlockException) as context:
            scanner.take_block_body('div', 2)
        self.assertEqual(context.exception.line_number, 2)
        self.assertEqual(context.exception.tag_name, 'div')
        self.assertEqual(context.exception.message, 'Unclosed block starting with <div>.')
        self.assertRaises(StopIteration, next, scanner)


if __name__ == '__main__':
    unittest.main()

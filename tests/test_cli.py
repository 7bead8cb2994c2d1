"""
# Brevity: test_cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `cli.py`.
"""

import contextlib
import io
import os
import tempfile
import unittest

from brevity.cli import extract_brevity_name, generate_html_file, is_brevity_file


class TestCli(unittest.TestCase):
    def test_extract_brevity_name(self):
        self.assertEqual(extract_brevity_name('file.brv'), 'file')
        self.assertEqual(extract_brevity_name('file.'), 'file')
        self.assertEqual(extract_brevity_name('file'), 'file')
        self.assertEqual(extract_brevity_name('file.txt'), 'file.txt')

        if os.sep == '/':
            self.assertEqual(extract_brevity_name('./././file.brv'), 'file')
            self.assertEqual(extract_brevity_name('./dir/../file.brv'), 'file')
            self.assertEqual(extract_brevity_name('./file.'), 'file')
            self.assertEqual(extract_brevity_name('./file'), 'file')
        elif os.sep == '\\':
            self.assertEqual(extract_brevity_name(r'.\.\.\file.brv'), 'file')
            self.assertEqual(extract_brevity_name(r'.\dir\..\file.brv'), 'file')
            self.assertEqual(extract_brevity_name(r'.\file.'), 'file')
            self.assertEqual(extract_brevity_name(r'.\file'), 'file')

    def test_is_brevity_file(self):
        self.assertTrue(is_brevity_file('file.brv'))
        self.assertTrue(is_brevity_file('.brv'))
        self.assertFalse(is_brevity_file('file/brv'))
        self.assertFalse(is_brevity_file('file.'))
        self.assertFalse(is_brevity_file('file'))

    def test_generate_html_file(self):
        with tempfile.TemporaryDirectory() as directory_name:
            brevity_name = os.path.join(directory_name, 'page')
            with open(f'{brevity_name}.brv', 'w', encoding='utf-8') as brevity_file:
                brevity_file.write('p{<$ 6 * 7 $>}\n')

            standard_output = io.StringIO()
            with contextlib.redirect_stdout(standard_output):
                self.assertTrue(generate_html_file(f'{brevity_name}.', False, uses_command_line_argument=True))

            with open(f'{brevity_name}.html', 'r', encoding='utf-8') as html_file:
                self.assertEqual(html_file.read(), '<p>42</p>\n')
            self.assertIn('success: wrote to', standard_output.getvalue())

    def test_generate_html_file_with_diagnostics(self):
        with tempfile.TemporaryDirectory() as directory_name:
            brevity_name = os.path.join(directory_name, 'broken')
            with open(f'{brevity_name}.brv', 'w', encoding='utf-8') as brevity_file:
                brevity_file.write('p{ok}\ndiv\\{\n')

            standard_error = io.StringIO()
            with contextlib.redirect_stderr(standard_error):
                self.assertFalse(generate_html_file(brevity_name, False, uses_command_line_argument=True))

            self.assertFalse(os.path.exists(f'{brevity_name}.html'))
            self.assertIn('line 2: Unclosed block starting with <div>.', standard_error.getvalue())

    def test_generate_html_file_not_found(self):
        with tempfile.TemporaryDirectory() as directory_name:
            brevity_name = os.path.join(directory_name, 'missing')

            self.assertRaises(
                FileNotFoundError,
                generate_html_file, brevity_name, False, uses_command_line_argument=False,
            )
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    generate_html_file(brevity_name, False, uses_command_line_argument=True)
            self.assertEqual(context.exception.code, 2)


if __name__ == '__main__':
    unittest.main()

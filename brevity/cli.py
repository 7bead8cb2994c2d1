"""
# Brevity: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys

from brevity._version import __version__
from brevity.constants import (
    BREVITY_FILE_EXTENSION,
    BREVITY_SYNTAX_HELP,
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
)
from brevity.core import compile_to_html
from brevity.evaluators import SandboxedEvaluator

DESCRIPTION = '''
    Compile Brevity shorthand markup to HTML.
'''
BREVITY_FILE_NAME_HELP = '''
    name of Brevity file to be compiled
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    compile all Brevity files under the working directory
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the HTML produced by every construct)
'''


def is_brevity_file(file_name: str) -> bool:
    return file_name.endswith(BREVITY_FILE_EXTENSION)


def extract_brevity_name(brevity_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a Brevity file name argument.

    Here, Brevity file name argument may be of the form `«name».brv`, `«name».`, or `«name»`.
    The path is normalised by resolving `./` and `../`.
    """
    brevity_file_name_argument = os.path.normpath(brevity_file_name_argument)
    brevity_name = re.sub(pattern=r'[.](brv)? \Z', repl='', string=brevity_file_name_argument, flags=re.VERBOSE)

    return brevity_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=BREVITY_SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'brevity_file_name_arguments',
        default=[],
        help=BREVITY_FILE_NAME_HELP,
        metavar='file.brv',
        nargs='*',
    )

    return argument_parser.parse_args()


def print_diagnostics(diagnostics: list, brevity_file_name: str):
    for diagnostic in diagnostics:
        if diagnostic.line_number is None:
            print(f'error: `{brevity_file_name}`: {diagnostic.message}', file=sys.stderr)
        else:
            print(f'error: `{brevity_file_name}`, line {diagnostic.line_number}: {diagnostic.message}',
                  file=sys.stderr)


def generate_html_file(brevity_file_name_argument: str, verbose_mode_enabled: bool,
                       uses_command_line_argument: bool) -> bool:
    """
    Compile a Brevity file and write the HTML file beside it.

    Returns False (writing nothing) if compilation produced diagnostics.
    """
    brevity_name = extract_brevity_name(brevity_file_name_argument)
    brevity_file_name = f'{brevity_name}{BREVITY_FILE_EXTENSION}'
    try:
        with open(brevity_file_name, 'r', encoding='utf-8') as brevity_file:
            source = brevity_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{brevity_file_name_argument}`: file `{brevity_file_name}` not found',
                  file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{brevity_file_name}` not found for `{brevity_file_name}` in brevity_file_names'
            raise FileNotFoundError(error_message) from file_not_found_error

    html, diagnostics = compile_to_html(source, SandboxedEvaluator(), verbose_mode_enabled)

    if len(diagnostics) > 0:
        print_diagnostics(diagnostics, brevity_file_name)
        return False

    html_file_name = f'{brevity_name}.html'
    try:
        with open(html_file_name, 'w', encoding='utf-8') as html_file:
            html_file.write(html)
        print(f'success: wrote to `{html_file_name}`')
    except IOError:
        print(f'error: cannot write to `{html_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    return True


def main():
    parsed_arguments = parse_command_line_arguments()
    brevity_file_name_arguments = parsed_arguments.brevity_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if all_mode_enabled:
        if len(brevity_file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        brevity_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_brevity_file(file_name)
        ]
        successes = [
            generate_html_file(brevity_file_name, verbose_mode_enabled, uses_command_line_argument=False)
            for brevity_file_name in sorted(brevity_file_names)
        ]

    else:
        successes = [
            generate_html_file(brevity_file_name_argument, verbose_mode_enabled, uses_command_line_argument=True)
            for brevity_file_name_argument in brevity_file_name_arguments
        ]

    if not all(successes):
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()

"""
# Brevity: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

BREVITY_FILE_EXTENSION = '.brv'

BLOCK_OPENING_DELIMITER = '\\{'
BLOCK_CLOSING_DELIMITER = '\\}'
BLOCK_COMMENT_OPENING_DELIMITER = '#{'
BLOCK_COMMENT_CLOSING_DELIMITER = '#}'
COMMENT_MARKER = '#'
ESCAPE_CHARACTER = '\\'
QUOTE_CHARACTERS = ('"', "'")

SIBLING_COMBINATOR = '+'
NESTING_COMBINATOR = '>'

INDEX_PLACEHOLDER = '&index;'

VERBATIM_TAG_NAMES = ('script', 'style', 'html')
RAW_TAG_NAME = 'raw'

EXPRESSION_PATTERN = r'''
    <[$]
        [\s]*
        (?P<expression> [\s\S]+? )
        [\s]*
    [$]>
'''
EVALUATION_ERROR_MARKER = '<span style="color: red;">Error</span>'

BREVITY_SYNTAX_HELP = '''\
In Brevity syntax, a line must be one of the following:
(1) whitespace-only;
(2) a comment (beginning with `#`);
(3) a block comment opening (`#{`), closed by a line ending with `#}`;
(4) a block opening (`«tag»[«attributes»]#«id».«class»\\{`), closed by a line `\\}`;
(5) an inline element (`«tag»[«attributes»]#«id».«class»{«content»}*«count»`);
(6) a chain of inline elements joined by `>` (nesting) and `+` (siblings).
- Note for (4): the bodies of `script`, `style` and `html` blocks are kept verbatim,
  the body of a `raw` block is HTML-escaped and emitted without a tag,
  and any other body is compiled as Brevity.
- Note for (5): every part after «tag» is optional,
  and `&index;` is replaced by the 1-based repetition index.
- Note for (6): `>` and `+` inside quotes or `{«content»}` do not count.
- Anywhere in the output, `<$ «expression» $>` is replaced by the value of «expression».
'''

"""
# Brevity: combinators.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Splitting of lines on the sibling (`+`) and nesting (`>`) combinators.
"""

from brevity.constants import ESCAPE_CHARACTER, NESTING_COMBINATOR, QUOTE_CHARACTERS, SIBLING_COMBINATOR


def split_at_top_level(string: str, delimiter: str) -> list[str]:
    """
    Split a string on a delimiter, ignoring delimiters inside quotes or braces.

    Quote state and brace depth are tracked left to right;
    quotes only open outside braces, so that apostrophes in content are harmless.
    A backslash escapes the next character (which is kept, along with the backslash).
    Pieces are returned untrimmed; a trailing empty piece is omitted.
    """
    pieces = []
    current_characters = []
    quote_character = None
    escape_pending = False
    brace_depth = 0

    for character in string:
        if escape_pending:
            escape_pending = False
        elif character == ESCAPE_CHARACTER:
            escape_pending = True
        elif quote_character is not None:
            if character == quote_character:
                quote_character = None
        elif character in QUOTE_CHARACTERS and brace_depth == 0:
            quote_character = character
        elif character == '{':
            brace_depth += 1
        elif character == '}':
            brace_depth = max(brace_depth - 1, 0)
        elif character == delimiter and brace_depth == 0:
            pieces.append(''.join(current_characters))
            current_characters = []
            continue

        current_characters.append(character)

    if len(current_characters) > 0:
        pieces.append(''.join(current_characters))

    return pieces


def compute_combinator_chains(line: str) -> list[list[str]]:
    """
    Split a line into sibling chains, each a list of nesting tokens.

    For example, `ul > li + p{x > y}` becomes `[['ul', 'li'], ['p{x > y}']]`.
    Tokens are trimmed, and empty tokens and empty chains are dropped.
    """
    chains = []

    for sibling_piece in split_at_top_level(line, SIBLING_COMBINATOR):
        tokens = [
            nesting_piece.strip()
            for nesting_piece in split_at_top_level(sibling_piece, NESTING_COMBINATOR)
            if nesting_piece.strip() != ''
        ]
        if len(tokens) > 0:
            chains.append(tokens)

    return chains

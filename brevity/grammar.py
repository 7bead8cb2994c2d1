"""
# Brevity: grammar.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Element grammar.
"""

import re
from typing import NamedTuple, Optional

from brevity.constants import BLOCK_OPENING_DELIMITER, ESCAPE_CHARACTER, INDEX_PLACEHOLDER, QUOTE_CHARACTERS
from brevity.exceptions import GrammarException


class ElementDescriptor(NamedTuple):
    """
    A parsed element.

    - `tag_name`: lower case
    - `attribute_specifications`: the raw text between the brackets, copied verbatim into the tag
    - `id_`: None when absent
    - `class_names`: in order of appearance, never empty strings
    - `content`: raw text, escapes already resolved
    - `repeat_count`: at least 1
    """
    tag_name: str
    attribute_specifications: str = ''
    id_: Optional[str] = None
    class_names: tuple[str, ...] = ()
    content: str = ''
    repeat_count: int = 1


class ElementHead(NamedTuple):
    tag_name: str
    attribute_specifications: str
    id_: Optional[str]
    class_names: tuple[str, ...]
    end_position: int


class ElementGrammar:
    """
    Static class parsing tokens of the form
    ````
    «tag»[«attributes»]#«id».«class»{«content»}*«count»
    ````
    where every part after «tag» is optional.
    `#«id»` and `.«class»` may appear in any order, but at most one id is allowed.

    The grammar is parsed by hand, left to right:
    - «tag» is an identifier (ASCII letters, digits, underscores, hyphens)
    - «id» and «class» are identifiers which may also contain the index placeholder `&index;`
    - «attributes» runs up to the first `]` not inside quotes
    - «content» runs up to the first `}` not escaped by a backslash
      (`\\{`, `\\}` and `\\\\` stand for the escaped character; other backslashes are kept)
    - «count» is a positive integer
    """
    def __new__(cls):
        raise TypeError('ElementGrammar cannot be instantiated')

    _IDENTIFIER_PATTERN_COMPILED = re.compile(pattern=r'[\w-]+', flags=re.ASCII)
    _NAME_PATTERN_COMPILED = re.compile(
        pattern=fr'(?: [\w-] | {re.escape(INDEX_PLACEHOLDER)} )+',
        flags=re.ASCII | re.VERBOSE,
    )
    _COUNT_PATTERN_COMPILED = re.compile(pattern=r'[0-9]+', flags=re.ASCII)

    _ATTRIBUTES_OPENING = '['
    _ATTRIBUTES_CLOSING = ']'
    _ID_MARKER = '#'
    _CLASS_MARKER = '.'
    _CONTENT_OPENING = '{'
    _CONTENT_CLOSING = '}'
    _CONTENT_ESCAPABLES = ('{', '}', '\\')
    _REPEAT_MARKER = '*'

    @staticmethod
    def compute_attributes_closing_position(token: str, position: int) -> Optional[int]:
        quote_character = None
        escape_pending = False

        for index in range(position, len(token)):
            character = token[index]

            if escape_pending:
                escape_pending = False
            elif character == ESCAPE_CHARACTER:
                escape_pending = True
            elif quote_character is not None:
                if character == quote_character:
                    quote_character = None
            elif character in QUOTE_CHARACTERS:
                quote_character = character
            elif character == ElementGrammar._ATTRIBUTES_CLOSING:
                return index

        return None

    @staticmethod
    def compute_element_head(token: str) -> Optional['ElementHead']:
        """
        Parse the leading `«tag»[«attributes»]#«id».«class»` part of a token.

        Returns None if the token does not begin with a well-formed head.
        """
        tag_name_match = ElementGrammar._IDENTIFIER_PATTERN_COMPILED.match(token)
        if tag_name_match is None:
            return None

        tag_name = tag_name_match.group().lower()
        position = tag_name_match.end()

        attribute_specifications = ''
        if token.startswith(ElementGrammar._ATTRIBUTES_OPENING, position):
            closing_position = ElementGrammar.compute_attributes_closing_position(token, position + 1)
            if closing_position is None:
                return None

            attribute_specifications = token[position + 1:closing_position]
            position = closing_position + 1

        id_ = None
        class_names = []
        while position < len(token) and token[position] in (ElementGrammar._ID_MARKER, ElementGrammar._CLASS_MARKER):
            marker = token[position]
            identifier_match = ElementGrammar._NAME_PATTERN_COMPILED.match(token, position + 1)
            if identifier_match is None:
                return None

            if marker == ElementGrammar._ID_MARKER:
                if id_ is not None:
                    return None
                id_ = identifier_match.group()
            else:
                class_names.append(identifier_match.group())

            position = identifier_match.end()

        return ElementHead(tag_name, attribute_specifications, id_, tuple(class_names), position)

    @staticmethod
    def compute_content(token: str, position: int) -> Optional[tuple[str, int]]:
        """
        Parse `{«content»}` starting at the opening brace.

        Returns the unescaped content and the position after the closing brace,
        or None if the closing brace is missing.
        """
        content_characters = []
        index = position + 1

        while index < len(token):
            character = token[index]

            if character == ESCAPE_CHARACTER and token[index + 1:index + 2] in ElementGrammar._CONTENT_ESCAPABLES:
                content_characters.append(token[index + 1])
                index += 2
                continue

            if character == ElementGrammar._CONTENT_CLOSING:
                return ''.join(content_characters), index + 1

            content_characters.append(character)
            index += 1

        return None

    @staticmethod
    def parse_element(token: str, line_number: Optional[int] = None) -> 'ElementDescriptor':
        """
        Parse a whole token into an element descriptor.

        Raises GrammarException if the token is not an element.
        """
        invalid_syntax_message = f'Invalid syntax near "{token}".'

        head = ElementGrammar.compute_element_head(token)
        if head is None:
            raise GrammarException(invalid_syntax_message, token, line_number)

        position = head.end_position

        content = ''
        if token.startswith(ElementGrammar._CONTENT_OPENING, position):
            content_and_position = ElementGrammar.compute_content(token, position)
            if content_and_position is None:
                raise GrammarException(invalid_syntax_message, token, line_number)

            content, position = content_and_position

        repeat_count = 1
        if token.startswith(ElementGrammar._REPEAT_MARKER, position):
            count_match = ElementGrammar._COUNT_PATTERN_COMPILED.match(token, position + 1)
            if count_match is None:
                raise GrammarException(invalid_syntax_message, token, line_number)

            repeat_count = int(count_match.group())
            if repeat_count < 1:
                raise GrammarException(f'Repeat count must be positive near "{token}".', token, line_number)

            position = count_match.end()

        if position != len(token):
            raise GrammarException(invalid_syntax_message, token, line_number)

        return ElementDescriptor(
            tag_name=head.tag_name,
            attribute_specifications=head.attribute_specifications,
            id_=head.id_,
            class_names=head.class_names,
            content=content,
            repeat_count=repeat_count,
        )

    @staticmethod
    def parse_block_opening(line: str) -> Optional['ElementDescriptor']:
        """
        Parse a block opening `«tag»[«attributes»]#«id».«class»\\{`.

        Returns None if the line is not a block opening.
        """
        head = ElementGrammar.compute_element_head(line)
        if head is None:
            return None

        if line[head.end_position:] != BLOCK_OPENING_DELIMITER:
            return None

        return ElementDescriptor(
            tag_name=head.tag_name,
            attribute_specifications=head.attribute_specifications,
            id_=head.id_,
            class_names=head.class_names,
        )

"""
# Brevity: rendering.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rendering of inline elements and combinator chains to HTML.

Chains are first rendered to a small fragment tree, so that siblings can be inserted
directly into the child list of their parent before any text is produced.
"""

from typing import Union

from brevity.constants import RAW_TAG_NAME
from brevity.grammar import ElementDescriptor
from brevity.nodes import ChainItem, InlineNode, LiteralNode, NestingNode, SiblingNode
from brevity.repetition import expand_repetitions
from brevity.utilities import escape_html


def build_attributes_sequence(element: 'ElementDescriptor') -> str:
    """
    Build the attribute sequence of an opening tag.

    Raw attribute specifications come first (verbatim), then `id`, then `class`;
    each is included only when non-empty.
    """
    attributes_sequence = ''

    if element.attribute_specifications:
        attributes_sequence += f' {element.attribute_specifications}'

    if element.id_:
        attributes_sequence += f' id="{element.id_}"'

    if len(element.class_names) > 0:
        attributes_sequence += f' class="{" ".join(element.class_names)}"'

    return attributes_sequence


def build_opening_tag(element: 'ElementDescriptor') -> str:
    return f'<{element.tag_name}{build_attributes_sequence(element)}>'


def build_closing_tag(element: 'ElementDescriptor') -> str:
    return f'</{element.tag_name}>'


class TextFragment:
    _text: str

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def render(self) -> str:
        return f'{self._text}\n'


class ElementFragment:
    """
    A rendered element with its children.

    Renders as `<tag>content</tag>` when childless,
    and as `<tag>content` + newline + children + `</tag>` otherwise,
    always followed by a newline.
    """
    _element: 'ElementDescriptor'
    _children: list['Fragment']

    def __init__(self, element: 'ElementDescriptor', children: list['Fragment']):
        self._element = element
        self._children = children

    @property
    def element(self) -> 'ElementDescriptor':
        return self._element

    @property
    def children(self) -> list['Fragment']:
        return self._children

    def render(self) -> str:
        html = build_opening_tag(self._element) + self._element.content

        if len(self._children) > 0:
            html += '\n' + render_fragments(self._children)

        return html + build_closing_tag(self._element) + '\n'


Fragment = Union[TextFragment, ElementFragment]


def render_fragments(fragments: list['Fragment']) -> str:
    return ''.join(fragment.render() for fragment in fragments)


def can_wrap(item: ChainItem) -> bool:
    return isinstance(item, ElementDescriptor) and item.tag_name != RAW_TAG_NAME


def render_chain(items: tuple[ChainItem, ...]) -> list['Fragment']:
    """
    Render a nesting chain, the first item wrapping the rendering of the rest.

    The rest is rendered afresh for every repetition of the first item.
    Items that cannot wrap (literals and `raw` elements) are emitted as escaped text,
    with the rest of the chain following them at the same level.
    """
    if len(items) == 0:
        return []

    item = items[0]
    remaining_items = items[1:]

    if isinstance(item, LiteralNode):
        return [TextFragment(escape_html(item.token)), *render_chain(remaining_items)]

    if item.tag_name == RAW_TAG_NAME:
        raw_fragments: list['Fragment'] = [
            TextFragment(escape_html(element.content))
            for element in expand_repetitions(item)
        ]
        return raw_fragments + render_chain(remaining_items)

    return [
        ElementFragment(element, render_chain(remaining_items))
        for element in expand_repetitions(item)
    ]


def render_siblings(chains: tuple['NestingNode', ...]) -> list['Fragment']:
    """
    Render sibling chains.

    If the first chain nests (more than one item), the later chains are appended
    to the children of its outermost element (the last repetition thereof),
    becoming siblings of the nested content.
    Otherwise the first chain has no enclosing parent, and the later chains simply follow it.
    """
    first_chain, *later_chains = chains

    parent_fragments = render_chain(first_chain.items)
    sibling_fragments = [
        fragment
        for chain in later_chains
        for fragment in render_chain(chain.items)
    ]

    if len(first_chain.items) > 1 and can_wrap(first_chain.items[0]):
        parent_fragments[-1].children.extend(sibling_fragments)
        return parent_fragments

    return parent_fragments + sibling_fragments


def render_combinator_node(node: Union['InlineNode', 'NestingNode', 'SiblingNode']) -> str:
    if isinstance(node, InlineNode):
        return render_fragments(render_chain((node.element,)))

    if isinstance(node, NestingNode):
        return render_fragments(render_chain(node.items))

    return render_fragments(render_siblings(node.chains))

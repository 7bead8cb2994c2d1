"""
# Brevity: nodes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Syntax tree for one scanned line.

Every meaningful line becomes exactly one of
- BlockNode: an element with a body of raw lines
- InlineNode: a single element resolved on its line
- NestingNode: elements joined by `>`, each wrapping the rest
- SiblingNode: nesting chains joined by `+`
Tokens that fail the element grammar are kept in chains as LiteralNode.
"""

from typing import NamedTuple, Union

from brevity.grammar import ElementDescriptor
from brevity.scanner import BlockBody


class LiteralNode(NamedTuple):
    token: str


ChainItem = Union[ElementDescriptor, LiteralNode]


class BlockNode(NamedTuple):
    line_number: int
    element: ElementDescriptor
    body: BlockBody


class InlineNode(NamedTuple):
    line_number: int
    element: ElementDescriptor


class NestingNode(NamedTuple):
    line_number: int
    items: tuple[ChainItem, ...]


class SiblingNode(NamedTuple):
    line_number: int
    chains: tuple[NestingNode, ...]


Node = Union[BlockNode, InlineNode, NestingNode, SiblingNode]

NODE_KIND_FROM_TYPE = {
    BlockNode: 'block',
    InlineNode: 'inline',
    NestingNode: 'nesting',
    SiblingNode: 'sibling',
}

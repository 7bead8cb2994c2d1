"""
# Brevity: repetition.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Repetition expansion with index substitution.
"""

from typing import Iterator

from brevity.grammar import ElementDescriptor
from brevity.utilities import replace_index_placeholders


def substitute_index(element: 'ElementDescriptor', index: int) -> 'ElementDescriptor':
    """
    Substitute the index placeholder in attributes, id, every class name and content.

    The result is a single (non-repeated) element.
    """
    if element.id_ is None:
        id_ = None
    else:
        id_ = replace_index_placeholders(element.id_, index)

    return element._replace(
        attribute_specifications=replace_index_placeholders(element.attribute_specifications, index),
        id_=id_,
        class_names=tuple(replace_index_placeholders(class_name, index) for class_name in element.class_names),
        content=replace_index_placeholders(element.content, index),
        repeat_count=1,
    )


def expand_repetitions(element: 'ElementDescriptor') -> Iterator['ElementDescriptor']:
    """
    Yield one substituted element per repetition, with index running from 1 to the repeat count.

    Each repetition is independent. Whatever an element wraps is rendered afresh for each repetition
    by the caller, so nested repeats multiply.
    """
    for index in range(1, element.repeat_count + 1):
        yield substitute_index(element, index)

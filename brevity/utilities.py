"""
# Brevity: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re

from brevity.constants import INDEX_PLACEHOLDER

ESCAPE_FROM_CHARACTER = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#039;',
}


def escape_html(string: str) -> str:
    """
    Escape the five HTML-special characters.

    Every `&` is escaped, including those already beginning an entity,
    so that the result displays exactly the original string.
    """
    return re.sub(
        pattern='[&<>"\']',
        repl=lambda match: ESCAPE_FROM_CHARACTER[match.group()],
        string=string,
    )


def replace_index_placeholders(string: str, index: int) -> str:
    return string.replace(INDEX_PLACEHOLDER, str(index))

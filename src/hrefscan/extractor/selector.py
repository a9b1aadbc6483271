"""
CSS selector compilation backed by soupsieve.
"""

from __future__ import annotations

import soupsieve

from ..errors import SelectorSyntaxError
from .protocols import Matcher

DEFAULT_SELECTOR = "a"


def compile_selector(style: str | None = None) -> Matcher:
    """Compile a CSS selector string, defaulting to ``a``.

    Raises:
        SelectorSyntaxError: If the string is not valid selector syntax
    """
    pattern = DEFAULT_SELECTOR if style is None else style
    try:
        matcher = soupsieve.compile(pattern)
    except soupsieve.SelectorSyntaxError as e:
        # soupsieve appends a multi-line context block after the first line.
        message = str(e).splitlines()[0] if str(e) else "invalid syntax"
        raise SelectorSyntaxError(pattern, message) from e

    return matcher

"""
Link extraction over matched elements.
"""

from __future__ import annotations

from typing import Iterator

from .models import Document
from .protocols import Matcher

DEFAULT_ATTRIBUTE = "href"


def extract_links(document: Document, matcher: Matcher, attribute: str = DEFAULT_ATTRIBUTE) -> Iterator[str]:
    """Yield ``attribute`` values of matching elements in document order.

    Matching elements without the attribute are skipped; an attribute that is
    present but empty yields an empty string.
    """
    for element in document.traverse_in_order():
        if not matcher.match(element):
            continue
        value = element.get(attribute)
        if value is None:
            continue
        yield value

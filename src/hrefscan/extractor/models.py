"""
Data models for parsed documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from bs4 import BeautifulSoup, Tag

from .protocols import Element


@dataclass(slots=True, frozen=True)
class Document:
    """An HTML fragment parsed into an element tree."""

    root: BeautifulSoup
    source_length: int

    def traverse_in_order(self) -> Iterator[Element]:
        """Yield every element in document order (pre-order, depth-first)."""
        for node in self.root.descendants:
            if isinstance(node, Tag):
                yield node

"""
Protocols for the pluggable parsing and matching engine.

The link pipeline only needs elements with attribute lookup and a compiled
predicate over those elements, so any tree builder or selector engine that
satisfies these shapes can stand in for BeautifulSoup and soupsieve.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """A parsed element exposing its tag name and attributes."""

    name: str

    def get(self, key: str, default: Any = None) -> Any:
        """Return the attribute value for ``key`` or ``default`` when absent."""
        ...


@runtime_checkable
class Matcher(Protocol):
    """A compiled selector usable against elements of a parsed document."""

    pattern: str

    def match(self, tag: Element) -> bool:
        """Return True when ``tag`` satisfies the selector."""
        ...

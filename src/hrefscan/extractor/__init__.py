"""
Document parsing, selector compilation and link extraction.
"""

from .document import DEFAULT_PARSER, parse_document
from .links import DEFAULT_ATTRIBUTE, extract_links
from .models import Document
from .protocols import Element, Matcher
from .selector import DEFAULT_SELECTOR, compile_selector

__all__ = [
    "DEFAULT_ATTRIBUTE",
    "DEFAULT_PARSER",
    "DEFAULT_SELECTOR",
    "Document",
    "Element",
    "Matcher",
    "compile_selector",
    "extract_links",
    "parse_document",
]

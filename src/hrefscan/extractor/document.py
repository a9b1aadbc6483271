"""
Tolerant HTML fragment parsing.
"""

from __future__ import annotations

from typing import Any, Dict

from bs4 import BeautifulSoup, FeatureNotFound

from ..errors import ConfigurationError
from .models import Document

# html5lib follows the HTML5 tree-construction rules browsers use.
DEFAULT_PARSER = "html5lib"


def parse_document(text: str, parser: str = DEFAULT_PARSER) -> Document:
    """Parse arbitrary text into a :class:`Document`.

    Malformed markup is recovered by the tree builder rather than rejected, and
    no enclosing ``<html>`` or ``<body>`` is required. When an attribute is
    repeated on one element the first value wins, as in a browser.

    Args:
        text: Markup to parse, possibly malformed or lossily decoded
        parser: Name of an installed BeautifulSoup tree builder

    Returns:
        The parsed document

    Raises:
        ConfigurationError: If ``parser`` names a tree builder that is not installed
    """
    # Keep attributes such as class and rel as plain strings.
    options: Dict[str, Any] = {"multi_valued_attributes": None}
    if parser == "html.parser":
        # html5lib already keeps the first value; html.parser keeps the last by default
        options["on_duplicate_attribute"] = "ignore"

    try:
        soup = BeautifulSoup(text, parser, **options)
    except FeatureNotFound as e:
        raise ConfigurationError(f"unknown HTML parser {parser!r}") from e

    return Document(root=soup, source_length=len(text))

"""
hrefscan - Extract distinct link targets from HTML.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import HrefscanError, SelectorSyntaxError
from .observability import install_library_defaults
from .pipeline import collect_links, iter_links

install_library_defaults()

__all__ = ["__version__", "HrefscanError", "SelectorSyntaxError", "collect_links", "iter_links"]

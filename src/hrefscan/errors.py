"""
Error taxonomy for hrefscan.

Every failure that ends a run derives from :class:`HrefscanError`; its string
form is the single diagnostic line printed on stderr.
"""

from __future__ import annotations


class HrefscanError(Exception):
    """Base class for all fatal hrefscan errors."""

    pass


class InputReadError(HrefscanError):
    """Raised when standard input cannot be read."""

    pass


class OutputWriteError(HrefscanError):
    """Raised when a link line cannot be written to the output stream."""

    pass


class ConfigurationError(HrefscanError):
    """Raised when settings cannot be loaded or name an unusable parser."""

    pass


class SelectorSyntaxError(HrefscanError):
    """Raised when a CSS selector string cannot be compiled."""

    def __init__(self, selector: str, message: str) -> None:
        super().__init__(f"invalid selector {selector!r}: {message}")
        self.selector = selector
        self.message = message

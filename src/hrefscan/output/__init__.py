"""
Output line composition and writing.
"""

from .emitter import emit_lines, format_links

__all__ = ["emit_lines", "format_links"]

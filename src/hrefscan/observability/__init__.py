"""Observability helpers."""

from .logging import configure_logging, install_library_defaults

__all__ = ["configure_logging", "install_library_defaults"]

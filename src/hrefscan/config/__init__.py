"""Configuration package."""

from .config import LogLevel, Settings

__all__ = ["LogLevel", "Settings"]

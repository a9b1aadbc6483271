"""
Order-preserving exact deduplication of link values.
"""

from .ordered import OrderedDeduplicator, unique_in_order

__all__ = ["OrderedDeduplicator", "unique_in_order"]

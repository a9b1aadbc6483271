"""
First-seen-wins deduplication for ordered string sequences.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Set, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedDeduplicator:
    """
    Filters a sequence down to the first occurrence of each distinct value.

    Values are compared by exact equality; nothing is normalized. The seen-set
    lives on the instance, so one instance corresponds to one run.
    """

    def __init__(self) -> None:
        self._seen: Set[Hashable] = set()
        self._duplicate_count = 0

    def is_duplicate(self, value: Hashable) -> bool:
        """Record ``value`` and report whether it had already been seen."""
        if value in self._seen:
            self._duplicate_count += 1
            return True
        self._seen.add(value)
        return False

    def filter(self, values: Iterable[T]) -> Iterator[T]:
        """Lazily yield values not seen before, in their original order."""
        for value in values:
            if not self.is_duplicate(value):
                yield value

    def get_stats(self) -> dict:
        """Get deduplication statistics."""
        return {
            "unique_count": len(self._seen),
            "duplicate_count": self._duplicate_count,
        }


def unique_in_order(values: Iterable[T]) -> Iterator[T]:
    """
    Convenience function for one-shot deduplication.

    Args:
        values: Values in arrival order

    Returns:
        Iterator over the first occurrence of each distinct value
    """
    return OrderedDeduplicator().filter(values)

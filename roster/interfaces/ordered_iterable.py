"""
OrderedIterable protocol for containers that can be walked in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that support ordered iteration over keys.

    Every call to __iter__ must return a fresh iterator, so a walk can be
    restarted at any time.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[int, Any]]:
        """Return an iterator over all key-value pairs in ascending key order."""
        pass

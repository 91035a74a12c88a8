"""
SortedContainer abstract base class for ordered, insert-only key-value structures.
"""

from abc import abstractmethod
from typing import Any

from roster.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers.

    Keys are positive integers and are unique: inserting a key that is
    already present leaves the stored value untouched. Nothing is ever
    removed.

    Implementations:
    - AVLTree: height-balanced, O(log N) insert
    """

    @abstractmethod
    def insert(self, key: int, value: Any) -> bool:
        """
        Insert a key-value pair unless the key is already present.

        Args:
            key: The key to insert.
            value: The payload to associate with the key.

        Returns:
            True if a new entry was created, False if the key already existed.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the structure (0 when empty).

        Time complexity: O(1)
        """
        pass

"""
Abstract base classes and protocols for the roster containers.
"""

from roster.interfaces.ordered_iterable import OrderedIterable
from roster.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]

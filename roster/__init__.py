"""
Student roster kept in an AVL tree.

This package provides an ordered, insert-only record store with:
- insert(key, payload) - O(log N), duplicates ignored
- in-order traversal - ascending keys, restartable
- an interactive collector and a plain-text report
"""

from roster.models.record import StudentRecord
from roster.models.roster import Roster
from roster.models.sortedcontainers import AVLTree

__all__ = ["AVLTree", "Roster", "StudentRecord"]

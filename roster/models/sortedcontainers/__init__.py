"""
Sorted container implementations for the roster.
"""

from roster.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree"]

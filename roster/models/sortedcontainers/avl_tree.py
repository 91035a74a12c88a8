"""
AVL Tree implementation for sorted key-value storage.

Height-balanced binary search tree with O(log N) insertion. Duplicate keys
are ignored rather than updated.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from roster.interfaces.sorted_container import SortedContainer
from roster.models.exceptions import AVLInvariantError


@dataclass
class Node:
    """Node in the AVL Tree."""

    key: int
    value: Any
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def height(node: Node | None) -> int:
    return node.height if node is not None else 0


def balance_factor(node: Node | None) -> int:
    """Height of the left subtree minus height of the right subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: Node) -> Node:
    """
    Right rotation around node.

    The left child is promoted into node's place, node becomes its right
    child, and the promoted child's former right subtree becomes node's
    left subtree.

    Returns:
        The new root of the subtree.
    """
    pivot = node.left
    if pivot is None:
        raise AVLInvariantError(node.key, "right rotation without a left child")

    node.left = pivot.right
    pivot.right = node

    # Old root first: it is now a child of the pivot
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: Node) -> Node:
    """
    Left rotation around node (mirror of rotate_right).

    Returns:
        The new root of the subtree.
    """
    pivot = node.right
    if pivot is None:
        raise AVLInvariantError(node.key, "left rotation without a right child")

    node.right = pivot.left
    pivot.left = node

    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(node: Node | None, key: int, value: Any) -> Node:
    """
    Insert key into the subtree rooted at node and rebalance on the way up.

    If key is already present the subtree is returned unchanged and the
    existing value is kept.

    Args:
        node: Root of the subtree, None for an empty subtree.
        key: The key to insert.
        value: The payload stored with a newly created node.

    Returns:
        The root of the subtree after insertion, which may differ from node.
    """
    root, _ = insert_with_status(node, key, value)
    return root


def insert_with_status(
    node: Node | None, key: int, value: Any
) -> tuple[Node, bool]:
    """
    Same as insert, also reporting whether a new node was created.

    Returns:
        (subtree root, created) where created is False for a duplicate key.
    """
    # 1. Plain BST insertion
    if node is None:
        return Node(key=key, value=value), True

    if key < node.key:
        node.left, created = insert_with_status(node.left, key, value)
    elif key > node.key:
        node.right, created = insert_with_status(node.right, key, value)
    else:
        return node, False

    # 2. Update height of this ancestor
    _update_height(node)

    # 3. Rebalance if needed, the inserted key picks the case
    balance = balance_factor(node)

    # Left Left
    if balance > 1 and key < node.left.key:
        return rotate_right(node), created

    # Right Right
    if balance < -1 and key > node.right.key:
        return rotate_left(node), created

    # Left Right
    if balance > 1 and key > node.left.key:
        node.left = rotate_left(node.left)
        return rotate_right(node), created

    # Right Left
    if balance < -1 and key < node.right.key:
        node.right = rotate_right(node.right)
        return rotate_left(node), created

    return node, created


def traverse_in_order(node: Node | None) -> Iterator[tuple[int, Any]]:
    """Yield (key, value) pairs of the subtree in ascending key order."""
    if node is None:
        return
    yield from traverse_in_order(node.left)
    yield (node.key, node.value)
    yield from traverse_in_order(node.right)


def check_invariants(
    node: Node | None, low: int | None = None, high: int | None = None
) -> int:
    """
    Verify BST ordering, cached heights and balance for a subtree.

    Args:
        node: Root of the subtree to check.
        low: Every key must be strictly greater than this (None for no bound).
        high: Every key must be strictly less than this (None for no bound).

    Returns:
        The actual height of the subtree.

    Raises:
        AVLInvariantError: On the first violated invariant found.
    """
    if node is None:
        return 0

    if (low is not None and node.key <= low) or (high is not None and node.key >= high):
        raise AVLInvariantError(node.key, f"key outside ({low}, {high})")

    left_height = check_invariants(node.left, low, node.key)
    right_height = check_invariants(node.right, node.key, high)

    actual = 1 + max(left_height, right_height)
    if node.height != actual:
        raise AVLInvariantError(
            node.key, f"cached height {node.height}, actual {actual}"
        )
    if abs(left_height - right_height) > 1:
        raise AVLInvariantError(
            node.key, f"balance factor {left_height - right_height}"
        )
    return actual


class AVLTree(SortedContainer):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained after every insert:
    1. Every key in a left subtree is smaller than its ancestor's key,
       every key in a right subtree is larger
    2. Each node caches 1 + the larger of its children's heights
    3. Sibling subtree heights differ by at most one
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, key: int, value: Any) -> bool:
        """Insert a key-value pair, ignoring duplicates. O(log N)"""
        self._root, created = insert_with_status(self._root, key, value)
        if created:
            self._size += 1
        return created

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return height(self._root)

    def check_invariants(self) -> int:
        """Verify the whole tree, returning its height."""
        return check_invariants(self._root)

    def traverse_in_order(self) -> Iterator[tuple[int, Any]]:
        return traverse_in_order(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return self.traverse_in_order()

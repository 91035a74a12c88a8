"""
Custom exceptions for the roster.
"""


class AVLInvariantError(AssertionError):
    """
    Raised when an AVL tree is found in a state the algorithm never produces.

    This signals a defect in the tree code, not bad input, and is not meant
    to be caught and recovered from.
    """

    def __init__(self, key: int, reason: str):
        """
        Initialize invariant error.

        Args:
            key: Key of the node where the violation was detected.
            reason: Which invariant or precondition failed.
        """
        self.key = key
        self.reason = reason
        super().__init__(f"AVL invariant violated at key {key}: {reason}")


class InputClosedError(EOFError):
    """Raised when the input stream ends while a value is still expected."""

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"Input ended while reading {expected}")

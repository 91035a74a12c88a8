"""
StudentRecord - the fixed-size record stored in the roster.
"""

from dataclasses import dataclass

# Longest name kept; longer input is cut to this many characters
NAME_MAX_LENGTH = 49


@dataclass(frozen=True)
class StudentRecord:
    """
    A student entry keyed by its id.

    Attributes:
        student_id: Positive integer, unique within a roster.
        name: Display name, at most NAME_MAX_LENGTH characters.
    """

    student_id: int
    name: str

    @classmethod
    def create(cls, student_id: int, name: str) -> "StudentRecord":
        return cls(student_id=student_id, name=name[:NAME_MAX_LENGTH])

"""
Data models for the roster.
"""

from roster.models.exceptions import AVLInvariantError, InputClosedError
from roster.models.record import NAME_MAX_LENGTH, StudentRecord
from roster.models.roster import Roster

__all__ = [
    "AVLInvariantError",
    "InputClosedError",
    "NAME_MAX_LENGTH",
    "StudentRecord",
    "Roster",
]

"""
Shared pytest fixtures for roster tests.
"""

import io

import pytest

from roster.cli.collector import PromptReader
from roster.models.record import StudentRecord
from roster.models.roster import Roster
from roster.models.sortedcontainers import AVLTree


@pytest.fixture
def tree():
    """Provide a fresh, empty AVLTree."""
    return AVLTree()


@pytest.fixture
def roster(tree):
    """Provide a Roster backed by the tree fixture."""
    return Roster(tree)


@pytest.fixture
def sample_records():
    """Provide sample student records in non-sorted order."""
    return [
        StudentRecord.create(30, "Carol"),
        StudentRecord.create(10, "Alice"),
        StudentRecord.create(20, "Bob"),
    ]


@pytest.fixture
def make_reader():
    """Provide a factory building a PromptReader over in-memory text."""

    def factory(text: str) -> tuple[PromptReader, io.StringIO]:
        output = io.StringIO()
        return PromptReader(io.StringIO(text), output), output

    return factory

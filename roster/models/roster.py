"""
Roster - student records kept in a sorted container.
"""

import logging
import threading
from collections.abc import Iterable, Iterator

from roster.interfaces.sorted_container import SortedContainer
from roster.models.record import StudentRecord

logger = logging.getLogger()


class Roster:
    """
    Student records ordered by id, backed by a SortedContainer.

    Supports:
    - O(log N) add, with duplicate ids ignored
    - Ordered enumeration of records
    - A single lock around every mutation so one roster can be shared
    """

    def __init__(self, sorted_container: SortedContainer) -> None:
        """
        Initialize Roster.

        Args:
            sorted_container: The backing sorted data structure.
        """
        self._container = sorted_container
        self._write_lock = threading.Lock()

    def add(self, record: StudentRecord) -> bool:
        """
        Add a record unless its id is already present.

        Args:
            record: The record to add.

        Returns:
            True if added, False if the id was already taken (the stored
            record is left as it was).
        """
        with self._write_lock:
            added = self._container.insert(record.student_id, record)

        if not added:
            logger.debug(f"Ignoring duplicate student ID {record.student_id}")
        return added

    def batch_add(self, records: Iterable[StudentRecord]) -> list[bool]:
        """
        Add multiple records.

        Args:
            records: Records to add, in insertion order.

        Returns:
            List of success indicators for each record.
        """
        results = []
        for record in records:
            results.append(self.add(record))
        return results

    def records(self) -> Iterator[StudentRecord]:
        """Yield records in ascending id order."""
        for _, record in self._container:
            yield record

    def size(self) -> int:
        return self._container.size()

    def height(self) -> int:
        return self._container.height()

    def __iter__(self) -> Iterator[tuple[int, StudentRecord]]:
        return self._container.__iter__()


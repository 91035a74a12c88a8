from collections.abc import Iterable
from typing import TextIO

from roster.models.record import StudentRecord

REPORT_HEADER = "\nInorder Traversal of AVL Tree:\n"


def format_record(record: StudentRecord) -> str:
    return f"Student ID: {record.student_id}, Name: {record.name}"


def render(records: Iterable[StudentRecord], out: TextIO) -> int:
    """Write the report header and one line per record, returning the line count"""
    out.write(REPORT_HEADER)
    written = 0
    for record in records:
        out.write(format_record(record) + "\n")
        written += 1
    return written

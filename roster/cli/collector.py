import logging
import re
from collections.abc import Iterator
from typing import Callable, Optional, TextIO

from roster.models.exceptions import InputClosedError
from roster.models.record import StudentRecord

logger = logging.getLogger()

COUNT_PROMPT = "Enter the number of students: "
COUNT_RETRY = "Please enter a valid positive number of students: "
ID_PROMPT = "Enter student ID: "
ID_RETRY = "Please enter a valid positive student ID: "
NAME_PROMPT = "Enter student name: "
NAME_RETRY = "Please enter a non-empty student name: "

DIGITS = re.compile(r"\+?[0-9]+")


def parse_positive_int(text: str) -> Optional[int]:
    """Parse a strictly positive integer, None if the text is not one"""
    text = text.strip()
    if not DIGITS.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


class PromptReader:
    def __init__(self, input_stream: TextIO, output_stream: TextIO):
        self.input_stream = input_stream
        self.output_stream = output_stream

    def read_count(self) -> int:
        """Prompt until a positive number of students is entered"""
        return self._prompt_until(COUNT_PROMPT, COUNT_RETRY, parse_positive_int, "student count")

    def read_student_id(self) -> int:
        return self._prompt_until(ID_PROMPT, ID_RETRY, parse_positive_int, "student ID")

    def read_name(self) -> str:
        """Prompt until a non-empty name is entered. Truncation happens in StudentRecord.create"""
        return self._prompt_until(NAME_PROMPT, NAME_RETRY, self._parse_name, "student name")

    def collect(self) -> Iterator[StudentRecord]:
        """Read the count, then yield one record per student as it is entered"""
        count = self.read_count()
        logger.debug(f"Collecting {count} students")

        for _ in range(count):
            student_id = self.read_student_id()
            name = self.read_name()
            yield StudentRecord.create(student_id, name)

    @staticmethod
    def _parse_name(line: str) -> Optional[str]:
        name = line.rstrip("\r\n")
        return name if name.strip() else None

    def _prompt_until(
        self,
        prompt: str,
        retry: str,
        parse: Callable[[str], Optional[object]],
        expected: str,
    ):
        self._write(prompt)
        while True:
            line = self.input_stream.readline()
            if not line:
                raise InputClosedError(expected)

            value = parse(line)
            if value is not None:
                return value

            logger.debug(f"Rejected {expected}: {line.strip()!r}")
            self._write(retry)

    def _write(self, text: str) -> None:
        self.output_stream.write(text)
        self.output_stream.flush()

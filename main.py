import logging
import os
import sys
from typing import Optional, TextIO

from roster.cli.collector import PromptReader
from roster.cli.formatter import render
from roster.models.exceptions import InputClosedError
from roster.models.roster import Roster
from roster.models.sortedcontainers import AVLTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main(
    input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None
) -> int:
    input_stream = input_stream if input_stream is not None else sys.stdin
    output_stream = output_stream if output_stream is not None else sys.stdout

    roster = Roster(AVLTree())
    reader = PromptReader(input_stream, output_stream)

    try:
        results = roster.batch_add(reader.collect())
    except InputClosedError as e:
        logger.error(f"Error reading input: {e}")
        return 1
    except MemoryError:
        logger.critical("Memory allocation failed for new node")
        return 1

    ignored = results.count(False)
    logger.info(
        f"Loaded {roster.size()} students "
        f"(tree height {roster.height()}, {ignored} duplicate IDs ignored)"
    )

    render(roster.records(), output_stream)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

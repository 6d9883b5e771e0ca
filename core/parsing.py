"""
Transaction file parsing.
Each line holds three whitespace-separated integers: account, received, cash back.
"""
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from core.exceptions import DataNotFoundError, FileProcessingError, ParsingError
from core.logger import setup_logger
from core.schema import TransactionRecord

logger = setup_logger(__name__)

FIELD_NAMES = ("account", "received", "cashback")

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


@contextmanager
def open_transaction_source(file_path: str) -> Iterator[TextIO]:
    """
    Open the transaction file for the duration of a run.

    Args:
        file_path: Path to the text file

    Yields:
        Open text file handle

    Raises:
        DataNotFoundError: If file doesn't exist
        FileProcessingError: If file exists but cannot be opened
    """
    path = Path(file_path)
    if not path.is_file():
        raise DataNotFoundError(
            f"File not found: {file_path}",
            details={"file_path": file_path}
        )

    try:
        handle = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Failed to open {file_path}: {e}")
        raise FileProcessingError(
            f"Unable to open input file: {file_path}",
            details={"file_path": file_path, "error": str(e)}
        )

    logger.info(f"Opened transaction file {path.name}")
    try:
        yield handle
    finally:
        handle.close()


def parse_line(text: str, line_number: int) -> TransactionRecord:
    """
    Parse one line into a transaction record.

    Args:
        text: Raw line
        line_number: Record ordinal to assign

    Returns:
        Parsed TransactionRecord

    Raises:
        ParsingError: If the line does not hold exactly three integers
    """
    # One record per line; "1 10 0 2 20 0" is malformed, not two records
    tokens = text.split()
    if len(tokens) != len(FIELD_NAMES):
        raise ParsingError(
            f"Expected {len(FIELD_NAMES)} fields, found {len(tokens)}",
            details={"line": text.rstrip("\n"), "fields": len(tokens)}
        )

    bad = [token for token in tokens if not _INTEGER_TOKEN.fullmatch(token)]
    if bad:
        raise ParsingError(
            f"Non-integer field(s): {', '.join(bad)}",
            details={"line": text.rstrip("\n"), "invalid_tokens": bad}
        )

    values = dict(zip(FIELD_NAMES, (int(token) for token in tokens)))
    return TransactionRecord(line_number=line_number, **values)


class RecordReader:
    """
    Lazy reader turning lines into transaction records.

    Blank lines are skipped. A malformed line either ends reading or is
    skipped with a warning, depending on stop_on_malformed.
    """

    def __init__(self, lines: Iterable[str], stop_on_malformed: bool = True):
        self.lines = lines
        self.stop_on_malformed = stop_on_malformed
        self.stopped_early = False
        self.skipped_lines = 0

    def __iter__(self) -> Iterator[TransactionRecord]:
        record_number = 0
        for physical_line, text in enumerate(self.lines, start=1):
            if not text.strip():
                continue

            try:
                record = parse_line(text, record_number + 1)
            except ParsingError as e:
                if self.stop_on_malformed:
                    logger.warning(f"Stopped reading at line {physical_line}: {e.message}")
                    self.stopped_early = True
                    return
                logger.warning(f"Skipping line {physical_line}: {e.message}")
                self.skipped_lines += 1
                continue

            record_number += 1
            yield record


def iter_records(lines: Iterable[str], stop_on_malformed: bool = True) -> Iterator[TransactionRecord]:
    """
    Parse lines lazily into transaction records.

    Args:
        lines: Text lines (an open file works)
        stop_on_malformed: End iteration at the first malformed line instead of skipping it

    Returns:
        Iterator of TransactionRecord
    """
    return iter(RecordReader(lines, stop_on_malformed))

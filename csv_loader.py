"""
CSV Loader for Release Captain

This module reads the small CSV exports used by the release tools:
- Strips the byte-order mark from the header line
- Splits header and rows on commas (no quoting support)
- Collects values of repeated columns (e.g. Labels) into ordered lists

Do not use this for huge files, every line is read into memory first.
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from errors import MalformedInputError, MissingHeaderError

logger = logging.getLogger(__name__)

T = TypeVar('T')

BOM = "\ufeff"
DELIMITER = ","

Row = Dict[str, List[str]]


def to_duplicate_map(pairs: Iterable[Tuple[str, str]]) -> Row:
    """
    Build a mapping that keeps every value of a repeated key.

    Keys keep their first-seen order and values are appended in encounter order.

    Args:
        pairs: (column, value) pairs

    Returns:
        Mapping of column name to list of values
    """
    row: Row = {}
    for key, value in pairs:
        row.setdefault(key, []).append(value)
    return row


def read_lines(path: str) -> List[str]:
    """
    Read all lines of a text file without line terminators.

    Raises:
        MalformedInputError: If the file is not valid UTF-8
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return [line.rstrip('\r\n') for line in f]
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{path} is not valid UTF-8") from e


def process_csv(path: str, processor: Callable[[Row], Optional[T]]) -> Iterator[Optional[T]]:
    """
    Read a CSV file and lazily apply the processor to each data row.

    The header is validated immediately; rows are processed as the result is
    iterated. A processor returns None to signal that the row should be skipped,
    callers are expected to drop those.

    Args:
        path: Path to the CSV file
        processor: Callable turning a row mapping into a result

    Returns:
        Iterator of processor results

    Raises:
        MissingHeaderError: If the file is empty
        MalformedInputError: If the file is not valid UTF-8
    """
    lines = read_lines(path)
    if not lines:
        raise MissingHeaderError(f"This file does not contain a valid header: {path}")

    header = lines[0].replace(BOM, "").split(DELIMITER)
    logger.debug(f"[CSV] {path}: {len(header)} columns, {len(lines) - 1} data rows")

    return (
        processor(to_duplicate_map(zip(header, line.split(DELIMITER))))
        for line in lines[1:]
    )

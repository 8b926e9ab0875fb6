from __future__ import annotations

from typing import List

from .rules import ALTERNATE_DELIMITER, NORMALIZED_DELIMITER


def detect_delimiter(line: str) -> str:
    # Per line, so a document may mix styles.
    if ALTERNATE_DELIMITER in line and NORMALIZED_DELIMITER not in line:
        return ALTERNATE_DELIMITER
    return NORMALIZED_DELIMITER


def split_row(line: str) -> List[str]:
    """Split one line into trimmed fields. Quoting is not recognized."""
    return [field.strip() for field in line.split(detect_delimiter(line))]

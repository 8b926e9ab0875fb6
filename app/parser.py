"""
Record parsing for free-form sales CSV text.

Responsibilities:
- line splitting (LF or CRLF), blank line removal
- header detection via the synonym table, positional fallback otherwise
- per-row validation: date shape, salesperson presence, amount normalization

Malformed rows are skipped, never raised. An empty record list is a normal
outcome.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .amounts import AmountParseError, normalize_amount
from .headers import resolve_header_map
from .models import RowRejection, SaleRecord
from .rules import DATE_SHAPE, DEFAULT_HEADER_MAP, LINE_BREAK
from .tokenizer import split_row

logger = logging.getLogger(__name__)


class ParsedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: List[SaleRecord]
    header_map: Dict[str, int]
    header_detected: bool
    rejected: List[RowRejection] = Field(default_factory=list)
    lines: int = 0


def split_lines(text: str) -> List[str]:
    return [line for line in LINE_BREAK.split(text) if line.strip()]


def _field(row: List[str], position: int) -> Optional[str]:
    if position < len(row):
        return row[position]
    return None


def _parse_row(row: List[str], header_map: Dict[str, int], line_no: int):
    """Return a SaleRecord, or a RowRejection explaining why the row was dropped."""
    date = _field(row, header_map["date"])
    salesperson = _field(row, header_map["salesperson"])
    amount_raw = _field(row, header_map["amount"])

    if not date:
        return RowRejection(row=line_no, issue="missing_date", value=date)
    if not DATE_SHAPE.search(date):
        return RowRejection(row=line_no, issue="invalid_date", value=date)
    if not salesperson:
        return RowRejection(row=line_no, issue="missing_salesperson", value=salesperson)
    if amount_raw is None:
        return RowRejection(row=line_no, issue="invalid_amount", value=None)

    try:
        amount = normalize_amount(amount_raw)
    except AmountParseError:
        return RowRejection(row=line_no, issue="invalid_amount", value=amount_raw)

    return SaleRecord(date=date, salesperson=salesperson, amount=amount)


def parse_document(text: str) -> ParsedDocument:
    """
    Parse a whole document and keep the bookkeeping needed for reporting.

    Row numbers in rejections count non-blank lines from 1, header included.
    """
    lines = split_lines(text)
    if not lines:
        return ParsedDocument(records=[], header_map=dict(DEFAULT_HEADER_MAP), header_detected=False)

    header_map = resolve_header_map(split_row(lines[0]))
    header_detected = header_map is not None
    if header_map is None:
        header_map = dict(DEFAULT_HEADER_MAP)
    start = 1 if header_detected else 0

    records: List[SaleRecord] = []
    rejected: List[RowRejection] = []

    for index in range(start, len(lines)):
        outcome = _parse_row(split_row(lines[index]), header_map, index + 1)
        if isinstance(outcome, RowRejection):
            logger.debug("Skipping row %d: %s (%r)", outcome.row, outcome.issue, outcome.value)
            rejected.append(outcome)
        else:
            records.append(outcome)

    logger.info(
        "Parsed %d records from %d lines (header=%s, skipped=%d)",
        len(records),
        len(lines),
        header_detected,
        len(rejected),
    )

    return ParsedDocument(
        records=records,
        header_map=header_map,
        header_detected=header_detected,
        rejected=rejected,
        lines=len(lines),
    )


def parse(text: str) -> List[SaleRecord]:
    return parse_document(text).records

from __future__ import annotations

import base64
import hashlib
from decimal import Decimal
from typing import Iterable

from .models import CanonicalCsv, SaleRecord
from .rules import CANONICAL_FIELDS, NORMALIZED_DELIMITER, TARGET_ENCODING


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def format_amount(amount: float) -> str:
    """
    Render an amount positionally so re-import reads it back unchanged.

    No exponent, no trailing zeros ("100", not "100.0"). A fraction of exactly
    three digits gets a fourth zero, otherwise its "." reads as a grouping mark.
    """
    if amount == 0:
        return "0"
    text = format(Decimal(repr(amount)), "f")
    if "." not in text:
        return text
    whole, fraction = text.rstrip("0").split(".")
    if not fraction:
        return whole
    if len(fraction) == 3:
        fraction += "0"
    return f"{whole}.{fraction}"


def serialize(records: Iterable[SaleRecord]) -> str:
    """
    Re-export records as canonical CSV.

    Always "date,salesperson,amount" in that order, comma-delimited, LF line
    breaks and no trailing newline, whatever the input looked like.
    """
    lines = [NORMALIZED_DELIMITER.join(CANONICAL_FIELDS)]
    for record in records:
        lines.append(
            NORMALIZED_DELIMITER.join(
                (record.date, record.salesperson, format_amount(record.amount))
            )
        )
    return "\n".join(lines)


def encode_canonical_csv(records: Iterable[SaleRecord]) -> CanonicalCsv:
    data = serialize(records).encode(TARGET_ENCODING)
    return CanonicalCsv(
        sha256=_sha256_hex(data),
        encoding=TARGET_ENCODING,
        content_b64=base64.b64encode(data).decode("ascii"),
    )

"""
Deterministic parsing rules.

This file exists to make the accepted input shapes explicit and enforceable.
"""

import re

TARGET_ENCODING = "utf-8-sig"  # UTF-8 with BOM
NORMALIZED_DELIMITER = ","
ALTERNATE_DELIMITER = ";"

CANONICAL_FIELDS = ("date", "salesperson", "amount")

HEADER_SYNONYMS = {
    "date": ("date", "fecha"),
    "salesperson": ("salesperson", "comercial", "vendedor"),
    "amount": ("amount", "importe", "monto", "total"),
}

# Used when the first line is not a recognizable header.
DEFAULT_HEADER_MAP = {"date": 0, "salesperson": 1, "amount": 2}

# Shape only: "2024-13-40" matches. Searched anywhere in a date field,
# matched whole against a reference date.
DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

LINE_BREAK = re.compile(r"\r?\n")

ACCEPTED_EXTENSION = ".csv"

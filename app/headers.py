from __future__ import annotations

from typing import Dict, List, Optional

from .rules import CANONICAL_FIELDS, HEADER_SYNONYMS

_SYNONYM_LOOKUP = {
    synonym: field
    for field, synonyms in HEADER_SYNONYMS.items()
    for synonym in synonyms
}


def resolve_header(token: str) -> str:
    """Map a raw header token to its canonical field name.

    Unknown tokens come back trimmed and lower-cased.
    """
    key = token.strip().lower()
    return _SYNONYM_LOOKUP.get(key, key)


def resolve_header_map(tokens: List[str]) -> Optional[Dict[str, int]]:
    """
    Build a field -> column position map from a header row.

    Returns None unless every canonical field is present. When a field appears
    more than once the first column wins.
    """
    resolved = [resolve_header(t) for t in tokens]
    if not all(field in resolved for field in CANONICAL_FIELDS):
        return None
    return {field: resolved.index(field) for field in CANONICAL_FIELDS}

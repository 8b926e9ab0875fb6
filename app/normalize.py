"""
Upload decoding.

Responsibilities:
- encoding detection (best effort)
- BOM-aware UTF-8 decoding
- deterministic fallback when bytes cannot be decoded cleanly

Newlines and delimiters are left as-is; the parser handles both per line.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)


def decode_upload(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - If detection is uncertain, still attempt decode using best guess.
    - If decode fails, fall back to UTF-8, then to replacement characters, and report it.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    # A UTF-8 BOM must not leak into the first header token.
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
            decode_fallback = True
        except UnicodeDecodeError:
            # Last resort: decode with replacement so parsing can continue deterministically
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
            decode_fallback = True

    if decode_fallback:
        logger.warning("Could not decode upload as %s, used %s", detected, decode_used)
    else:
        logger.debug("Decoded upload as %s (detected %s)", decode_used, detected)

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report

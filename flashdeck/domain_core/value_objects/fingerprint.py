"""
Content fingerprint for card deduplication.

Two cards are considered the same content when their front and back match
after surrounding whitespace is trimmed, inner whitespace runs are collapsed
and case is folded. The fingerprint is the SHA-256 hex digest of
``normalized_front + SEPARATOR + normalized_back``.

SEPARATOR is a newline: normalization rewrites every whitespace run to a
single space, so a newline never survives inside either half and the split
point is unambiguous.
"""

import hashlib
import re
from typing import Optional

SEPARATOR = "\n"
FINGERPRINT_LENGTH = 64

_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Trim, collapse inner whitespace runs to a single space and lower-case."""
    return _WHITESPACE.sub(" ", text or "").strip().lower()


def fingerprint(front: Optional[str], back: Optional[str]) -> str:
    """Deterministic 64-char lowercase hex digest of normalized card content."""
    normalized = normalize(front) + SEPARATOR + normalize(back)
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

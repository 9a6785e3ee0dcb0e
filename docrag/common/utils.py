"""Common text utilities for docrag.

Text handling contract
----------------------
* Incoming documents and user queries have BOM markers stripped at the
  boundary so downstream processing does not see spurious characters.
* Token counts everywhere in the engine are whitespace-delimited word
  counts. The context budget and the store statistics use the same measure.
"""

import math
import re
import unicodedata

_WORD_RE = re.compile(r"\w+")


def clean_text(text: str, *, normalize: bool = True) -> str:
    """Remove BOM markers and optionally normalize text.

    Args:
        text: Input text that may contain BOM or special characters.
        normalize: Whether to apply NFKC normalization. Enabled by default.

    Returns:
        Cleaned text with BOMs removed and optional normalization applied.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    return cleaned


def normalize_text(text: str | None) -> str:
    """Clean text and collapse runs of whitespace into single spaces."""
    if not text:
        return ""
    return " ".join(clean_text(text).split())


def whitespace_tokens(text: str) -> list[str]:
    """Split text on runs of whitespace."""
    return text.split() if text else []


def count_tokens(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(whitespace_tokens(text))


def word_tokens(text: str) -> list[str]:
    """Lowercase alphanumeric word runs."""
    return _WORD_RE.findall(text.lower()) if text else []


def to_percent(value: float) -> int:
    """Convert a 0-1 score to an integer percentage, rounding halves up."""
    return int(math.floor(value * 100 + 0.5))

"""Shared helpers used across docrag layers."""

from .utils import clean_text, count_tokens, normalize_text, to_percent, whitespace_tokens, word_tokens

__all__ = [
    "clean_text",
    "count_tokens",
    "normalize_text",
    "to_percent",
    "whitespace_tokens",
    "word_tokens",
]

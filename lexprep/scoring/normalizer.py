"""
Text normalization for answer comparison.

Both variants fold case, strip accents and collapse whitespace. The strict
variant additionally drops every character that is not an ASCII letter or
whitespace; only the weighted scorer uses it.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_LETTERS = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")

# Bank preparation
_ANSWER_MARKER = re.compile(r"REPONSE\s*:", re.IGNORECASE)
_LINE_BREAKS = re.compile(r"\\n|[\r\n]")
_BULLETS = re.compile(r"[✓•]")


def normalize(text: Any, strict: bool = False) -> str:
    """
    Canonicalize text for substring comparison.

    Args:
        text: Raw text. Anything that is not a string normalizes to "".
        strict: Also remove characters outside [a-z\\s] after decomposition.

    Returns:
        Lower-cased, accent-free text with single spaces and no outer whitespace.
    """
    if not isinstance(text, str):
        return ""

    folded = unicodedata.normalize("NFD", text.lower())
    folded = _COMBINING_MARKS.sub("", folded)
    if strict:
        folded = _NON_LETTERS.sub("", folded)
    return _WHITESPACE.sub(" ", folded).strip()


def normalize_strict(text: Any) -> str:
    """Normalize and keep only letters and spaces."""
    return normalize(text, strict=True)


def clean_answer_text(text: Any) -> str:
    """Remove the REPONSE marker, line breaks and bullets from a bank answer."""
    if not isinstance(text, str):
        return ""

    cleaned = _ANSWER_MARKER.sub("", text)
    cleaned = _LINE_BREAKS.sub(" ", cleaned)
    cleaned = _BULLETS.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()

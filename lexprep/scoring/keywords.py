"""
Keyword extraction from official answer texts.

Two modes:
- derive_keywords(): every normalized token, used at scoring time when a
  question carries no explicit keyword list
- extract_significant_keywords(): stop-words and short tokens removed, used
  offline when preparing a question bank
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from .normalizer import clean_answer_text, normalize

# Whitespace and the punctuation that separates words in answer texts
TOKEN_DELIMITERS = re.compile(r"[\s,.;:!?]+")

# Characters trimmed from both ends of a token before admission
_TOKEN_EDGES = "'\"\\"

MIN_SIGNIFICANT_LENGTH = 3

FRENCH_STOP_WORDS: tuple[str, ...] = (
    "le", "la", "les", "de", "du", "des", "un", "une", "et", "en", "à", "au", "aux",
    "pour", "que", "qui", "dans", "ce", "cette", "ces", "est", "il", "elle", "sur",
    "par", "se", "sa", "son", "a", "ne", "pas", "plus", "ou", "d", "l", "qu",
)


def _tokens(text: str) -> list[str]:
    return [token for token in TOKEN_DELIMITERS.split(text) if token]


def _dedupe(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def derive_keywords(answer_text: Any, pre_clean: bool = False) -> list[str]:
    """
    Derive the keyword list of an official answer.

    Tokens are split on whitespace and ``,.;:!?``, normalized, and
    deduplicated in first-occurrence order.

    Args:
        answer_text: Official answer. Non-string input yields an empty list.
        pre_clean: Run clean_answer_text() first (drops REPONSE markers,
            escaped line breaks and bullets).

    Returns:
        Ordered list of unique normalized keywords.
    """
    if not isinstance(answer_text, str):
        return []

    text = clean_answer_text(answer_text) if pre_clean else answer_text
    normalized = (normalize(token) for token in _tokens(text))
    return _dedupe(token for token in normalized if token)


def extract_significant_keywords(
    text: Any,
    stop_words: Iterable[str] = FRENCH_STOP_WORDS,
) -> list[str]:
    """
    Extract a clean keyword list for bank preparation.

    Same contract as derive_keywords(), plus quote/backslash trimming, a
    stop-word filter and a minimum token length of 3.
    """
    if not isinstance(text, str):
        return []

    excluded = {normalize(word) for word in stop_words}
    keywords = []
    for token in _tokens(text):
        word = normalize(token.strip(_TOKEN_EDGES))
        if len(word) < MIN_SIGNIFICANT_LENGTH or word in excluded:
            continue
        keywords.append(word)

    return _dedupe(keywords)

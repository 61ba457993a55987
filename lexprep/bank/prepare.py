"""
Offline keyword preparation for question banks.

Cleans official answers and fills motsCles with significant keywords so the
quiz does not have to derive them from every word of the answer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from loguru import logger

from lexprep.scoring.keywords import FRENCH_STOP_WORDS, extract_significant_keywords
from lexprep.scoring.normalizer import clean_answer_text

from .models import Question

_ANSWER_MARKER = re.compile(r"REPONSE\s*:", re.IGNORECASE)
_LINE_BREAK_RUNS = re.compile(r"(?:\\n|[\r\n])+")


def _tidy_answer(text: str) -> str:
    text = _ANSWER_MARKER.sub("", text)
    return _LINE_BREAK_RUNS.sub(" ", text).strip()


def prepare_question(
    question: Question,
    stop_words: Iterable[str] = FRENCH_STOP_WORDS,
    overwrite: bool = True,
) -> Question:
    """
    Return a copy of the question with a tidy answer and generated keywords.

    Args:
        question: Source question, left untouched
        stop_words: Words never admitted as keywords
        overwrite: Replace an existing motsCles list; when False, questions
            that already have keywords only get their answer tidied
    """
    keywords = question.mots_cles
    if overwrite or not keywords:
        keywords = extract_significant_keywords(clean_answer_text(question.reponse), stop_words)

    return Question.model_validate(
        {
            **question.model_dump(),
            "reponse": _tidy_answer(question.reponse),
            "mots_cles": keywords,
        }
    )


def prepare_bank(
    questions: Iterable[Question],
    stop_words: Iterable[str] = FRENCH_STOP_WORDS,
    overwrite: bool = True,
) -> list[Question]:
    """Prepare every question of a bank."""
    stop_words = tuple(stop_words)
    prepared = [prepare_question(q, stop_words, overwrite) for q in questions]

    empty = sum(1 for q in prepared if not q.mots_cles)
    if empty:
        logger.warning(f"{empty} question(s) have no significant keywords")
    logger.info(f"Prepared keywords for {len(prepared)} question(s)")
    return prepared

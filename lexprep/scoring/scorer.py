"""
Answer scoring entry point.

score() never raises: malformed questions, blank answers and empty keyword
sets all resolve to a zero-score AnswerAnalysis.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import ValidationError

from .base import AnswerAnalysis, ScoringMode, StrategyRegistry

if TYPE_CHECKING:
    from lexprep.bank.models import Question


def select_mode(question: Question) -> ScoringMode:
    """
    Pick the scoring mode from the question's shape.

    Weighted when essential/secondary keywords or grave-error rules are
    present, flat coverage otherwise.
    """
    if question.has_weighted_keywords or question.erreurs_graves:
        return ScoringMode.WEIGHTED
    return ScoringMode.FLAT


def _coerce_question(question: Any) -> Question | None:
    from lexprep.bank.models import Question

    if isinstance(question, Question):
        return question
    if isinstance(question, Mapping):
        try:
            return Question.model_validate(question)
        except ValidationError as e:
            logger.warning(f"Unscorable question record ({e.error_count()} error(s)): {e}")
            return None

    logger.warning(f"Unscorable question of type {type(question).__name__}")
    return None


def score(question: Question | Mapping[str, Any], answer: Any, mode: ScoringMode | None = None) -> AnswerAnalysis:
    """
    Score a free-text answer against a question.

    Args:
        question: A Question or any mapping with the bank's record shape
        answer: The learner's answer; non-string or blank answers score 0
        mode: Force a scoring mode instead of selecting it from the question

    Returns:
        AnswerAnalysis with an integer score in [0, 100]
    """
    resolved = _coerce_question(question)
    if resolved is None:
        return AnswerAnalysis(score=0, mode=mode or ScoringMode.FLAT)

    strategy = StrategyRegistry.create(mode or select_mode(resolved))

    if not isinstance(answer, str) or not answer.strip():
        return strategy.empty_analysis(resolved)

    return strategy.score(answer, resolved)

"""
Scoring Strategy Implementations.

FLAT: share of keywords contained in the answer, mapped through the score curve.
WEIGHTED: essential keywords share 70 points and secondary keywords 30, then
grave-error rules multiply the running score.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from .base import AnswerAnalysis, ScoringMode, ScoringStrategy, StrategyRegistry
from .curve import clamp_score, coverage_to_score
from .normalizer import normalize, normalize_strict

if TYPE_CHECKING:
    from lexprep.bank.models import GraveErrorRule, Question

ESSENTIAL_POINTS = 70.0
SECONDARY_POINTS = 30.0


# =============================================================================
# FLAT Strategy
# =============================================================================


@StrategyRegistry.register(ScoringMode.FLAT)
class FlatCoverageStrategy(ScoringStrategy):
    """
    Grade by keyword coverage.

    Answer and keywords are normalized without stripping punctuation, so
    keywords such as "l'employeur" must appear verbatim (accents and case aside).
    """

    name = "flat_coverage"

    def keywords(self, question: Question) -> list[str]:
        return question.resolved_keywords()

    def score(self, answer: str, question: Question) -> AnswerAnalysis:
        keywords = self.keywords(question)
        if not keywords:
            logger.warning(f"Question {question.id!r} has no keywords, scoring 0")
            return self.empty_analysis(question)

        user = normalize(answer)
        found, missing = [], []
        for keyword in keywords:
            (found if normalize(keyword) in user else missing).append(keyword)

        return AnswerAnalysis(
            score=coverage_to_score(len(found) / len(keywords)),
            found=found,
            missing=missing,
            mode=ScoringMode.FLAT,
        )


# =============================================================================
# WEIGHTED Strategy
# =============================================================================


@StrategyRegistry.register(ScoringMode.WEIGHTED)
class WeightedKeywordStrategy(ScoringStrategy):
    """
    Grade by essential/secondary keyword weights with penalty rules.

    Matching uses the strict normalizer on both sides. Keywords with no
    letters left after strict normalization cannot be matched and are skipped.
    """

    name = "weighted_keywords"

    def _tiers(self, question: Question) -> tuple[list[str], list[str]]:
        essential = [k for k in question.essential_keywords() if normalize_strict(k)]
        secondary = [k for k in question.secondary_keywords() if normalize_strict(k)]
        return essential, secondary

    def keywords(self, question: Question) -> list[str]:
        essential, secondary = self._tiers(question)
        return essential + secondary

    def score(self, answer: str, question: Question) -> AnswerAnalysis:
        essential, secondary = self._tiers(question)
        if not essential and not secondary:
            logger.warning(f"Question {question.id!r} has no keywords, scoring 0")
            return self.empty_analysis(question)

        user = normalize_strict(answer)
        essential_found = [k for k in essential if normalize_strict(k) in user]
        secondary_found = [k for k in secondary if normalize_strict(k) in user]

        raw = (
            len(essential_found) * ESSENTIAL_POINTS / (len(essential) or 1)
            + len(secondary_found) * SECONDARY_POINTS / (len(secondary) or 1)
        )

        running = raw
        triggered = []
        for rule in question.erreurs_graves:
            if self._rule_matches(rule, user):
                running *= rule.penalty
                triggered.append(rule)

        if triggered:
            logger.debug(
                f"Question {question.id!r}: {len(triggered)} grave error(s), "
                f"{raw:.1f} -> {running:.1f}"
            )

        found = essential_found + secondary_found
        missing = [k for k in essential if k not in essential_found] + [
            k for k in secondary if k not in secondary_found
        ]

        return AnswerAnalysis(
            score=clamp_score(running),
            found=found,
            missing=missing,
            mode=ScoringMode.WEIGHTED,
            penalties=triggered,
            details={
                "essential_found": len(essential_found),
                "essential_total": len(essential),
                "secondary_found": len(secondary_found),
                "secondary_total": len(secondary),
                "raw_score": raw,
            },
        )

    @staticmethod
    def _rule_matches(rule: GraveErrorRule, user: str) -> bool:
        terms = [normalize_strict(term) for term in rule.detect]
        terms = [term for term in terms if term]
        return bool(terms) and all(term in user for term in terms)

"""
Base Scoring Strategy.

Provides the result type, the abstract strategy and a registry keyed by
ScoringMode so the scorer can pick a strategy from a question's shape.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from loguru import logger

if TYPE_CHECKING:
    from lexprep.bank.models import GraveErrorRule, Question

# Display tiers of the original quiz screens
GOOD_THRESHOLD = 70
AVERAGE_THRESHOLD = 40


class ScoringMode(str, Enum):
    """How an answer is compared against a question's keywords."""

    FLAT = "flat"  # Coverage of one keyword list, mapped through the curve
    WEIGHTED = "weighted"  # Essential 70 / secondary 30, then penalties


# =============================================================================
# Answer Analysis
# =============================================================================


@dataclass
class AnswerAnalysis:
    """
    Result of scoring a free-text answer.

    Keywords in found/missing keep the question's spelling and order.
    """

    score: int
    found: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    mode: ScoringMode = ScoringMode.FLAT
    penalties: list[GraveErrorRule] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.found) + len(self.missing)

    @property
    def found_count(self) -> int:
        return len(self.found)

    @property
    def coverage(self) -> float:
        """Fraction of keywords found, 0.0 when there are none."""
        return self.found_count / self.total if self.total else 0.0

    def tier(self, good: int = GOOD_THRESHOLD, average: int = AVERAGE_THRESHOLD) -> str:
        """Feedback tier: good, average or bad."""
        if self.score >= good:
            return "good"
        if self.score >= average:
            return "average"
        return "bad"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "score": self.score,
            "found": list(self.found),
            "missing": list(self.missing),
            "total": self.total,
            "foundCount": self.found_count,
            "mode": self.mode.value,
            "penalties": [rule.model_dump() for rule in self.penalties],
            "details": dict(self.details),
        }


# =============================================================================
# Strategy Registry
# =============================================================================


class StrategyRegistry:
    """
    Registry for scoring strategies.

    Example:
        @StrategyRegistry.register(ScoringMode.FLAT)
        class FlatCoverageStrategy(ScoringStrategy):
            ...

        strategy = StrategyRegistry.create(ScoringMode.FLAT)
    """

    _strategies: ClassVar[dict[ScoringMode, type[ScoringStrategy]]] = {}

    @classmethod
    def register(cls, mode: ScoringMode):
        """Decorator to register a scoring strategy for a mode."""

        def decorator(strategy_class: type[ScoringStrategy]):
            cls._strategies[mode] = strategy_class
            strategy_class.scoring_mode = mode
            logger.debug(f"Registered scoring strategy: {mode.value} -> {strategy_class.__name__}")
            return strategy_class

        return decorator

    @classmethod
    def get(cls, mode: ScoringMode) -> type[ScoringStrategy]:
        """Get strategy class by scoring mode."""
        if mode not in cls._strategies:
            raise KeyError(f"No strategy registered for mode: {mode.value}")
        return cls._strategies[mode]

    @classmethod
    def create(cls, mode: ScoringMode) -> ScoringStrategy:
        return cls.get(mode)()

    @classmethod
    def list_strategies(cls) -> dict[str, type[ScoringStrategy]]:
        """List all registered strategies."""
        return {mode.value: cls._strategies[mode] for mode in cls._strategies}


# =============================================================================
# Base Scoring Strategy
# =============================================================================


class ScoringStrategy(ABC):
    """
    Abstract base class for scoring strategies.

    Strategies receive an answer that is already known to be a non-blank
    string and a validated Question. They must not raise for any such input.
    """

    scoring_mode: ClassVar[ScoringMode] = ScoringMode.FLAT
    name: ClassVar[str] = "base_strategy"

    @abstractmethod
    def score(self, answer: str, question: Question) -> AnswerAnalysis:
        """
        Score an answer.

        Args:
            answer: The learner's answer text
            question: The question being answered

        Returns:
            AnswerAnalysis with score and keyword detail
        """
        ...

    @abstractmethod
    def keywords(self, question: Question) -> list[str]:
        """All keywords this strategy checks, in report order."""
        ...

    def empty_analysis(self, question: Question) -> AnswerAnalysis:
        """Zero-score result listing every keyword as missing."""
        return AnswerAnalysis(score=0, missing=self.keywords(question), mode=self.scoring_mode)

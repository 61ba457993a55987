"""
Answer Scoring Engine.

Normalizes free-text answers, derives keywords from official answers and
scores coverage with pluggable strategies.
"""

from .normalizer import clean_answer_text, normalize, normalize_strict
from .keywords import FRENCH_STOP_WORDS, derive_keywords, extract_significant_keywords
from .curve import coverage_to_score
from .base import AnswerAnalysis, ScoringMode, ScoringStrategy, StrategyRegistry
from .strategies import FlatCoverageStrategy, WeightedKeywordStrategy
from .scorer import score, select_mode

__all__ = [
    # Text
    "normalize",
    "normalize_strict",
    "clean_answer_text",
    "derive_keywords",
    "extract_significant_keywords",
    "FRENCH_STOP_WORDS",
    # Scoring
    "coverage_to_score",
    "AnswerAnalysis",
    "ScoringMode",
    "ScoringStrategy",
    "StrategyRegistry",
    "FlatCoverageStrategy",
    "WeightedKeywordStrategy",
    "score",
    "select_mode",
]

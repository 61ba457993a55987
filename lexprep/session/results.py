"""
End-of-session summaries.

Training sessions report aggregate keyword coverage; exams report the mean
score and the split between passed and failed answers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lexprep.bank.models import Question
from lexprep.scoring import AnswerAnalysis, score
from lexprep.scoring.curve import round_half_up

from .state import SessionState


class ReportFilter(str, Enum):
    """Which exam results to list."""

    ALL = "all"
    GOOD = "good"
    BAD = "bad"


@dataclass
class TrainingSummary:
    """Keyword totals across a training session."""

    found: int
    total: int

    @property
    def score(self) -> int:
        """Overall keyword coverage as a 0-100 score, 0 without keywords."""
        if not self.total:
            return 0
        return round_half_up(self.found / self.total * 100)


@dataclass
class QuestionResult:
    """Outcome of one exam question."""

    index: int
    question: Question
    answer: str
    analysis: AnswerAnalysis
    passed: bool


@dataclass
class ExamReport:
    """Scores of every question of an exam."""

    results: list[QuestionResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def global_score(self) -> int:
        if not self.results:
            return 0
        return round_half_up(sum(r.analysis.score for r in self.results) / self.total)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return self.total - self.passed_count

    @property
    def passed_pct(self) -> int:
        if not self.results:
            return 0
        return round_half_up(self.passed_count / self.total * 100)

    @property
    def failed_pct(self) -> int:
        if not self.results:
            return 0
        return 100 - self.passed_pct

    def filter(self, outcome: ReportFilter | str = ReportFilter.ALL) -> list[QuestionResult]:
        """
        Results for "all", "good" (passed) or "bad" (failed).

        Raises:
            ValueError: Unknown outcome
        """
        outcome = ReportFilter(outcome)
        if outcome is ReportFilter.GOOD:
            return [r for r in self.results if r.passed]
        if outcome is ReportFilter.BAD:
            return [r for r in self.results if not r.passed]
        return list(self.results)


def summarize_training(state: SessionState) -> TrainingSummary:
    """Aggregate found/total keyword counts over every question of the session."""
    found = total = 0
    for question, answer in zip(state.questions, state.answers):
        analysis = score(question, answer)
        found += analysis.found_count
        total += analysis.total
    return TrainingSummary(found=found, total=total)


def build_exam_report(state: SessionState, pass_threshold: int = 70) -> ExamReport:
    """Score every exam answer; a question passes at pass_threshold or above."""
    results = []
    for index, (question, answer) in enumerate(zip(state.questions, state.answers)):
        analysis = score(question, answer)
        results.append(
            QuestionResult(
                index=index,
                question=question,
                answer=answer,
                analysis=analysis,
                passed=analysis.score >= pass_threshold,
            )
        )
    return ExamReport(results=results)

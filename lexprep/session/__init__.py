"""
Study sessions: explicit state, pure navigation and result summaries.
"""

from .state import (
    SessionMode,
    SessionState,
    finish,
    format_time_remaining,
    go_to,
    next_question,
    previous_question,
    record_answer,
    start_session,
    tick,
)
from .results import (
    ExamReport,
    QuestionResult,
    ReportFilter,
    TrainingSummary,
    build_exam_report,
    summarize_training,
)

__all__ = [
    "SessionMode",
    "SessionState",
    "start_session",
    "record_answer",
    "go_to",
    "next_question",
    "previous_question",
    "tick",
    "finish",
    "format_time_remaining",
    "ExamReport",
    "QuestionResult",
    "ReportFilter",
    "TrainingSummary",
    "build_exam_report",
    "summarize_training",
]

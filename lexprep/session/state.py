"""
Session state for training and exam sessions.

SessionState is an immutable value; every navigation function returns a new
state. Nothing here reads the clock or ambient randomness unless no random
source is supplied.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from loguru import logger

from lexprep.bank.models import Question


class SessionMode(str, Enum):
    """Kind of study session."""

    TRAINING = "training"  # Feedback after every question
    EXAM = "exam"  # Timed, feedback at the end


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a running session."""

    mode: SessionMode
    questions: tuple[Question, ...]
    answers: tuple[str, ...]
    current_index: int = 0
    time_remaining: int | None = None  # seconds, exam only
    pending_seconds: float = 0.0  # fraction of a second not yet charged
    finished: bool = False

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if self.finished or not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def current_answer(self) -> str:
        if not self.answers:
            return ""
        return self.answers[self.current_index]

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index >= self.total - 1

    def is_answered(self, index: int) -> bool:
        """True when the answer at index has non-blank text."""
        return bool(self.answers[index].strip())

    @property
    def answered_count(self) -> int:
        return sum(1 for i in range(self.total) if self.is_answered(i))


def start_session(
    bank: Sequence[Question],
    mode: SessionMode = SessionMode.TRAINING,
    count: int = 10,
    time_limit_minutes: int | None = None,
    rng: random.Random | None = None,
) -> SessionState:
    """
    Draw questions for a new session.

    Args:
        bank: Available questions
        mode: Training or exam
        count: Questions to draw, capped at the bank size
        time_limit_minutes: Exam duration; ignored in training mode
        rng: Random source for the draw, for reproducible sessions

    Returns:
        A fresh SessionState; finished immediately when the bank is empty
    """
    rng = rng or random.Random()
    size = max(0, min(count, len(bank)))
    drawn = tuple(rng.sample(list(bank), size))

    time_remaining = None
    if mode is SessionMode.EXAM and time_limit_minutes is not None:
        time_remaining = time_limit_minutes * 60

    logger.debug(f"Starting {mode.value} session with {size} question(s)")
    return SessionState(
        mode=mode,
        questions=drawn,
        answers=("",) * size,
        time_remaining=time_remaining,
        finished=size == 0,
    )


def record_answer(state: SessionState, text: str) -> SessionState:
    """Store the answer for the current question."""
    if state.finished or not state.questions:
        return state
    answers = list(state.answers)
    answers[state.current_index] = text
    return replace(state, answers=tuple(answers))


def finish(state: SessionState) -> SessionState:
    return replace(state, finished=True)


def go_to(state: SessionState, index: int) -> SessionState:
    """
    Move to a question.

    Negative indexes are ignored; moving past the last question finishes the
    session.
    """
    if state.finished or index < 0:
        return state
    if index >= state.total:
        return finish(state)
    return replace(state, current_index=index)


def next_question(state: SessionState) -> SessionState:
    return go_to(state, state.current_index + 1)


def previous_question(state: SessionState) -> SessionState:
    return go_to(state, state.current_index - 1)


def tick(state: SessionState, seconds: float = 1) -> SessionState:
    """
    Consume exam time; the session finishes when it reaches zero.

    Fractions of a second are carried over to the next call until they add
    up to a whole second.
    """
    if state.finished or state.time_remaining is None:
        return state

    elapsed = state.pending_seconds + max(0.0, seconds)
    whole = int(elapsed)
    remaining = max(0, state.time_remaining - whole)
    if remaining == 0:
        logger.info("Exam time is up")
        return replace(state, time_remaining=0, pending_seconds=0.0, finished=True)
    return replace(state, time_remaining=remaining, pending_seconds=elapsed - whole)


def format_time_remaining(seconds: int | None) -> str:
    """MM:SS countdown display."""
    if seconds is None:
        return "--:--"
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"

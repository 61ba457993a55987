"""
Typer CLI for LexPrep.

Commands:
    lexprep score 12 --answer "..."     - Score one answer against question 12
    lexprep keywords "text"             - Show the keywords derived from a text
    lexprep stats                       - Show question bank statistics
    lexprep prepare in.json out.json    - Generate significant keywords for a bank
    lexprep import-ocr in.txt out.json  - Convert an OCR'd question sheet to a bank
    lexprep train                       - Interactive training session
    lexprep exam                        - Timed exam session

Usage:
    lexprep --help
    lexprep train --count 5 --seed 42
    lexprep exam --minutes 30
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import get_settings
from lexprep.bank import (
    Question,
    QuestionBankError,
    load_question_bank,
    parse_ocr_text,
    prepare_bank,
    save_question_bank,
)
from lexprep.scoring import ScoringMode, derive_keywords, extract_significant_keywords, score, select_mode
from lexprep.session import (
    ReportFilter,
    SessionMode,
    build_exam_report,
    finish,
    next_question,
    previous_question,
    record_answer,
    start_session,
    summarize_training,
    tick,
)

from .display import render_analysis, render_exam_report, render_progress, render_question

app = typer.Typer(
    help="LexPrep: self-study quiz with keyword-based answer scoring",
    no_args_is_help=True,
)

console = Console()

# Exam navigation inputs
PREVIOUS_COMMAND = ":p"
FINISH_COMMAND = ":q"


def _error(message: str) -> None:
    console.print(Panel(f"[bold red]Error:[/bold red] {message}", border_style="red"))


def _load_bank(bank: str | None) -> list[Question]:
    """Load the bank or exit with code 1."""
    settings = get_settings()
    source = bank or settings.question_bank_path
    try:
        questions = load_question_bank(source, timeout=settings.http_timeout)
    except QuestionBankError as e:
        _error(str(e))
        raise typer.Exit(code=1)

    if not questions:
        _error("No questions available.")
        raise typer.Exit(code=1)
    return questions


def _rng(seed: int | None) -> random.Random:
    return random.Random(seed)


# ========================================
# Scoring Commands
# ========================================


@app.command("score")
def score_command(
    question_id: str = typer.Argument(..., help="Id of the question to answer"),
    answer: str | None = typer.Option(None, "--answer", "-a", help="Answer text (prompted when omitted)"),
    bank: str | None = typer.Option(None, "--bank", "-b", help="Question bank path or URL"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Score a single answer against a bank question."""
    settings = get_settings()
    questions = _load_bank(bank)

    question = next((q for q in questions if str(q.id) == question_id), None)
    if question is None:
        _error(f"Question not found: {question_id}")
        raise typer.Exit(code=1)

    if answer is None:
        render_question(console, question, question_id)
        answer = Prompt.ask("Your answer", default="", show_default=False)

    analysis = score(question, answer)

    if as_json:
        typer.echo(json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2))
        return

    render_analysis(console, analysis, question, settings.pass_threshold, settings.average_threshold)


@app.command("keywords")
def keywords_command(
    text: str = typer.Argument(..., help="Official answer text"),
    significant: bool = typer.Option(
        False, "--significant", "-s", help="Drop stop-words and short tokens (bank preparation mode)"
    ),
) -> None:
    """Show the keywords extracted from an answer text."""
    keywords = extract_significant_keywords(text) if significant else derive_keywords(text)
    if not keywords:
        console.print("[dim]No keywords[/dim]")
        return
    for keyword in keywords:
        typer.echo(keyword)


@app.command("stats")
def stats_command(
    bank: str | None = typer.Option(None, "--bank", "-b", help="Question bank path or URL"),
) -> None:
    """Show how many questions the bank holds and how they are scored."""
    questions = _load_bank(bank)

    weighted = sum(1 for q in questions if select_mode(q) is ScoringMode.WEIGHTED)
    explicit = sum(1 for q in questions if q.mots_cles or q.has_weighted_keywords)

    table = Table(title="[bold]Question bank[/bold]", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Questions", str(len(questions)))
    table.add_row("Weighted scoring", str(weighted))
    table.add_row("Flat scoring", str(len(questions) - weighted))
    table.add_row("Explicit keywords", str(explicit))
    table.add_row("Derived keywords", str(len(questions) - explicit))
    console.print(table)


# ========================================
# Bank Preparation Commands
# ========================================


@app.command("prepare")
def prepare_command(
    source: Path = typer.Argument(..., help="Bank JSON to read"),
    output: Path = typer.Argument(..., help="Bank JSON to write"),
    keep_existing: bool = typer.Option(
        False, "--keep-existing", help="Keep keyword lists that are already filled"
    ),
) -> None:
    """Generate significant keywords for every question of a bank."""
    try:
        questions = load_question_bank(source)
    except QuestionBankError as e:
        _error(str(e))
        raise typer.Exit(code=1)

    prepared = prepare_bank(questions, overwrite=not keep_existing)
    save_question_bank(prepared, output)
    console.print(f"[green]Keywords generated for {len(prepared)} question(s): {output}[/green]")


@app.command("import-ocr")
def import_ocr_command(
    source: Path = typer.Argument(..., help="OCR text file"),
    output: Path = typer.Argument(..., help="Bank JSON to write"),
) -> None:
    """Convert an OCR'd question sheet into a question bank."""
    if not source.exists():
        _error(f"File not found: {source}")
        raise typer.Exit(code=1)

    try:
        text = source.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        _error(f"Cannot read {source}: {e}")
        raise typer.Exit(code=1)

    questions = parse_ocr_text(text)
    save_question_bank(questions, output, wrap=False)
    console.print(f"[green]JSON generated with {len(questions)} question(s): {output}[/green]")


# ========================================
# Session Commands
# ========================================


@app.command("train")
def train_command(
    bank: str | None = typer.Option(None, "--bank", "-b", help="Question bank path or URL"),
    count: int | None = typer.Option(None, "--count", "-n", min=1, help="Number of questions"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for the question draw"),
) -> None:
    """Training session: answer, then see the official answer and keywords."""
    settings = get_settings()
    questions = _load_bank(bank)

    state = start_session(
        questions,
        SessionMode.TRAINING,
        count or settings.default_question_count,
        rng=_rng(seed),
    )

    while not state.finished:
        question = state.current_question
        render_question(console, question, f"{state.current_index + 1} / {state.total}")

        state = record_answer(state, Prompt.ask("Your answer", default="", show_default=False))
        render_analysis(
            console,
            score(question, state.current_answer),
            question,
            settings.pass_threshold,
            settings.average_threshold,
        )
        state = next_question(state)

    summary = summarize_training(state)
    console.print(Panel(f"Session finished! Final score: [bold]{summary.score}%[/bold]"))


@app.command("exam")
def exam_command(
    bank: str | None = typer.Option(None, "--bank", "-b", help="Question bank path or URL"),
    count: int | None = typer.Option(None, "--count", "-n", min=1, help="Number of questions"),
    minutes: int | None = typer.Option(None, "--minutes", "-m", min=1, help="Time limit in minutes"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for the question draw"),
    outcome: ReportFilter = typer.Option(ReportFilter.ALL, "--show", help="Results to list"),
) -> None:
    """Timed exam: answers are scored together at the end."""
    settings = get_settings()
    questions = _load_bank(bank)

    state = start_session(
        questions,
        SessionMode.EXAM,
        count or settings.default_question_count,
        time_limit_minutes=minutes or settings.default_exam_minutes,
        rng=_rng(seed),
    )
    console.print(
        f"[dim]Type {PREVIOUS_COMMAND} to go back, {FINISH_COMMAND} to hand in early.[/dim]"
    )

    while not state.finished:
        render_question(
            console,
            state.current_question,
            f"{state.current_index + 1} / {state.total}",
            timer=state.time_remaining,
        )
        render_progress(console, state)

        started = time.monotonic()
        text = Prompt.ask("Your answer", default=state.current_answer, show_default=bool(state.current_answer))
        command = text.strip().lower()
        if command not in (PREVIOUS_COMMAND, FINISH_COMMAND):
            state = record_answer(state, text)

        state = tick(state, time.monotonic() - started)
        if state.finished:
            console.print("[bold red]Time is up![/bold red]")
            break

        if command == FINISH_COMMAND:
            state = finish(state)
        elif command == PREVIOUS_COMMAND:
            state = previous_question(state)
        else:
            state = next_question(state)

    report = build_exam_report(state, settings.pass_threshold)
    render_exam_report(console, report, outcome)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level,
        format="<level>{level: <8}</level> | {message}",
    )

    app()


if __name__ == "__main__":
    main()

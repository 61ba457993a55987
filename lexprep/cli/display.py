"""
Terminal rendering for questions, answer analyses and exam reports.
"""

from __future__ import annotations

import re

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from lexprep.bank.models import Question
from lexprep.scoring import AnswerAnalysis
from lexprep.scoring.curve import round_half_up
from lexprep.session import ExamReport, ReportFilter, SessionState, format_time_remaining

# =============================================================================
# THEME
# =============================================================================

LEXPREP_THEME = {
    "primary": "#4FA3FF",  # Blue - titles and borders
    "secondary": "#8AB4F8",  # Light blue - tables
    "success": "#00C853",  # Green - good score, found keywords
    "warning": "#FFB300",  # Amber - average score
    "error": "#FF5252",  # Red - bad score, missing keywords
    "dim": "#7A869A",  # Gray - hints and secondary text
}

TIER_COLORS = {
    "good": LEXPREP_THEME["success"],
    "average": LEXPREP_THEME["warning"],
    "bad": LEXPREP_THEME["error"],
}

_BLANK_LINES = re.compile(r"\n\s*\n(\s*\n)+")


def format_question_text(text: str | None) -> str:
    """Turn escaped line breaks into real ones and squeeze runs of blank lines."""
    if not text:
        return ""
    text = text.replace("\\n", "\n")
    return _BLANK_LINES.sub("\n\n", text).strip()


def render_question(console: Console, question: Question, position: str, timer: int | None = None) -> None:
    """Display a question panel with its position (and countdown in exams)."""
    title = f"[bold]Question {position}[/bold]"
    if timer is not None:
        title += f"  [dim]{format_time_remaining(timer)}[/dim]"

    console.print(
        Panel(
            format_question_text(question.question),
            title=title,
            border_style=Style(color=LEXPREP_THEME["primary"]),
            box=box.HEAVY,
            padding=(1, 2),
        )
    )


def render_analysis(
    console: Console,
    analysis: AnswerAnalysis,
    question: Question,
    good: int = 70,
    average: int = 40,
) -> None:
    """Show the score badge, the official answer and found/missing keywords."""
    color = TIER_COLORS[analysis.tier(good, average)]

    badge = Text(f"{analysis.score}%", style=Style(color=color, bold=True))
    explain = Text(
        f"  {analysis.found_count} keyword(s) found out of {analysis.total}"
        f" -> {round_half_up(analysis.coverage * 100)}% -> final score {analysis.score}%",
        style=Style(color=LEXPREP_THEME["dim"]),
    )
    console.print(badge + explain)

    for rule in analysis.penalties:
        console.print(
            f"[{LEXPREP_THEME['error']}]Grave error detected ({', '.join(rule.detect)}): "
            f"score x{rule.penalty:g}[/]"
        )

    console.print(
        Panel(
            format_question_text(question.reponse) or "[dim]No official answer[/dim]",
            title="[bold]Official answer[/bold]",
            border_style=Style(color=color),
            padding=(0, 1),
        )
    )

    found = Text()
    for keyword in analysis.found:
        found.append(f" ✔ {keyword} ", style=Style(color=LEXPREP_THEME["success"]))
    missing = Text()
    for keyword in analysis.missing:
        missing.append(f" ✘ {keyword} ", style=Style(color=LEXPREP_THEME["error"]))

    console.print(f"[bold]Found ({analysis.found_count}/{analysis.total})[/bold]")
    console.print(found if analysis.found else Text("None", style="italic"))
    console.print("[bold]Missing[/bold]")
    console.print(missing if analysis.missing else Text("None", style="italic"))


def render_exam_report(
    console: Console, report: ExamReport, outcome: ReportFilter | str = ReportFilter.ALL
) -> None:
    """Global score panel followed by a per-question table."""
    summary = Text()
    summary.append(f"{report.global_score}%\n", style=Style(color=LEXPREP_THEME["primary"], bold=True))
    summary.append("Final score\n\n")
    summary.append(f"{report.passed_pct}% ", style=Style(color=LEXPREP_THEME["success"], bold=True))
    summary.append("passed   ")
    summary.append(f"{report.failed_pct}% ", style=Style(color=LEXPREP_THEME["error"], bold=True))
    summary.append("failed")

    console.print(Panel(summary, box=box.DOUBLE, border_style=Style(color=LEXPREP_THEME["primary"])))

    table = Table(
        title="[bold]Results[/bold]",
        box=box.HEAVY,
        border_style=Style(color=LEXPREP_THEME["secondary"]),
    )
    table.add_column("#", justify="right")
    table.add_column("Question")
    table.add_column("Your answer")
    table.add_column("Score", justify="right")

    for result in report.filter(outcome):
        color = LEXPREP_THEME["success"] if result.passed else LEXPREP_THEME["error"]
        table.add_row(
            str(result.index + 1),
            format_question_text(result.question.question),
            result.answer.strip() or "[italic]No answer[/italic]",
            f"[{color}]{result.analysis.score}%[/]",
        )

    console.print(table)


def render_progress(console: Console, state: SessionState) -> None:
    """One-line answered/total indicator."""
    console.print(
        f"[dim]{state.answered_count}/{state.total} answered[/dim]",
    )

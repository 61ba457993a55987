"""
Question bank loading and saving.

A bank document is either a JSON list of question records or an object with
a "questions" list. Sources may be local paths or http(s) URLs.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from .models import Question


class QuestionBankError(ValueError):
    """Raised when a question bank cannot be read or is malformed."""


def _is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def parse_question_bank(data: Any) -> list[Question]:
    """
    Build questions from a decoded bank document.

    Invalid records are skipped with a warning. Duplicate ids are an error.

    Raises:
        QuestionBankError: Document has the wrong shape or duplicate ids
    """
    if isinstance(data, dict):
        data = data.get("questions")
    if not isinstance(data, list):
        raise QuestionBankError("Invalid bank format: expected a list of questions")

    questions: list[Question] = []
    seen: set[str] = set()

    for index, record in enumerate(data):
        try:
            question = Question.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Skipping question record #{index}: {e.error_count()} validation error(s)")
            continue

        key = str(question.id)
        if key in seen:
            raise QuestionBankError(f"Duplicate question id: {question.id!r}")
        seen.add(key)
        questions.append(question)

    logger.info(f"Loaded {len(questions)} question(s)")
    return questions


def _read_url(url: str, client: httpx.Client | None, timeout: float) -> Any:
    owns_client = client is None
    client = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        raise QuestionBankError(f"Failed to fetch question bank from {url}: {e}") from e
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Question bank at {url} is not valid JSON: {e}") from e
    finally:
        if owns_client:
            client.close()


def _read_file(path: Path) -> Any:
    if not path.exists():
        raise QuestionBankError(f"Question bank not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Question bank {path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise QuestionBankError(f"Question bank {path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise QuestionBankError(f"Cannot read question bank {path}: {e}") from e


def load_question_bank(
    source: str | Path,
    client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> list[Question]:
    """
    Load a question bank from a file path or an http(s) URL.

    Args:
        source: Local path or URL of the JSON document
        client: Optional httpx client for URL sources
        timeout: Request timeout when no client is given

    Raises:
        QuestionBankError: Source missing, unreachable or malformed
    """
    logger.debug(f"Loading question bank from {source}")
    if _is_url(source):
        data = _read_url(str(source), client, timeout)
    else:
        data = _read_file(Path(source))
    return parse_question_bank(data)


def save_question_bank(questions: Iterable[Question], path: str | Path, wrap: bool = True) -> Path:
    """
    Write questions as a bank document using the bank's field names.

    Args:
        questions: Questions to write
        path: Output file
        wrap: Write {"questions": [...]} instead of a bare list

    Returns:
        The path written
    """
    path = Path(path)
    records = [q.to_record() for q in questions]
    document: Any = {"questions": records} if wrap else records

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False, indent=2)

    logger.info(f"Wrote {len(records)} question(s) to {path}")
    return path

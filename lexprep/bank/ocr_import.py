"""
Import of OCR'd question sheets.

Expected layout: numbered items ("12. ") each holding the question text, a
"REPONSE :" marker and the official answer. Line breaks are stored as
escaped "\\n" markers, the bank's convention for multi-line text.
"""

from __future__ import annotations

import re

from loguru import logger

from .models import Question

_NUMBERED_ITEM = re.compile(r"(\d+)\.\s(.*?)(?=\n\d+\.|\n*\Z)", re.DOTALL)
_ANSWER_MARKER = re.compile(r"REPONSE\s*:", re.IGNORECASE)
_TRAILING_JUNK = re.compile(r"(\n|\}),?$")


def _escape_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


def parse_ocr_text(text: str) -> list[Question]:
    """
    Split OCR text into questions.

    Ids are assigned sequentially from 1 in document order; the printed item
    numbers are ignored. Keyword lists start empty.
    """
    questions = []
    for next_id, match in enumerate(_NUMBERED_ITEM.finditer(text), start=1):
        content = match.group(2).strip()
        question_part, *answer_parts = _ANSWER_MARKER.split(content)

        answer = "REPONSE :".join(answer_parts).strip()
        answer = _TRAILING_JUNK.sub("", answer)

        questions.append(
            Question(
                id=next_id,
                question=_escape_newlines(question_part.strip()),
                reponse=_escape_newlines(answer),
            )
        )

    logger.info(f"Parsed {len(questions)} question(s) from OCR text")
    return questions

"""
Question bank: records, loading, OCR import and keyword preparation.
"""

from .models import GraveErrorRule, Question
from .loader import QuestionBankError, load_question_bank, parse_question_bank, save_question_bank
from .ocr_import import parse_ocr_text
from .prepare import prepare_bank, prepare_question

__all__ = [
    "GraveErrorRule",
    "Question",
    "QuestionBankError",
    "load_question_bank",
    "parse_question_bank",
    "save_question_bank",
    "parse_ocr_text",
    "prepare_bank",
    "prepare_question",
]

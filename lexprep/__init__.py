"""
LexPrep: keyword-based self-study quiz tool.

Free-text answers are scored against the vocabulary of an official answer:
- scoring: normalizer, keyword extraction, scoring strategies
- bank: question records, loading, OCR import, keyword preparation
- session: explicit session state and result summaries
- cli: terminal front end
"""

__version__ = "1.0.0"

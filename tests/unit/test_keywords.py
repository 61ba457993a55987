"""
Unit tests for keyword extraction.

Run: pytest tests/unit/test_keywords.py -v
"""

from lexprep.scoring.keywords import (
    FRENCH_STOP_WORDS,
    derive_keywords,
    extract_significant_keywords,
)


class TestDeriveKeywords:
    """Test scoring-time keyword derivation."""

    def test_splits_on_whitespace_and_punctuation(self):
        text = "Le conseil; juge: les litiges, vite! Non? Oui."
        assert derive_keywords(text) == [
            "le", "conseil", "juge", "les", "litiges", "vite", "non", "oui",
        ]

    def test_tokens_normalized(self):
        assert derive_keywords("Ministère DÉCONCENTRÉ") == ["ministere", "deconcentre"]

    def test_duplicates_collapse_in_first_occurrence_order(self):
        text = "travail inspection Travail du travail inspection"
        assert derive_keywords(text) == ["travail", "inspection", "du"]

    def test_deterministic(self):
        text = "L'inspection du travail contrôle l'application du Code du travail."
        assert derive_keywords(text) == derive_keywords(text)

    def test_source_text_untouched(self):
        text = "Un texte, inchangé."
        derive_keywords(text)
        assert text == "Un texte, inchangé."

    def test_apostrophes_stay_inside_tokens(self):
        assert derive_keywords("l'employeur") == ["l'employeur"]

    def test_pre_clean_drops_marker(self):
        assert derive_keywords("REPONSE : oui\\nnon", pre_clean=True) == ["oui", "non"]

    def test_empty_and_malformed_input(self):
        assert derive_keywords("") == []
        assert derive_keywords("  ,.; ") == []
        assert derive_keywords(None) == []
        assert derive_keywords(12) == []


class TestExtractSignificantKeywords:
    """Test bank-preparation keyword extraction."""

    def test_stop_words_and_short_tokens_removed(self):
        text = "Le conseil de prud'hommes juge les litiges du travail"
        assert extract_significant_keywords(text) == [
            "conseil", "prud'hommes", "juge", "litiges", "travail",
        ]

    def test_accented_stop_word_matches_normalized_token(self):
        """Stop-words are compared after normalization, so "été" removes "ete"."""
        assert extract_significant_keywords("été contrat", stop_words=["été"]) == ["contrat"]

    def test_quotes_and_backslashes_trimmed(self):
        assert extract_significant_keywords('"contrat" \\salarié\\') == ["contrat", "salarie"]

    def test_length_threshold(self):
        assert extract_significant_keywords("abc ab a") == ["abc"]

    def test_custom_stop_words(self):
        assert extract_significant_keywords("contrat travail", stop_words=["travail"]) == ["contrat"]

    def test_duplicates_collapse(self):
        assert extract_significant_keywords("Contrat contrat CONTRAT") == ["contrat"]

    def test_non_string_is_empty(self):
        assert extract_significant_keywords(None) == []

    def test_curated_list_contains_articles(self):
        for word in ("le", "la", "les", "qu"):
            assert word in FRENCH_STOP_WORDS

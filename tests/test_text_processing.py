"""Test text normalization."""

import pytest

from tfidf_search.utils.text_processing import (
    STOPWORDS,
    SUFFIXES,
    TextNormalizer,
    stem,
)


class TestStem:
    """Test the light suffix stemmer."""

    @pytest.mark.parametrize("word, expected", [
        ("running", "runn"),
        ("quickly", "quick"),
        ("tested", "test"),
        ("studies", "stud"),
        ("cats", "cat"),
        ("movement", "move"),
    ])
    def test_strips_suffix(self, word, expected):
        """Test a matching suffix is removed."""
        assert stem(word) == expected

    @pytest.mark.parametrize("word", ["bus", "red", "sing", "quick"])
    def test_length_guard_keeps_short_words(self, word):
        """Test words not longer than suffix + 2 are left alone."""
        assert stem(word) == word

    def test_first_match_wins_over_longest_match(self):
        """Test suffixes are tried in declared order, not by length."""
        # "s" is declared before "ness", so "ness" is never reached.
        assert stem("happiness") == "happines"
        # "ies" fails its length guard, then "s" applies.
        assert stem("flies") == "flie"

    def test_lowercases(self):
        """Test stemming is case-insensitive."""
        assert stem("Cats") == "cat"

    def test_suffix_order_is_preserved(self):
        """Test the suffix list keeps its declared order and repeats."""
        assert SUFFIXES[:3] == ("ing", "ly", "ed")
        assert SUFFIXES.index("s") < SUFFIXES.index("ness")
        assert len(SUFFIXES) == 20


class TestTextNormalizer:
    """Test TextNormalizer.normalize."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_full_pipeline(self, normalizer):
        """Test lowercasing, punctuation, stopwords, short tokens and stemming."""
        tokens = normalizer.normalize("The quick brown foxes are running!")
        assert tokens == ["quick", "brown", "foxe", "runn"]

    def test_duplicates_and_order_retained(self, normalizer):
        """Test repeated tokens stay in order of appearance."""
        assert normalizer.normalize("cats chase cats") == ["cat", "chase", "cat"]

    def test_short_tokens_dropped(self, normalizer):
        """Test tokens of two characters or fewer are removed."""
        assert normalizer.normalize("go ox ab xy") == []

    def test_stopwords_dropped(self, normalizer):
        """Test stopwords are removed regardless of case."""
        assert normalizer.normalize("THE Which Should") == []
        assert "should" in STOPWORDS

    def test_punctuation_and_underscore_split_tokens(self, normalizer):
        """Test non-alphanumeric characters act as separators."""
        assert normalizer.normalize("snake_case,room-2024") == ["snake", "case", "room", "2024"]

    def test_empty_text(self, normalizer):
        """Test empty and whitespace-only text yield no tokens."""
        assert normalizer.normalize("") == []
        assert normalizer.normalize("   \n\t ") == []

    def test_normalization_is_stable_on_clean_tokens(self, normalizer):
        """Test clean tokens pass through a second normalization unchanged."""
        tokens = normalizer.normalize("Quick brown python memory")
        assert normalizer.normalize(" ".join(tokens)) == tokens

    def test_custom_suffixes(self):
        """Test a normalizer built with its own suffix list."""
        normalizer = TextNormalizer(suffixes=("ness",))
        assert normalizer.normalize("happiness") == ["happi"]

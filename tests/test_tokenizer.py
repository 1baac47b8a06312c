"""Tests for tokenization and search string generation."""

import pytest

from kwx.tokenizer import (
    Tokenizer,
    available_languages,
    create_ngrams,
    generate_search_strings,
    load_stopwords,
    normalize,
    tokenize,
)


class TestNormalize:
    """Test line normalization."""

    def test_lowercases(self):
        assert normalize("Geological SURVEY") == "geological survey"

    def test_separators_become_spaces(self):
        assert normalize("geo-thermal_energy/heat").split() == ["geo", "thermal", "energy", "heat"]

    def test_quotes_and_colons(self):
        assert normalize('"rock": ore\'s').split() == ["rock", "ore", "s"]

    def test_idempotent(self):
        once = normalize("Oil-Well: Drilling")
        assert normalize(once) == once


class TestStopwords:
    """Test stopword profiles."""

    def test_english_available(self):
        assert "english" in available_languages()

    def test_exception_words_are_stopwords(self):
        stopwords = load_stopwords("english")
        assert "well" in stopwords
        assert "causes" in stopwords
        assert "the" in stopwords

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            load_stopwords("klingon")

    def test_tokenizer_rejects_unknown_language(self):
        with pytest.raises(ValueError):
            Tokenizer(language="klingon")


class TestTokenizer:
    """Test the Tokenizer class."""

    @pytest.fixture
    def tokenizer(self):
        return Tokenizer()

    def test_plain_words(self, tokenizer):
        assert tokenizer.tokenize("National Geological Survay report") == [
            "national", "geological", "survay", "report",
        ]

    def test_removes_stopwords(self, tokenizer):
        assert tokenizer.tokenize("the rock of ages") == ["rock", "ages"]

    def test_removes_digit_words(self, tokenizer):
        assert tokenizer.tokenize("drilled 2024 wells in 3 sites") == ["drilled", "wells", "sites"]

    def test_keeps_mixed_alphanumerics(self, tokenizer):
        assert tokenizer.tokenize("3d seismic") == ["3d", "seismic"]

    def test_strips_punctuation(self, tokenizer):
        assert tokenizer.tokenize("granite, basalt; (schist)!") == ["granite", "basalt", "schist"]

    def test_strips_markup(self, tokenizer):
        assert tokenizer.tokenize("<b>granite</b> quarry") == ["granite", "quarry"]

    def test_keeps_duplicates(self, tokenizer):
        assert tokenizer.tokenize("rock rock") == ["rock", "rock"]

    def test_empty_line(self, tokenizer):
        assert tokenizer.tokenize("") == []

    def test_exception_path_content(self, tokenizer):
        """Raw words come first, followed by the extracted tokens."""
        assert tokenizer.tokenize("oil well drilling") == [
            "oil", "well", "drilling", "oil", "drilling",
        ]

    def test_exception_path_thesaurus(self, tokenizer):
        assert tokenizer.tokenize("oil well", thesaurus=True) == ["oil", "well"]

    def test_without_exceptions_stopword_dropped(self):
        tokenizer = Tokenizer(exceptions=[])
        assert tokenizer.tokenize("oil well", thesaurus=True) == ["oil"]

    def test_custom_stopwords(self):
        tokenizer = Tokenizer(stopwords=["rock"])
        assert tokenizer.tokenize("the rock") == ["the"]

    def test_module_level_tokenize(self):
        assert tokenize("Oil Well", exceptions=["well"], thesaurus=True) == ["oil", "well"]


class TestSearchStrings:
    """Test n-gram search string generation."""

    def test_create_ngrams(self):
        assert create_ngrams(["a", "b", "c"], 2) == ["ab", "bc"]

    def test_window_larger_than_tokens(self):
        assert create_ngrams(["a", "b"], 3) == []

    def test_largest_windows_first(self):
        assert generate_search_strings(["a", "b", "c"], 3) == ["abc", "ab", "bc", "a", "b", "c"]

    def test_max_n_above_token_count(self):
        assert generate_search_strings(["a", "b", "c"], 4) == ["abc", "ab", "bc", "a", "b", "c"]

    def test_max_n_one_gives_single_tokens(self):
        assert generate_search_strings(["a", "b", "c"], 1) == ["a", "b", "c"]

    def test_empty_tokens(self):
        assert generate_search_strings([], 4) == []

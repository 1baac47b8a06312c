"""
Line normalization, tokenization and n-gram search string generation.

Tokens come from a stopword-filtering keyword extraction. A short list of
exception words (e.g. "well" in "oil well") switches a line to the raw-word
path, because the stopword filter would otherwise drop terms that matter for
the thesaurus.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

STOPWORDS_DIR = Path(__file__).parent / "data" / "stopwords"

DEFAULT_EXCEPTIONS = ["well", "causes"]

# Characters treated as word separators before splitting
_SEPARATORS = re.compile(r"[_\"\-.:'/]")

# Markup and punctuation stripped by keyword extraction
_HTML_TAG = re.compile(r"<[^>]+>")
_PUNCTUATION = re.compile(r"[.,;!?():\"“”‘’]|^'|'$")
_SINGLE_SYMBOL = re.compile(r"[-_@&#]")
_DIGIT = re.compile(r"\d")


def available_languages() -> list[str]:
    """List language profiles with a bundled stopword list."""
    return sorted(p.stem for p in STOPWORDS_DIR.glob("*.txt"))


def load_stopwords(language: str) -> frozenset[str]:
    """
    Load the stopword list for a language profile.

    Args:
        language: Profile name, e.g. "english"

    Returns:
        Frozen set of lowercase stopwords

    Raises:
        ValueError: If no stopword list exists for the language
    """
    path = STOPWORDS_DIR / f"{language}.txt"
    if not path.exists():
        raise ValueError(
            f"Unsupported language: {language!r} "
            f"(available: {', '.join(available_languages())})"
        )

    words = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            words.add(line.lower())

    logger.debug(f"Loaded {len(words)} stopwords for {language}")
    return frozenset(words)


def normalize(line: str) -> str:
    """Lowercase a line and turn separator characters into spaces."""
    return _SEPARATORS.sub(" ", line.lower())


class Tokenizer:
    """Splits a line into match tokens for one language profile."""

    def __init__(
        self,
        exceptions: Optional[Iterable[str]] = None,
        language: str = "english",
        stopwords: Optional[Iterable[str]] = None,
    ):
        """
        Initialize tokenizer.

        Args:
            exceptions: Words that switch a line to the raw-word path
            language: Stopword profile name
            stopwords: Explicit stopword list, overrides the language profile
        """
        self.exceptions = frozenset(DEFAULT_EXCEPTIONS if exceptions is None else exceptions)
        self.language = language
        if stopwords is not None:
            self.stopwords = frozenset(w.lower() for w in stopwords)
        else:
            self.stopwords = load_stopwords(language)

    def extract(self, text: str) -> list[str]:
        """
        General keyword extraction.

        Strips markup and punctuation, drops all-digit words and stopwords.
        Case is kept as given and duplicates are kept.
        """
        text = _HTML_TAG.sub("", text).strip()
        results = []
        for word in text.split():
            w = _PUNCTUATION.sub("", word)
            if len(w) == 1:
                w = _SINGLE_SYMBOL.sub("", w)
            digits = _DIGIT.findall(w)
            if digits and len(digits) == len(w):
                w = ""
            if w and w.lower() not in self.stopwords:
                results.append(w)
        return results

    def tokenize(self, line: str, thesaurus: bool = False) -> list[str]:
        """
        Tokenize a line.

        Args:
            line: Text to tokenize (lowercased here if not already)
            thesaurus: True when building thesaurus entries from labels

        Returns:
            Token list. On the exception path this is the raw words for
            thesaurus labels, or raw words followed by extracted tokens for
            content lines.
        """
        text = normalize(line)
        words = text.split()

        if self.exceptions.intersection(words):
            if thesaurus:
                return words
            return words + self.extract(text)

        return self.extract(text)


def tokenize(
    line: str,
    exceptions: Optional[Iterable[str]] = None,
    language: str = "english",
    thesaurus: bool = False,
) -> list[str]:
    """Tokenize a single line with a throwaway Tokenizer."""
    return Tokenizer(exceptions, language).tokenize(line, thesaurus=thesaurus)


def create_ngrams(words: list[str], n: int) -> list[str]:
    """Concatenate every window of n consecutive words, without separators."""
    return ["".join(words[i:i + n]) for i in range(len(words) - n + 1)]


def generate_search_strings(words: list[str], max_n: int) -> list[str]:
    """
    Build fuzzy-match probe strings for a token list.

    Windows of max_n down to 2 words come first, then the single words.
    """
    search = []
    for n in range(max_n, 1, -1):
        search.extend(create_ngrams(words, n))
    search.extend(words)
    return search

"""kwx - Fuzzy thesaurus keyword extraction."""

__version__ = "0.1.0"

from .models import (
    ContextualEntry,
    DetailedRecord,
    DetailedResult,
    ExtractOptions,
    MatchedKeyword,
    SummaryResult,
    ThesaurusEntry,
)
from .extractor import KeywordExtractor, extract_keywords
from .tokenizer import Tokenizer, generate_search_strings, tokenize
from .vocabulary import build_thesaurus, filter_thesaurus, load_contextual, load_thesaurus

__all__ = [
    "ContextualEntry",
    "DetailedRecord",
    "DetailedResult",
    "ExtractOptions",
    "MatchedKeyword",
    "SummaryResult",
    "ThesaurusEntry",
    "KeywordExtractor",
    "extract_keywords",
    "Tokenizer",
    "generate_search_strings",
    "tokenize",
    "build_thesaurus",
    "filter_thesaurus",
    "load_contextual",
    "load_thesaurus",
]

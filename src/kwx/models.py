"""Data models for kwx."""

from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Optional, Sequence, Union


@dataclass(frozen=True)
class ThesaurusEntry:
    """A controlled-vocabulary keyword candidate."""

    label: str
    tokens: tuple[str, ...]
    uri: str
    topic: str = ""

    @classmethod
    def from_label(cls, label: str, uri: str, topic: str = "", tokenizer=None) -> "ThesaurusEntry":
        """
        Build an entry, deriving tokens from the label.

        Args:
            label: Display label of the keyword
            uri: Stable identifier
            topic: Free-text classification tag
            tokenizer: Tokenizer used in thesaurus mode (default english profile)

        Returns:
            ThesaurusEntry with tokens derived from the lowercased label
        """
        if tokenizer is None:
            from .tokenizer import Tokenizer
            tokenizer = Tokenizer()
        tokens = tokenizer.tokenize(label.lower(), thesaurus=True)
        return cls(label=label, tokens=tuple(tokens), uri=uri, topic=topic or "")

    def to_keyword(self) -> "MatchedKeyword":
        return MatchedKeyword(label=self.label, uri=self.uri, topic=self.topic)


class ContextualEntry(NamedTuple):
    """
    Row of a contextual vocabulary matched by substring containment.

    For the topic cross-reference vocabulary the pattern is ignored and the
    label doubles as the topic substring.
    """

    pattern: str
    label: str
    uri: str


@dataclass(frozen=True)
class MatchedKeyword:
    """A keyword found in the content. Identity is (label, uri)."""

    label: str
    uri: str
    topic: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        data = {"label": self.label, "uri": self.uri}
        if self.topic is not None:
            data["topic"] = self.topic
        return data


@dataclass
class LineRecord:
    """Intermediate state for a single content line."""

    raw: str
    trimmed: str
    lower: str
    tokens: list[str] = field(default_factory=list)
    search_strings: list[str] = field(default_factory=list)


@dataclass
class DetailedRecord:
    """Keywords found on one content line."""

    row: int  # 1-based line number
    line: str  # Original, untrimmed text
    keywords: list[MatchedKeyword] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "line": self.line,
            "keywords": [kw.to_dict() for kw in self.keywords],
        }


@dataclass
class SummaryResult:
    """Document-level deduplicated keywords."""

    keywords: list[MatchedKeyword] = field(default_factory=list)
    elapsed: float = 0.0  # Seconds
    keyword_count: int = 0  # Sum of per-line match counts

    detailed = False


@dataclass
class DetailedResult:
    """Per-line keyword report."""

    records: list[DetailedRecord] = field(default_factory=list)
    elapsed: float = 0.0
    keyword_count: int = 0

    detailed = True


ExtractionResult = Union[SummaryResult, DetailedResult]

ContextualVocabulary = Sequence[Sequence[str]]


@dataclass
class ExtractOptions:
    """
    Options for a single extraction call.

    Only ``keywords`` is required; everything else has a working default.
    """

    keywords: Optional[Sequence[ThesaurusEntry]]
    max_n: int = 4
    language: str = "english"
    extract_exceptions: list[str] = field(default_factory=lambda: ["well", "causes"])
    atx: Optional[ContextualVocabulary] = None
    country: Optional[ContextualVocabulary] = None
    euroscivoc: Optional[ContextualVocabulary] = None
    detailed_output: bool = False
    detailed_output_function: Optional[Callable[[DetailedRecord], None]] = None
    summary_output_function: Optional[Callable[[SummaryResult], None]] = None
    progress_function: Optional[Callable[[int, int, int], None]] = None
    yield_interval: float = 0.0  # Seconds slept between lines by extract_async

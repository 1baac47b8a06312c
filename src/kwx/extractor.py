"""
Keyword extraction over newline-delimited content.

Each line is tokenized, expanded into n-gram search strings, fuzzily matched
against the thesaurus and then augmented from the contextual vocabularies.
Lines are processed strictly in input order.
"""

import asyncio
import logging
import math
import time
from typing import Iterator, Optional

from .context import augment
from .matcher import build_match_keys, match_line
from .models import (
    DetailedRecord,
    DetailedResult,
    ExtractionResult,
    ExtractOptions,
    LineRecord,
    MatchedKeyword,
    SummaryResult,
)
from .tokenizer import Tokenizer, generate_search_strings

logger = logging.getLogger(__name__)


class _Run:
    """State of a single extraction call."""

    def __init__(self, content: str, options: ExtractOptions, tokenizer: Tokenizer):
        if options.keywords is None:
            raise ValueError("No thesaurus given: options.keywords is required")
        if not isinstance(content, str):
            raise ValueError(f"Content must be a string, got {type(content).__name__}")
        if options.max_n < 1:
            raise ValueError(f"max_n must be at least 1, got {options.max_n}")

        self.options = options
        self.tokenizer = tokenizer
        self.start = time.perf_counter()
        self.lines = content.split("\n")
        self.match_keys = build_match_keys(options.keywords)
        self.do_summary = bool(options.summary_output_function) or not options.detailed_output
        self.summary: dict[MatchedKeyword, None] = {}
        self.records: list[DetailedRecord] = []
        self.keyword_count = 0

    def process(self, counter: int, raw: str) -> None:
        """Process one line; counter is its 1-based position."""
        opts = self.options
        total = len(self.lines)

        trimmed = raw.strip()
        if trimmed:
            record = LineRecord(raw=raw, trimmed=trimmed, lower=trimmed.lower())
            record.tokens = self.tokenizer.tokenize(record.lower)
            record.search_strings = generate_search_strings(record.tokens, opts.max_n)

            found = match_line(record.search_strings, self.match_keys)
            augment(found, record.lower, opts.atx, opts.country, opts.euroscivoc)

            if opts.detailed_output:
                output = DetailedRecord(row=counter, line=raw, keywords=list(found))
                self.records.append(output)
                if opts.detailed_output_function:
                    opts.detailed_output_function(output)
            if self.do_summary:
                self.summary.update(found)
            self.keyword_count += len(found)

        if opts.progress_function:
            opts.progress_function(counter, total, math.floor(counter / total * 100))

    def finish(self) -> ExtractionResult:
        elapsed = time.perf_counter() - self.start
        summary: Optional[SummaryResult] = None
        if self.do_summary:
            summary = SummaryResult(
                keywords=list(self.summary),
                elapsed=elapsed,
                keyword_count=self.keyword_count,
            )

        logger.info(
            f"Extracted {self.keyword_count} keywords from {len(self.lines)} lines "
            f"in {elapsed:.3f}s"
        )

        if self.options.summary_output_function:
            self.options.summary_output_function(summary)

        if self.options.detailed_output:
            return DetailedResult(
                records=self.records,
                elapsed=time.perf_counter() - self.start,
                keyword_count=self.keyword_count,
            )
        return summary

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return enumerate(self.lines, start=1)


class KeywordExtractor:
    """
    Fuzzy thesaurus keyword extractor.

    The extractor holds no per-call state, so one instance can serve
    concurrent calls sharing the same thesaurus.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        """
        Initialize extractor.

        Args:
            tokenizer: Tokenizer to use; by default one is built per call from
                the language and exception words of the options
        """
        self._tokenizer = tokenizer

    def _get_tokenizer(self, options: ExtractOptions) -> Tokenizer:
        tokenizer = self._tokenizer
        if (
            tokenizer is None
            or tokenizer.language != options.language
            or tokenizer.exceptions != frozenset(options.extract_exceptions)
        ):
            tokenizer = Tokenizer(options.extract_exceptions, options.language)
        return tokenizer

    def extract(self, content: str, options: ExtractOptions) -> ExtractionResult:
        """
        Extract thesaurus keywords from content.

        Args:
            content: Newline-delimited text; each line is matched on its own
            options: Thesaurus, contextual vocabularies and output settings

        Returns:
            DetailedResult if options.detailed_output, otherwise SummaryResult

        Raises:
            ValueError: If options.keywords is missing or content is not a string
        """
        run = _Run(content, options, self._get_tokenizer(options))
        logger.debug(f"Extracting from {len(run.lines)} lines with {len(run.match_keys)} keywords")
        for counter, line in run:
            run.process(counter, line)
        return run.finish()

    async def extract_async(self, content: str, options: ExtractOptions) -> ExtractionResult:
        """
        Asynchronous variant of extract.

        Control returns to the event loop between lines, never within one.
        """
        run = _Run(content, options, self._get_tokenizer(options))
        logger.debug(f"Extracting from {len(run.lines)} lines with {len(run.match_keys)} keywords")
        for counter, line in run:
            run.process(counter, line)
            await asyncio.sleep(options.yield_interval)
        return run.finish()


def extract_keywords(content: str, options: Optional[ExtractOptions] = None, **kwargs) -> ExtractionResult:
    """
    Convenience wrapper around KeywordExtractor.extract.

    Options may be given as an ExtractOptions object or as keyword arguments.
    """
    if options is None:
        options = ExtractOptions(**{"keywords": None, **kwargs})
    return KeywordExtractor().extract(content, options)

"""Loading and preparing thesaurus and contextual vocabularies."""

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional

from .models import ContextualEntry, ThesaurusEntry
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def build_thesaurus(
    rows: Iterable[Mapping[str, str]],
    tokenizer: Optional[Tokenizer] = None,
) -> list[ThesaurusEntry]:
    """
    Build thesaurus entries from label/uri/topic rows.

    Rows whose label produces no tokens cannot match anything and are skipped.
    """
    if tokenizer is None:
        tokenizer = Tokenizer()

    entries = []
    for row in rows:
        label = (row.get("label") or "").strip()
        uri = (row.get("uri") or "").strip()
        if not label or not uri:
            raise ValueError(f"Thesaurus row needs a label and a uri: {dict(row)}")

        entry = ThesaurusEntry.from_label(label, uri, row.get("topic") or "", tokenizer)
        if not entry.tokens:
            logger.debug(f"Skipping keyword without tokens: {label!r}")
            continue
        entries.append(entry)

    return entries


def uri_code(uri: str) -> str:
    """Final path segment of a keyword URI."""
    return uri.rstrip("/").rsplit("/", 1)[-1]


def filter_thesaurus(
    entries: Iterable[ThesaurusEntry],
    max_words: int = 4,
    max_length: int = 40,
    ignore: Optional[Iterable[str]] = None,
) -> list[ThesaurusEntry]:
    """
    Restrict a thesaurus to entries worth matching.

    Args:
        entries: Thesaurus entries
        max_words: Maximum number of tokens per entry
        max_length: Labels must be shorter than this
        ignore: URI codes (final path segment) of non-significant keywords

    Returns:
        Filtered list, thesaurus order preserved
    """
    ignored = set(ignore or ())
    return [
        e for e in entries
        if len(e.tokens) <= max_words
        and len(e.label) < max_length
        and uri_code(e.uri) not in ignored
    ]


def _read_rows(path: Path) -> list:
    """Read a CSV/TSV file (skipping # comments) or a JSON array."""
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")

    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array in {path}")
        return data

    delimiter = "\t" if path.suffix.lower() == ".tsv" else ","
    with open(path, encoding="utf-8", newline="") as f:
        lines = [line for line in f if line.strip() and not line.startswith("#")]
    return list(csv.reader(lines, delimiter=delimiter))


def load_thesaurus(path: Path | str, tokenizer: Optional[Tokenizer] = None) -> list[ThesaurusEntry]:
    """
    Load a thesaurus file.

    CSV/TSV files need a header with label and uri columns (topic optional);
    JSON files hold an array of objects with the same keys.
    """
    path = Path(path)
    rows = _read_rows(path)

    if path.suffix.lower() != ".json":
        if not rows:
            return []
        header = [h.strip().lower() for h in rows[0]]
        missing = {"label", "uri"} - set(header)
        if missing:
            raise ValueError(f"Thesaurus {path} is missing columns: {', '.join(sorted(missing))}")
        rows = [dict(zip(header, r)) for r in rows[1:]]

    entries = build_thesaurus(rows, tokenizer)
    logger.info(f"Loaded {len(entries)} keywords from {path}")
    return entries


def load_contextual(path: Path | str) -> list[ContextualEntry]:
    """Load a contextual vocabulary of (pattern, label, uri) rows."""
    path = Path(path)
    entries = []
    for row in _read_rows(path):
        if len(row) < 3:
            raise ValueError(f"Contextual row needs pattern, label and uri in {path}: {row}")
        entries.append(ContextualEntry(*(str(v) for v in row[:3])))

    logger.info(f"Loaded {len(entries)} contextual entries from {path}")
    return entries

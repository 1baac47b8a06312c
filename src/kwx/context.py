"""Contextual keyword passes based on plain substring containment."""

from typing import Optional

from .models import ContextualVocabulary, MatchedKeyword


def add_acronyms(
    found: dict[MatchedKeyword, None],
    lower_line: str,
    atx: ContextualVocabulary,
) -> None:
    """Add acronym/topic vocabulary hits whose URI is not already matched."""
    seen = {m.uri for m in found}
    for pattern, label, uri in atx:
        if pattern in lower_line and uri not in seen:
            found[MatchedKeyword(label=label, uri=uri, topic="")] = None
            seen.add(uri)


def add_places(
    found: dict[MatchedKeyword, None],
    lower_line: str,
    country: ContextualVocabulary,
) -> None:
    """Add geographic names; only URIs seen in this pass are skipped."""
    seen = set()
    for pattern, label, uri in country:
        if pattern in lower_line and uri not in seen:
            found[MatchedKeyword(label=label, uri=uri)] = None
            seen.add(uri)


def add_topics(found: dict[MatchedKeyword, None], euroscivoc: ContextualVocabulary) -> None:
    """Cross-reference the topics of keywords found so far."""
    topics = ";".join(m.topic or "" for m in found).lower()
    for _, topic, uri in euroscivoc:
        if topic in topics:
            found[MatchedKeyword(label=topic, uri=uri)] = None


def augment(
    found: dict[MatchedKeyword, None],
    lower_line: str,
    atx: Optional[ContextualVocabulary] = None,
    country: Optional[ContextualVocabulary] = None,
    euroscivoc: Optional[ContextualVocabulary] = None,
) -> None:
    """Run the contextual passes in order, updating found in place."""
    if atx:
        add_acronyms(found, lower_line, atx)
    if country:
        add_places(found, lower_line, country)
    if euroscivoc:
        add_topics(found, euroscivoc)

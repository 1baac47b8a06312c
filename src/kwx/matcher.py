"""
Fuzzy thesaurus matching using bounded Levenshtein distance.

Each thesaurus entry is compared against the n-gram search strings of a line.
First-character and length pre-filters skip most comparisons; the distance
itself is computed by symspellpy's bounded edit distance, which gives up as
soon as the allowed distance is exceeded.
"""

from typing import Iterable, Sequence

from symspellpy.editdistance import DistanceAlgorithm, EditDistance

from .models import MatchedKeyword, ThesaurusEntry

# Length filter: |len(search string) - len(label)| must stay below this
MAX_LENGTH_DIFFERENCE = 4

_edit_distance = EditDistance(DistanceAlgorithm.LEVENSHTEIN)


def edit_distance(s1: str, s2: str, max_distance: int) -> int:
    """
    Levenshtein distance between two strings, bounded by max_distance.

    Returns:
        The distance, or -1 if it exceeds max_distance
    """
    return _edit_distance.compare(s1, s2, max_distance)


def allowed_distance(length: int) -> int:
    """Edit distance tolerated for a match key of the given length."""
    if length > 17:
        return 3
    if length > 12:
        return 2
    if length > 5:
        return 1
    return 0


def build_match_keys(keywords: Iterable[ThesaurusEntry]) -> list[tuple[ThesaurusEntry, str, int]]:
    """
    Derive the match key of every thesaurus entry for one extraction call.

    Returns:
        List of (entry, joined tokens, allowed distance) in thesaurus order
    """
    keys = []
    for kw in keywords:
        joined = "".join(kw.tokens)
        keys.append((kw, joined, allowed_distance(len(joined))))
    return keys


def is_candidate(word: str, kw: ThesaurusEntry, joined: str, dist_limit: int) -> bool:
    """
    Check a single search string against a thesaurus entry.

    The length filter compares against the raw label while the distance is
    measured on the joined tokens.
    """
    if not word or not joined or word[0] != joined[0]:
        return False
    if abs(len(word) - len(kw.label)) >= MAX_LENGTH_DIFFERENCE:
        return False
    return 0 <= edit_distance(joined, word, dist_limit) <= dist_limit


def is_contained(label: str, found: Iterable[MatchedKeyword]) -> bool:
    """True if the padded label occurs inside any padded label already found."""
    padded = f" {label} "
    return any(padded in f" {m.label} " for m in found)


def match_line(
    search_strings: Sequence[str],
    match_keys: Sequence[tuple[ThesaurusEntry, str, int]],
) -> dict[MatchedKeyword, None]:
    """
    Find thesaurus entries referenced by a line.

    Args:
        search_strings: Probe strings from generate_search_strings
        match_keys: Output of build_match_keys for the current call

    Returns:
        Insertion-ordered set of matched keywords
    """
    found: dict[MatchedKeyword, None] = {}

    for kw, joined, dist_limit in match_keys:
        for word in search_strings:
            if is_candidate(word, kw, joined, dist_limit):
                if not is_contained(kw.label, found):
                    found[kw.to_keyword()] = None
                break

    return found

"""Tokenize and clean place-name text for comparison."""

import re
from typing import List, Optional, Sequence

from itinerary_gaps.config import FUZZY_MAX_EDIT_DISTANCE, FUZZY_MIN_TOKEN_LENGTH
from itinerary_gaps.models import Location

# Stop words, grouped by why they carry no place identity
GENERIC_STOP_WORDS = frozenset({
    "the", "at", "in", "on", "of", "and", "a", "an", "to", "for",
})
VENUE_STOP_WORDS = frozenset({
    "resort", "hotel", "inn", "suites", "lodge", "airport", "international",
})
ADDRESS_STOP_WORDS = frozenset({
    "st", "ave", "blvd", "rd", "street", "avenue", "boulevard",
})
STOP_WORDS = GENERIC_STOP_WORDS | VENUE_STOP_WORDS | ADDRESS_STOP_WORDS

_PUNCTUATION = re.compile(r"[^\w\s]", re.UNICODE)


def _dedup(tokens: Sequence[str]) -> List[str]:
    seen = set()
    out = []
    for tok in tokens:
        if tok not in seen:
            seen.add(tok)
            out.append(tok)
    return out


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation, split on whitespace."""
    if not text:
        return []
    return _PUNCTUATION.sub(" ", text.lower()).split()


def normalize(text: str) -> List[str]:
    """Return the distinctive tokens of a place-name string, in first-seen order.

    If every token is a stop word ("Hotel", "The Inn") the unstripped tokens
    are returned instead, so two generic names don't both reduce to nothing
    and compare as identical.
    """
    tokens = tokenize(text)
    kept = [t for t in tokens if t not in STOP_WORDS]
    if not kept:
        return _dedup(tokens)
    return _dedup(kept)


def display_text(location: Optional[Location]) -> str:
    """Name + city + country, the text used for fuzzy name comparison."""
    if location is None:
        return ""
    parts = [location.name, location.city, location.country]
    return " ".join(p for p in parts if p)


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute), two-row DP."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def tokens_match(
    a: str,
    b: str,
    max_distance: int = FUZZY_MAX_EDIT_DISTANCE,
    min_length: int = FUZZY_MIN_TOKEN_LENGTH,
) -> bool:
    """Identical, or a minor spelling variant ("marriot" vs "marriott")."""
    a = a.lower()
    b = b.lower()
    if a == b:
        return True
    if len(a) < min_length or len(b) < min_length:
        return False
    if abs(len(a) - len(b)) > max_distance:
        return False
    return levenshtein(a, b) <= max_distance


def overlap_ratio(
    a: Sequence[str],
    b: Sequence[str],
    max_distance: int = FUZZY_MAX_EDIT_DISTANCE,
    min_length: int = FUZZY_MIN_TOKEN_LENGTH,
) -> float:
    """Intersection over union of two token sets, with fuzzy token pairing.

    Each token of ``b`` can pair with at most one token of ``a``; exact
    matches are paired before fuzzy ones.
    """
    set_a = _dedup(a)
    set_b = _dedup(b)
    if not set_a and not set_b:
        return 0.0

    unmatched_b = list(set_b)
    fuzzy_pending = []
    matched = 0

    for tok in set_a:
        if tok in unmatched_b:
            unmatched_b.remove(tok)
            matched += 1
        else:
            fuzzy_pending.append(tok)

    for tok in fuzzy_pending:
        for candidate in unmatched_b:
            if tokens_match(tok, candidate, max_distance, min_length):
                unmatched_b.remove(candidate)
                matched += 1
                break

    union = len(set_a) + len(set_b) - matched
    return matched / union

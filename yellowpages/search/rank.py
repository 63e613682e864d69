# Scoring and ordering helpers for directory search.
# Stateless: field score -> record score -> sorted, clipped candidates.

from __future__ import annotations
from typing import List, Optional, Iterable

from .distance import levenshtein
from .normalize import normalize
from .types import Contact, ScoredCandidate

# Tier scores, checked in this order; the first hit wins
EXACT = 10
PREFIX = 8
SUBSTRING = 5
FUZZY_1 = 4
FUZZY_2 = 2

# Fuzzy tiers only apply to queries at least this long
FUZZY_1_MIN_QUERY = 3
FUZZY_2_MIN_QUERY = 5

# Every record matches an empty query with this base score
EMPTY_QUERY_SCORE = 1


def score_field(value: Optional[str], normalized_query: str) -> int:
    """Score one field value against an already-normalized query."""
    if not value or not normalized_query:
        return 0
    target = normalize(value)
    if not target:
        return 0

    if target == normalized_query:
        return EXACT
    if target.startswith(normalized_query):
        return PREFIX
    if normalized_query in target:
        return SUBSTRING

    distance = levenshtein(target, normalized_query)
    if len(normalized_query) >= FUZZY_1_MIN_QUERY and distance == 1:
        return FUZZY_1
    if len(normalized_query) >= FUZZY_2_MIN_QUERY and distance == 2:
        return FUZZY_2

    return 0


def searchable_fields(record: Contact) -> List[Optional[str]]:
    return [
        record.first_name,
        record.last_name,
        record.full_name,
        record.email,
        record.department,
        record.location,
        record.job_title,
        record.office,
        *(record.nicknames or []),
    ]


def score_record(record: Contact, normalized_query: str) -> int:
    """Best single-field score; a record matches through its strongest field."""
    if not normalized_query:
        return EMPTY_QUERY_SCORE
    return max((score_field(v, normalized_query) for v in searchable_fields(record)), default=0)


def last_name_key(record: Contact):
    # Collation: diacritic/case-insensitive ordinal, then raw code points
    return (normalize(record.last_name), record.last_name)


def sort_and_clip(candidates: Iterable[ScoredCandidate], limit: Optional[int] = None) -> List[ScoredCandidate]:
    """Score descending, last name ascending; stable for anything still tied."""
    ranked = sorted(candidates, key=lambda c: (-c.score, last_name_key(c.record)))
    if is_positive_limit(limit):
        return ranked[:limit]
    return ranked


def is_positive_limit(limit) -> bool:
    return isinstance(limit, int) and not isinstance(limit, bool) and limit > 0

from __future__ import annotations

from typing import FrozenSet

from reddit_oracle.config import SCORING_CONFIG

# Callers compare similarity() against this to decide on fuzzy credit.
PARTIAL_MATCH_THRESHOLD = SCORING_CONFIG.partial_match_threshold
CONTAINMENT_SCORE = SCORING_CONFIG.containment_score


def normalize(text: str) -> str:
    """Lowercase and trim; None is treated as the empty string."""
    if text is None:
        return ""
    return text.strip().lower()


def bigrams(text: str) -> FrozenSet[str]:
    """Set of overlapping 2-character windows of `text` (empty if len < 2)."""
    return frozenset(text[i : i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """
    Match strength between two free-text strings, in [0, 1].

    Steps:
        1. Normalize (lowercase, trim).
        2. Either empty -> 0.0; identical -> 1.0.
        3. Either shorter than 2 characters -> 0.0.
        4. One contains the other -> CONTAINMENT_SCORE (0.7), regardless of
           how much longer the other string is.
        5. Otherwise the Dice coefficient over character bigram sets:
           2 * |A & B| / (|A| + |B|).

    No threshold is applied here; see PARTIAL_MATCH_THRESHOLD.
    """
    s1 = normalize(a)
    s2 = normalize(b)

    if not s1 or not s2:
        return 0.0
    if s1 == s2:
        return 1.0
    if len(s1) < 2 or len(s2) < 2:
        return 0.0
    if s1 in s2 or s2 in s1:
        return CONTAINMENT_SCORE

    set1 = bigrams(s1)
    set2 = bigrams(s2)
    denom = len(set1) + len(set2)
    if denom == 0:
        return 0.0
    return 2.0 * len(set1 & set2) / denom

"""
Label Matcher

Fuzzy comparison of column headers against expected labels. Headers and
labels are compared case-insensitively with the Levenshtein edit distance
(insert, delete, substitute at unit cost).
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein


def normalize_header(header: str) -> str:
    """Lowercase and strip a header for comparison."""
    return header.strip().lower()


def levenshtein_distance(s1: str, s2: str, score_cutoff: Optional[int] = None) -> int:
    """
    Case-insensitive Levenshtein edit distance.

    With a score_cutoff, any distance above the cutoff is reported as
    score_cutoff + 1.
    """
    return Levenshtein.distance(
        normalize_header(s1), normalize_header(s2), score_cutoff=score_cutoff
    )


def label_distance_within(header: str, label: str, tolerance: int) -> bool:
    """True when header is at most `tolerance` edits away from label."""
    if not isinstance(header, str):
        return False
    return levenshtein_distance(header, label, score_cutoff=tolerance) <= tolerance

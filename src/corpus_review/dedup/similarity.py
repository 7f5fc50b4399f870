"""Similarity primitives used by the duplicate detector.

- string_similarity: normalized Levenshtein, for short strings (filenames)
- content_similarity: Jaccard over stop-word filtered token sets, for long texts

Both are pure and symmetric. Case folding for filenames is the caller's job;
content tokens are always lower-cased.
"""

from __future__ import annotations
from typing import AbstractSet
from ..utils.text import content_tokens


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    # two-row DP over the shorter string
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur[j] = min(
                prev[j] + 1,         # deletion
                cur[j - 1] + 1,      # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev = cur
    return prev[-1]


def string_similarity(a: str, b: str) -> float:
    """1 - edit_distance / max(len). Two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - edit_distance(a, b) / longest


def jaccard(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def content_similarity(text_a: str, text_b: str) -> float:
    """Jaccard similarity of the content token sets of two texts.

    Callers should skip texts below the minimum content length; on short
    strings incidental overlap dominates the score.
    """
    return jaccard(content_tokens(text_a), content_tokens(text_b))

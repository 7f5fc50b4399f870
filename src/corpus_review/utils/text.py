"""Text normalization shared by the similarity functions."""

from __future__ import annotations
import re
from typing import FrozenSet, Set

_NON_ALNUM_RE = re.compile(r"[^\w\s]|_")

# Articles, conjunctions and auxiliary verbs.
STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the",
    "and", "or", "but", "nor", "so", "yet", "for",
    "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    "will", "would", "can", "could", "should", "shall", "may", "might", "must",
    "this", "that", "with",
})

# tokens shorter than this are dropped before the stop-word lookup
MIN_TOKEN_LENGTH = 3


def normalize_name(name: str, case_sensitive: bool = False) -> str:
    """Trim a filename and fold case unless case_sensitive."""
    name = name.strip()
    return name if case_sensitive else name.lower()


def content_tokens(text: str) -> Set[str]:
    """Distinct lower-cased tokens of `text` with punctuation, short tokens
    and stop words removed."""
    cleaned = _NON_ALNUM_RE.sub(" ", text).lower()
    return {
        tok for tok in cleaned.split()
        if len(tok) >= MIN_TOKEN_LENGTH and tok not in STOP_WORDS
    }

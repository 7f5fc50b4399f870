"""Duplicate detection over filenames and content."""

from .schema import DuplicateCheckOptions, DuplicateResult, MatchType
from .similarity import content_similarity, edit_distance, string_similarity
from .detector import (
    DuplicateDetector,
    best_content_match,
    check_duplicate,
    find_name_match,
)

__all__ = [
    "DuplicateCheckOptions",
    "DuplicateResult",
    "MatchType",
    "DuplicateDetector",
    "check_duplicate",
    "find_name_match",
    "best_content_match",
    "content_similarity",
    "edit_distance",
    "string_similarity",
]

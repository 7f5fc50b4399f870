"""Keyword-pattern document typing, auto-labeling and content extraction."""

from .classifier import (
    DocumentAnalysis,
    PatternClassifier,
    analyze_document,
    format_label,
    veterinary_labels,
)
from .extraction import auto_assign_labels, extract_content
from .patterns import DEFAULT_PATTERNS, load_patterns

__all__ = [
    "DocumentAnalysis",
    "PatternClassifier",
    "analyze_document",
    "format_label",
    "veterinary_labels",
    "auto_assign_labels",
    "extract_content",
    "DEFAULT_PATTERNS",
    "load_patterns",
]

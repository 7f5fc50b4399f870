"""Quality scoring profiles and corpus readiness metrics."""

from .scoring import (
    SCORING_PROFILES,
    classification_score,
    corpus_score,
    get_scoring_profile,
    quality_bucket,
)
from .metrics import IssueKind, QualityIssue, QualityMetrics, compute_corpus_metrics

__all__ = [
    "SCORING_PROFILES",
    "classification_score",
    "corpus_score",
    "get_scoring_profile",
    "quality_bucket",
    "IssueKind",
    "QualityIssue",
    "QualityMetrics",
    "compute_corpus_metrics",
]

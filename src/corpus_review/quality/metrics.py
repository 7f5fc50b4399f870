"""Corpus-level quality metrics and review issues.

Recomputed from a corpus snapshot on demand; nothing is maintained
incrementally, so the same snapshot (and `now`) always gives the same
result.

Scoping:
- label coverage, label distribution and readiness use the whole corpus;
  `approved_*` fields repeat them for approved documents only
- `content_quality_scores` buckets approved documents only (the review
  dashboard's view); `all_content_quality_scores` covers every document and
  drives the "Low Quality Content" issue

`duplicate_risk` is `len(names) - len(distinct lower-cased names)`. It only
sees filename collisions; content duplicates are caught at ingestion by the
duplicate detector and never show up here.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging
from ..pipeline.context import Document
from ..utils.numeric import percent, round_half_up
from .scoring import corpus_score, quality_bucket

log = logging.getLogger("corpus_review.quality.metrics")

RECENT_DAYS = 7
SHORT_CONTENT_CHARS = 500
APPROVAL_RATIO = 0.5


class IssueKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_SEVERITY = {IssueKind.ERROR: 0, IssueKind.WARNING: 1, IssueKind.INFO: 2}


@dataclass
class QualityIssue:
    kind: IssueKind
    title: str
    description: str
    count: Optional[int] = None
    action: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.kind.value, "title": self.title, "description": self.description}
        if self.count is not None:
            out["count"] = self.count
        if self.action is not None:
            out["action"] = self.action
        return out


def _empty_buckets() -> Dict[str, int]:
    return {"excellent": 0, "good": 0, "fair": 0, "poor": 0}


@dataclass
class QualityMetrics:
    total_documents: int
    average_content_length: int
    documents_with_labels: int
    documents_without_labels: int
    label_distribution: Dict[str, int]
    content_quality_scores: Dict[str, int]
    type_distribution: Dict[str, int]
    source_distribution: Dict[str, int]
    recent_uploads: int
    duplicate_risk: int
    readiness_score: int
    approved_documents: int
    approved_documents_with_labels: int
    approved_documents_without_labels: int
    approved_label_distribution: Dict[str, int]
    all_content_quality_scores: Dict[str, int] = field(default_factory=_empty_buckets)
    average_quality_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _count_labels(docs: Sequence[Document]) -> Dict[str, int]:
    dist: Dict[str, int] = {}
    for doc in docs:
        for label in doc.labels:
            dist[label] = dist.get(label, 0) + 1
    return dist


def _bucket_counts(scores: Sequence[int]) -> Dict[str, int]:
    buckets = _empty_buckets()
    for s in scores:
        buckets[quality_bucket(s)] += 1
    return buckets


def _as_utc(ts: datetime) -> datetime:
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def score_document(doc: Document) -> int:
    return corpus_score(doc.original_content, doc.labels, extracted=doc.extracted_data)


def compute_corpus_metrics(
    corpus: Sequence[Document],
    *,
    now: Optional[datetime] = None,
    recent_days: int = RECENT_DAYS,
) -> Tuple[Optional[QualityMetrics], List[QualityIssue]]:
    """Metrics and ranked issues for a corpus snapshot; (None, []) when empty."""
    docs = list(corpus)
    if not docs:
        return None, []

    now = _as_utc(now or datetime.now(timezone.utc))
    total = len(docs)
    scores = [score_document(d) for d in docs]
    approved = [d for d in docs if d.is_approved]
    approved_scores = [s for d, s in zip(docs, scores) if d.is_approved]

    average_length = round_half_up(sum(len(d.original_content) for d in docs) / total)
    with_labels = sum(1 for d in docs if d.labels)
    approved_with_labels = sum(1 for d in approved if d.labels)

    type_dist: Dict[str, int] = {}
    source_dist: Dict[str, int] = {}
    for d in docs:
        t = d.type.replace("-", " ", 1)
        type_dist[t] = type_dist.get(t, 0) + 1
        source_dist[d.source] = source_dist.get(d.source, 0) + 1

    cutoff = now - timedelta(days=recent_days)
    recent = sum(1 for d in docs if _as_utc(d.created_at) > cutoff)

    names = [d.name.lower() for d in docs]
    duplicate_risk = len(names) - len(set(names))

    average_quality = sum(scores) / total
    readiness = round_half_up(
        average_quality * 0.4
        + percent(with_labels, total) * 0.3
        + percent(len(approved), total) * 0.3
    )

    metrics = QualityMetrics(
        total_documents=total,
        average_content_length=average_length,
        documents_with_labels=with_labels,
        documents_without_labels=total - with_labels,
        label_distribution=_count_labels(docs),
        content_quality_scores=_bucket_counts(approved_scores),
        type_distribution=type_dist,
        source_distribution=source_dist,
        recent_uploads=recent,
        duplicate_risk=duplicate_risk,
        readiness_score=readiness,
        approved_documents=len(approved),
        approved_documents_with_labels=approved_with_labels,
        approved_documents_without_labels=len(approved) - approved_with_labels,
        approved_label_distribution=_count_labels(approved),
        all_content_quality_scores=_bucket_counts(scores),
        average_quality_score=average_quality,
    )
    issues = derive_issues(metrics)
    log.debug("metrics total=%d readiness=%d issues=%d", total, readiness, len(issues))
    return metrics, issues


def derive_issues(m: QualityMetrics) -> List[QualityIssue]:
    """Rule-based findings ranked by severity (error, warning, info)."""
    issues: List[QualityIssue] = []

    if m.documents_without_labels > 0:
        issues.append(QualityIssue(
            IssueKind.WARNING,
            "Unlabeled Documents",
            f"{m.documents_without_labels} documents don't have any labels assigned",
            count=m.documents_without_labels,
            action="Assign veterinary labels to improve categorization",
        ))

    poor = m.all_content_quality_scores["poor"]
    if poor > 0:
        issues.append(QualityIssue(
            IssueKind.ERROR,
            "Low Quality Content",
            f"{poor} documents have poor content quality scores",
            count=poor,
            action="Review and improve content or remove low-quality documents",
        ))

    if m.duplicate_risk > 0:
        issues.append(QualityIssue(
            IssueKind.WARNING,
            "Potential Duplicates",
            f"{m.duplicate_risk} documents may be duplicates based on similar names",
            count=m.duplicate_risk,
            action="Review and remove duplicate content",
        ))

    if m.average_content_length < SHORT_CONTENT_CHARS:
        issues.append(QualityIssue(
            IssueKind.WARNING,
            "Short Content Length",
            f"Average content length is {m.average_content_length} characters",
            action="Consider adding more detailed veterinary documents",
        ))

    if m.approved_documents < m.total_documents * APPROVAL_RATIO:
        issues.append(QualityIssue(
            IssueKind.INFO,
            "Approval Needed",
            f"Only {m.approved_documents} out of {m.total_documents} documents are approved",
            action="Review and approve more documents for training",
        ))

    # sort is stable: rule order is kept within a severity
    return sorted(issues, key=lambda i: _SEVERITY[i.kind])

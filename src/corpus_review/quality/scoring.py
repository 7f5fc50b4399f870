"""Per-document quality scoring profiles.

Two profiles are in use and they are deliberately kept apart:

- `classification`: computed by the pattern classifier at ingestion time
  (length, label count, quality-indicator confidence, structural markers)
- `corpus`: computed for corpus metrics (length, extracted data, label
  count, veterinary relevance)

Their breakpoints differ, so the same document scores differently under
each. Both share the signature `(content, labels, confidence, *, extracted)`
and return an int in [0, 100].
"""

from __future__ import annotations
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple
from ..pipeline.context import ExtractedData
from ..utils.numeric import round_half_up

ScoringProfile = Callable[..., int]

QUALITY_INDICATOR_LABELS: Tuple[str, ...] = (
    "high-quality",
    "peer-reviewed-journal",
    "clinical-guideline",
    "research-paper",
)

STRUCTURE_MARKERS: Tuple[str, ...] = (
    "abstract",
    "introduction",
    "methodology",
    "results",
    "discussion",
    "conclusion",
    "references",
    "bibliography",
    "table",
    "figure",
    "chart",
)

VETERINARY_RELEVANCE_TERMS: Tuple[str, ...] = (
    "veterinary",
    "animal",
    "clinical",
    "diagnosis",
    "treatment",
    "therapy",
    "pathology",
)

# (exclusive lower bound on len(content), points); first hit wins
CLASSIFICATION_LENGTH_TIERS: Tuple[Tuple[int, int], ...] = (
    (5000, 25), (2000, 20), (1000, 15), (500, 10),
)
CORPUS_LENGTH_TIERS: Tuple[Tuple[int, int], ...] = (
    (2000, 30), (1000, 20), (500, 15), (200, 10),
)
MIN_LENGTH_POINTS = 5


def _length_points(n: int, tiers: Tuple[Tuple[int, int], ...]) -> int:
    for bound, points in tiers:
        if n > bound:
            return points
    return MIN_LENGTH_POINTS


def classification_score(
    content: str,
    labels: Sequence[str],
    confidence: Optional[Mapping[str, int]] = None,
    *,
    extracted: Optional[ExtractedData] = None,
) -> int:
    """Score used by the pattern classifier. `extracted` is ignored."""
    confidence = confidence or {}
    score = float(_length_points(len(content), CLASSIFICATION_LENGTH_TIERS))

    score += min(len(labels) * 5, 25)

    bonus = sum(confidence.get(label, 0) / 4 for label in QUALITY_INDICATOR_LABELS)
    score += min(bonus, 25)

    lower = content.lower()
    structure = sum(3 for marker in STRUCTURE_MARKERS if marker in lower)
    score += min(structure, 25)

    return min(round_half_up(score), 100)


def _label_points(n: int) -> int:
    if n >= 3:
        return 20
    if n == 2:
        return 15
    if n == 1:
        return 10
    return 0


def corpus_score(
    content: str,
    labels: Sequence[str],
    confidence: Optional[Mapping[str, int]] = None,
    *,
    extracted: Optional[ExtractedData] = None,
) -> int:
    """Score used for corpus metrics. `confidence` is ignored."""
    score = _length_points(len(content), CORPUS_LENGTH_TIERS)

    if extracted is not None:
        if len(extracted.title) > 10:
            score += 10
        if len(extracted.summary) > 50:
            score += 10
        if len(extracted.key_points) >= 3:
            score += 10

    score += _label_points(len(labels))

    lower = content.lower()
    relevant = sum(1 for term in VETERINARY_RELEVANCE_TERMS if term in lower)
    score += min(relevant * 3, 20)

    return min(score, 100)


SCORING_PROFILES: Dict[str, ScoringProfile] = {
    "classification": classification_score,
    "corpus": corpus_score,
}


def get_scoring_profile(name: str) -> ScoringProfile:
    if name not in SCORING_PROFILES:
        raise ValueError(f"Unknown scoring profile: {name}. Known: {', '.join(SCORING_PROFILES)}")
    return SCORING_PROFILES[name]


def quality_bucket(score: int) -> str:
    """excellent >= 80, good >= 60, fair >= 40, else poor."""
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"

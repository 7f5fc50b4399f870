"""Keyword pattern classifier.

For each label in the pattern table:
    confidence = keywords found in (content or filename) / keywords for label

- above 10%: reported in `confidence` as a rounded percent
- above 20%: appended to `detected_labels`

`detected_labels` keeps table order and is cut to the first 8 entries; it
is not sorted by confidence. The primary `document_type` is the reported
label with the highest confidence outside the quality-indicator labels,
earlier labels winning ties.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging
from ..quality.scoring import classification_score
from ..utils.numeric import round_half_up
from .patterns import (
    DEFAULT_DOCUMENT_TYPE,
    DEFAULT_PATTERNS,
    RESERVED_TYPE_LABELS,
    VETERINARY_LABELS,
    PatternTable,
    build_patterns,
)

log = logging.getLogger("corpus_review.labeling")

REPORT_THRESHOLD = 0.1
LABEL_THRESHOLD = 0.2
MAX_LABELS = 8


@dataclass
class DocumentAnalysis:
    detected_labels: List[str] = field(default_factory=list)
    confidence: Dict[str, int] = field(default_factory=dict)
    document_type: str = DEFAULT_DOCUMENT_TYPE
    quality_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detectedLabels": list(self.detected_labels),
            "confidence": dict(self.confidence),
            "documentType": self.document_type,
            "qualityScore": self.quality_score,
        }


class PatternClassifier:
    def __init__(self, patterns: Optional[PatternTable] = None, max_labels: int = MAX_LABELS):
        self.patterns = build_patterns(patterns) if patterns is not None else DEFAULT_PATTERNS
        self.max_labels = int(max_labels)

    def classify(self, filename: str, content: str) -> DocumentAnalysis:
        lower_content = content.lower()
        lower_name = filename.lower()

        labels: List[str] = []
        confidence: Dict[str, int] = {}
        for label, keywords in self.patterns.items():
            matches = sum(1 for kw in keywords if kw in lower_content or kw in lower_name)
            ratio = matches / len(keywords)
            if ratio > REPORT_THRESHOLD:
                confidence[label] = round_half_up(ratio * 100)
                if ratio > LABEL_THRESHOLD:
                    labels.append(label)

        document_type = DEFAULT_DOCUMENT_TYPE
        highest = 0
        for label, conf in confidence.items():
            if conf > highest and label not in RESERVED_TYPE_LABELS:
                highest = conf
                document_type = label

        # scored on the full label list, before truncation
        score = classification_score(content, labels, confidence)
        log.debug("classified %s type=%s labels=%d score=%d", filename, document_type, len(labels), score)

        return DocumentAnalysis(
            detected_labels=labels[: self.max_labels],
            confidence=confidence,
            document_type=document_type,
            quality_score=score,
        )


def analyze_document(filename: str, content: str) -> DocumentAnalysis:
    return PatternClassifier().classify(filename, content)


def format_label(label: str) -> str:
    """'peer-reviewed-journal' -> 'Peer Reviewed Journal'."""
    return " ".join(w[:1].upper() + w[1:] for w in label.split("-"))


def veterinary_labels() -> List[str]:
    return list(VETERINARY_LABELS)

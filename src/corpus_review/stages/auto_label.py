"""Auto-label stage: classify an accepted document and annotate it.

Sets `type`, merges detected labels into `labels`, fills `extracted_data`
and stores the classification-profile quality score. Never rejects.
"""

from __future__ import annotations
from typing import Optional
from ..labeling.classifier import DocumentAnalysis, PatternClassifier
from ..labeling.extraction import auto_assign_labels, extract_content
from ..pipeline.context import Document, Decision
from .base import Stage

class AutoLabel(Stage):
    name = "auto_label"
    layer = "enrichment"

    def __init__(self, classifier: Optional[PatternClassifier] = None, specialty_labels: bool = True):
        self.classifier = classifier or PatternClassifier()
        self.specialty_labels = bool(specialty_labels)
        self.last_analysis: Optional[DocumentAnalysis] = None

    def apply(self, doc: Document) -> Decision:
        analysis = self.classifier.classify(doc.name, doc.original_content)
        self.last_analysis = analysis

        doc.type = analysis.document_type
        doc.quality_score = analysis.quality_score
        doc.extracted_data = extract_content(doc.name, doc.original_content)

        labels = list(doc.labels)
        extra = list(analysis.detected_labels)
        if self.specialty_labels:
            extra += auto_assign_labels(doc.original_content, doc.name, doc.extracted_data.title)
        for label in extra:
            if label not in labels:
                labels.append(label)
        doc.labels = labels
        return Decision(True, self.name)

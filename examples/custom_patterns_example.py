"""Example: classify with a custom keyword table and review a small batch.

Shows how a host wires the pieces together without the CLI:
- build a pattern table in code (or load one with load_patterns)
- run incoming documents through the review stages against an in-memory store
- recompute corpus metrics afterwards
"""

from corpus_review.dedup.schema import DuplicateCheckOptions
from corpus_review.labeling.classifier import PatternClassifier
from corpus_review.labeling.patterns import build_patterns
from corpus_review.pipeline.context import Document, DocumentStatus
from corpus_review.pipeline.review import review_documents
from corpus_review.quality.metrics import compute_corpus_metrics
from corpus_review.stages.auto_label import AutoLabel
from corpus_review.stages.duplicate_gate import DuplicateGate
from corpus_review.storage.base import MemoryDocumentStore

patterns = build_patterns({
    "dental-procedure": ["dental", "tooth", "extraction", "periodontal", "scaling"],
    "surgical-procedure": ["surgery", "surgical", "anesthesia", "incision", "suture"],
})

store = MemoryDocumentStore([
    Document("canine_dental.txt", "Periodontal scaling and tooth extraction under anesthesia in dogs. " * 5,
             labels=["dental"], status=DocumentStatus.APPROVED),
])

stages = [
    DuplicateGate(store.list_documents(), DuplicateCheckOptions(content_threshold=0.7)),
    AutoLabel(PatternClassifier(patterns)),
]
incoming = [
    Document("Canine_Dental.txt", "anything"),
    Document("feline_surgery.txt", "Surgical incision and suture technique for feline ovariohysterectomy. " * 4),
]

for d in review_documents(incoming, store, stages=stages):
    print(d.document.name, "->", "accept" if d.accepted else f"reject ({d.reason_detail})")

metrics, issues = compute_corpus_metrics(store.list_documents())
print("readiness:", metrics.readiness_score)
for issue in issues:
    print(f"[{issue.kind.value}] {issue.title}: {issue.description}")

"""JSONL-backed document store.

Corpus file: one JSON document per line with at least `name` and
`original_content` (alias: `content`, `text`). Optional: `id`, `labels`,
`status`, `type`, `source`, `extracted_data`, `created_at`, `updated_at`.

Decisions are appended to a separate JSONL file for auditability; accepted
documents are appended to the corpus file.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import json
import logging
import os
from ..pipeline.context import Document, DocumentStatus, ExtractedData
from ..pipeline.review import ReviewDecision
from .base import DocumentStore
from .writer import append_jsonl

log = logging.getLogger("corpus_review.storage.jsonl")


def _parse_ts(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, (int, float)):
        # epoch milliseconds
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    ts = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def document_from_dict(ex: Dict[str, Any], fallback_id: str = "") -> Document:
    if not isinstance(ex, dict):
        raise ValueError(f"expected a JSON object, got {type(ex).__name__}")
    content = ex.get("original_content")
    if content is None:
        content = ex.get("content", ex.get("text"))
    name = ex.get("name")
    labels = ex.get("labels") or []
    if not isinstance(labels, list):
        raise ValueError(f"labels must be a list, got {type(labels).__name__}")
    extracted = ex.get("extracted_data")
    if extracted is not None and not isinstance(extracted, dict):
        raise ValueError("extracted_data must be an object")
    doc = Document(
        name="" if name is None else str(name),
        original_content="" if content is None else str(content),
        labels=[str(x) for x in labels],
        status=DocumentStatus(ex.get("status") or DocumentStatus.PENDING.value),
        type=str(ex.get("type") or "other"),
        source=str(ex.get("source") or "upload"),
        quality_score=ex.get("quality_score"),
        extracted_data=ExtractedData.from_dict(extracted),
    )
    doc_id = ex.get("id") or fallback_id
    if doc_id:
        doc.doc_id = str(doc_id)
    created = _parse_ts(ex.get("created_at"))
    if created is not None:
        doc.created_at = created
    updated = _parse_ts(ex.get("updated_at"))
    doc.updated_at = updated or doc.created_at
    return doc


def read_documents(path: str) -> List[Document]:
    """Load every valid document from a JSONL file; bad lines are skipped."""
    if not os.path.exists(path):
        log.warning(f"Corpus file not found: {path}, using empty corpus")
        return []
    docs: List[Document] = []
    stem = os.path.splitext(os.path.basename(path))[0]
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                docs.append(document_from_dict(json.loads(line), fallback_id=f"{stem}_{line_num}"))
            except (json.JSONDecodeError, ValueError) as e:
                log.warning(f"Invalid document in {path}:{line_num}: {e}")
    return docs


class JSONLDocumentStore(DocumentStore):
    def __init__(self, corpus_path: str, decisions_path: Optional[str] = None):
        self.corpus_path = corpus_path
        self.decisions_path = decisions_path

    def list_documents(self) -> List[Document]:
        return read_documents(self.corpus_path)

    def save_decision(self, decision: ReviewDecision) -> None:
        if self.decisions_path:
            append_jsonl(self.decisions_path, [decision.to_dict()])
        if decision.accepted:
            append_jsonl(self.corpus_path, [decision.document.to_dict()])

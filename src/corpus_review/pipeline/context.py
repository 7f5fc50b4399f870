"""Core review data model.

Document is the record owned by the document store. The review core only
reads it; labels and status transitions come from human review.

Design goal:
- Keep Document stable so the store, the CLI and the metrics all agree on one shape.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
import uuid


class DocumentStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class ExtractedData:
    title: str = ""
    summary: str = ""
    key_points: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "key_points": list(self.key_points),
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> ExtractedData:
        d = d or {}
        return cls(
            title=d.get("title") or "",
            summary=d.get("summary") or "",
            key_points=list(d.get("key_points") or d.get("keyPoints") or []),
            metadata=dict(d.get("metadata") or {}),
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Document:
    # identity
    name: str
    original_content: str
    doc_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # review
    labels: List[str] = field(default_factory=list)
    status: DocumentStatus = DocumentStatus.PENDING
    type: str = "other"
    source: str = "upload"  # upload | url
    quality_score: Optional[int] = None

    # enrichment
    extracted_data: ExtractedData = field(default_factory=ExtractedData)

    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def is_approved(self) -> bool:
        return self.status == DocumentStatus.APPROVED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.doc_id,
            "name": self.name,
            "original_content": self.original_content,
            "labels": list(self.labels),
            "status": self.status.value,
            "type": self.type,
            "source": self.source,
            "quality_score": self.quality_score,
            "extracted_data": self.extracted_data.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class Decision:
    accepted: bool
    stage: str
    reason_code: str = ""
    reason_detail: str = ""

"""Document store interface.

The review core only needs two things from storage:
- a snapshot of the documents already in the corpus
- somewhere to persist each review decision

Anything richer (querying, status updates from human review) belongs to the
host application.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List
from ..pipeline.context import Document
from ..pipeline.review import ReviewDecision


class DocumentStore(ABC):
    @abstractmethod
    def list_documents(self) -> List[Document]:
        """Snapshot of stored documents, in stable order."""
        raise NotImplementedError()

    @abstractmethod
    def save_decision(self, decision: ReviewDecision) -> None:
        """Persist a decision; accepted documents join the corpus."""
        raise NotImplementedError()


class MemoryDocumentStore(DocumentStore):
    """In-process store, used by tests and embedding hosts."""

    def __init__(self, documents: List[Document] = None):
        self.documents: List[Document] = list(documents or [])
        self.decisions: List[ReviewDecision] = []

    def list_documents(self) -> List[Document]:
        return list(self.documents)

    def save_decision(self, decision: ReviewDecision) -> None:
        self.decisions.append(decision)
        if decision.accepted:
            self.documents.append(decision.document)

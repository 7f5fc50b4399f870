"""Stage plugin interface.

Stages must:
- accept a Document
- return a Decision (accept/reject + reason)
- optionally annotate the Document (labels, type, quality score)

Stages never touch the store; the review runner owns persistence.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from ..pipeline.context import Document, Decision

class Stage(ABC):
    name: str = "stage"
    layer: str = "review"

    @abstractmethod
    def apply(self, doc: Document) -> Decision:
        ...

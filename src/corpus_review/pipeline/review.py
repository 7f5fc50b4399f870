"""Review runner.

Pushes incoming documents through the review stages against a snapshot of
the store:

- the snapshot is taken once, before the first document
- stages run in order; the first rejecting stage ends the document
- accepted documents join the duplicate gate's working corpus, so a batch
  is also deduplicated against itself
- every decision is handed to the store

This module is the 'entrypoint' for ingestion hosts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Sequence
import logging
import time
from tqdm import tqdm
from ..dedup.schema import DuplicateResult
from ..labeling.classifier import DocumentAnalysis
from ..stages.auto_label import AutoLabel
from ..stages.base import Stage
from ..stages.duplicate_gate import DuplicateGate
from .context import Document

if TYPE_CHECKING:
    from ..storage.base import DocumentStore

log = logging.getLogger("corpus_review.review")


@dataclass
class ReviewDecision:
    document: Document
    accepted: bool
    stage: str
    reason_code: str = ""
    reason_detail: str = ""
    duplicate: Optional[DuplicateResult] = None
    analysis: Optional[DocumentAnalysis] = None
    ts_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_id": self.document.doc_id,
            "name": self.document.name,
            "decision": "accept" if self.accepted else "reject",
            "stage": self.stage,
            "reason_code": self.reason_code,
            "reason_detail": self.reason_detail,
            "duplicate": self.duplicate.to_dict() if self.duplicate else None,
            "analysis": self.analysis.to_dict() if self.analysis else None,
            "ts_ms": self.ts_ms,
        }


def run_stages(doc: Document, stages: Sequence[Stage]) -> ReviewDecision:
    """Run one document through the stages without touching any store."""
    decision = ReviewDecision(doc, True, "")
    for st in stages:
        d = st.apply(doc)
        decision.stage = st.name
        if isinstance(st, DuplicateGate):
            decision.duplicate = st.last_result
        elif isinstance(st, AutoLabel):
            decision.analysis = st.last_analysis
        if not d.accepted:
            decision.accepted = False
            decision.reason_code = d.reason_code
            decision.reason_detail = d.reason_detail
            break
    decision.ts_ms = int(time.time() * 1000)
    if decision.accepted:
        for st in stages:
            if isinstance(st, DuplicateGate):
                st.remember(doc)
    return decision


def review_documents(
    incoming: Iterable[Document],
    store: DocumentStore,
    cfg: Optional[Dict[str, Any]] = None,
    *,
    stages: Optional[Sequence[Stage]] = None,
    show_progress: bool = False,
) -> List[ReviewDecision]:
    """Review every incoming document against the store and persist decisions."""
    cfg = cfg or {}
    if stages is None:
        from ..stages.registry import make_stages
        corpus = store.list_documents()
        log.info(f"Review snapshot: {len(corpus)} documents in corpus")
        stages = make_stages(cfg.get("stages"), cfg, corpus)

    decisions: List[ReviewDecision] = []
    rejected: Dict[str, int] = {}
    for doc in tqdm(incoming, desc="review", unit="doc", disable=not show_progress):
        decision = run_stages(doc, stages)
        if not decision.accepted:
            rc = decision.reason_code or "REJECT"
            rejected[rc] = rejected.get(rc, 0) + 1
            log.debug(f"Rejected {doc.name}: stage={decision.stage} reason={rc} detail={decision.reason_detail}")
        store.save_decision(decision)
        decisions.append(decision)

    accepted = sum(1 for d in decisions if d.accepted)
    log.info(f"Reviewed {len(decisions)} documents: accepted={accepted} rejected={len(decisions) - accepted} breakdown={rejected}")
    return decisions

"""Duplicate gate: reject incoming documents that match the accepted corpus.

The gate holds its own list built from the corpus snapshot. `remember()`
adds an accepted document so later documents in the same batch are checked
against it too.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
from ..dedup.detector import DuplicateDetector
from ..dedup.prefilter import CandidatePrefilter
from ..dedup.schema import DuplicateCheckOptions, DuplicateResult, MatchType
from ..pipeline.context import Document, Decision
from .base import Stage

_REASON_CODES = {
    MatchType.EXACT_NAME: "DUP_NAME_EXACT",
    MatchType.SIMILAR_NAME: "DUP_NAME_SIMILAR",
    MatchType.CONTENT: "DUP_CONTENT",
}

class DuplicateGate(Stage):
    name = "duplicate_gate"
    layer = "dedup"

    def __init__(
        self,
        corpus: Iterable[Document],
        options: Optional[DuplicateCheckOptions] = None,
        prefilter: Optional[dict] = None,
    ):
        self.corpus: List[Document] = list(corpus)
        self.detector = DuplicateDetector(options)
        self.last_result: Optional[DuplicateResult] = None
        self.prefilter: Optional[CandidatePrefilter] = None
        prefilter = prefilter or {}
        if prefilter.get("enabled", False):
            self.prefilter = CandidatePrefilter(
                self.corpus,
                self.detector.options,
                threshold=float(prefilter.get("threshold", 0.5)),
                num_perm=int(prefilter.get("num_perm", 128)),
            )

    def _candidates(self, doc: Document) -> List[Document]:
        if self.prefilter is None:
            return self.corpus
        # documents remembered after the index was built are always scanned
        indexed = len(self.prefilter.corpus)
        return self.prefilter.candidates(doc.name, doc.original_content) + self.corpus[indexed:]

    def apply(self, doc: Document) -> Decision:
        result = self.detector.check(doc.name, doc.original_content, self._candidates(doc))
        self.last_result = result
        if result.is_duplicate:
            code = _REASON_CODES.get(result.match_type, "DUP")
            return Decision(False, self.name, code, f"{result.reason} ({result.existing_file})")
        return Decision(True, self.name)

    def remember(self, doc: Document) -> None:
        self.corpus.append(doc)

"""Candidate pre-filter using MinHash LSH (datasketch).

The duplicate detector is a linear scan with an O(n*m) Levenshtein per
filename pair. For large corpora the host narrows the corpus first:

- every document's content token set is MinHashed into an in-memory LSH index
- a query returns documents sharing an LSH band with the incoming content,
  plus every document whose filename is a name-rule hit

The result keeps corpus order, so running the detector on it gives the same
answer as the full scan whenever the true match is among the candidates.
LSH is probabilistic; keep `threshold` well below the content threshold.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence
from datasketch import MinHash, MinHashLSH
from ..pipeline.context import Document
from ..utils.text import content_tokens, normalize_name
from .schema import DuplicateCheckOptions
from .similarity import string_similarity

log = logging.getLogger("corpus_review.dedup.prefilter")


def _minhash(text: str, num_perm: int) -> MinHash:
    mh = MinHash(num_perm=num_perm)
    for tok in sorted(content_tokens(text)):
        mh.update(tok.encode("utf-8", errors="ignore"))
    return mh


class CandidatePrefilter:
    def __init__(
        self,
        corpus: Sequence[Document],
        options: Optional[DuplicateCheckOptions] = None,
        threshold: float = 0.5,
        num_perm: int = 128,
    ):
        self.corpus = list(corpus)
        self.options = options or DuplicateCheckOptions()
        self.threshold = float(threshold)
        self.num_perm = int(num_perm)
        self.lsh = MinHashLSH(threshold=self.threshold, num_perm=self.num_perm)
        self._names = [normalize_name(d.name, self.options.case_sensitive) for d in self.corpus]
        indexed = 0
        for idx, doc in enumerate(self.corpus):
            if len(doc.original_content) < self.options.min_content_length:
                continue
            self.lsh.insert(idx, _minhash(doc.original_content, self.num_perm))
            indexed += 1
        log.info(f"Prefilter indexed {indexed}/{len(self.corpus)} documents threshold={self.threshold}")

    def candidates(self, name: str, content: str) -> List[Document]:
        hits = set()
        if self.options.check_content and len(content) >= self.options.min_content_length:
            hits.update(self.lsh.query(_minhash(content, self.num_perm)))
        if self.options.check_name:
            wanted = normalize_name(name, self.options.case_sensitive)
            for idx, other in enumerate(self._names):
                if other == wanted or string_similarity(wanted, other) > self.options.name_threshold:
                    hits.add(idx)
        return [self.corpus[i] for i in sorted(hits)]

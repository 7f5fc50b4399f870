"""Near-duplicate detection against an accepted corpus.

For every existing document, in corpus order:
1) filename: exact match (after trim/case folding), else normalized
   Levenshtein above `name_threshold`
2) content: token Jaccard above `content_threshold`, only when both texts
   reach `min_content_length`

The first matching document wins; there is no ranking across candidates.
The check is read-only and never raises. What to do with a duplicate
(reject, merge, flag) is up to the caller.
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence, Tuple
from ..pipeline.context import Document
from ..utils.numeric import round_half_up
from ..utils.text import normalize_name
from .schema import DuplicateCheckOptions, DuplicateResult, MatchType
from .similarity import content_similarity, string_similarity

log = logging.getLogger("corpus_review.dedup")

EXACT_NAME_REASON = "exact filename match"


def _pct(x: float) -> int:
    return round_half_up(x * 100)


class DuplicateDetector:
    def __init__(self, options: Optional[DuplicateCheckOptions] = None):
        self.options = options or DuplicateCheckOptions()

    def check(self, name: str, content: str, corpus: Iterable[Document]) -> DuplicateResult:
        opts = self.options
        wanted = normalize_name(name, opts.case_sensitive)
        content_long_enough = len(content) >= opts.min_content_length

        for existing in corpus:
            if opts.check_name:
                hit = self._check_name(wanted, existing)
                if hit is not None:
                    return hit

            if (
                opts.check_content
                and content_long_enough
                and len(existing.original_content) >= opts.min_content_length
            ):
                sim = content_similarity(content, existing.original_content)
                if sim > opts.content_threshold:
                    log.debug("content match name=%s existing=%s sim=%.3f", name, existing.name, sim)
                    return DuplicateResult(
                        True,
                        existing.name,
                        f"content is {_pct(sim)}% similar to existing file",
                        similarity=sim,
                        match_type=MatchType.CONTENT,
                    )

        return DuplicateResult(False)

    def _check_name(self, wanted: str, existing: Document) -> Optional[DuplicateResult]:
        other = normalize_name(existing.name, self.options.case_sensitive)
        if wanted == other:
            return DuplicateResult(
                True, existing.name, EXACT_NAME_REASON,
                similarity=1.0, match_type=MatchType.EXACT_NAME,
            )
        sim = string_similarity(wanted, other)
        if sim > self.options.name_threshold:
            log.debug("filename match name=%s existing=%s sim=%.3f", wanted, existing.name, sim)
            return DuplicateResult(
                True,
                existing.name,
                f"filename is {_pct(sim)}% similar to existing file",
                similarity=sim,
                match_type=MatchType.SIMILAR_NAME,
            )
        return None


def check_duplicate(
    name: str,
    content: str,
    corpus: Iterable[Document],
    options: Optional[DuplicateCheckOptions] = None,
) -> DuplicateResult:
    return DuplicateDetector(options).check(name, content, corpus)


def find_name_match(
    name: str,
    corpus: Iterable[Document],
    case_sensitive: bool = False,
    exact_match: bool = True,
) -> Optional[Document]:
    """First document whose name equals `name`, or contains it when
    exact_match is False."""
    wanted = normalize_name(name, case_sensitive)
    for existing in corpus:
        other = normalize_name(existing.name, case_sensitive)
        if (other == wanted) if exact_match else (wanted in other):
            return existing
    return None


def best_content_match(
    content: str,
    corpus: Sequence[Document],
    min_content_length: int = 100,
) -> Tuple[Optional[Document], float]:
    """Most similar document by content and its score, ignoring thresholds.

    Ties keep the earlier document. Returns (None, 0.0) when nothing is
    comparable.
    """
    if len(content) < min_content_length:
        return None, 0.0
    best: Optional[Document] = None
    best_sim = 0.0
    for existing in corpus:
        if len(existing.original_content) < min_content_length:
            continue
        sim = content_similarity(content, existing.original_content)
        if sim > best_sim:
            best, best_sim = existing, sim
    return best, best_sim

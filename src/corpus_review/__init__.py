"""corpus_review

Duplicate screening, auto-labeling and quality scoring for document corpora.

Public API surface:
- corpus_review.dedup : filename/content similarity and the duplicate detector
- corpus_review.labeling : keyword pattern classifier and content extraction
- corpus_review.quality : scoring profiles and corpus-level metrics
- corpus_review.pipeline.review : push incoming documents through the review stages
- corpus_review.cli.main : CLI entrypoint

Everything under dedup/labeling/quality is pure and side-effect free; storage,
analytics and the CLI are the host-side pieces around it.
"""
__all__ = ["__version__"]
__version__ = "0.1.0"

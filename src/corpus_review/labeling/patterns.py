"""Keyword pattern table for document typing.

Each label maps to an ordered tuple of lower-case keyword phrases. A phrase
matches when it is a substring of the lower-cased content or filename.
Table order matters: it is the order labels are reported in.

The table can be replaced from YAML (`labeling.patterns` in review.yaml):

```yaml
peer-reviewed-journal: [abstract, methodology, results]
surgical-procedure: [surgery, anesthesia]
```
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple
from ..policies.loader import load_yaml

PatternTable = Mapping[str, Tuple[str, ...]]

DEFAULT_PATTERNS: PatternTable = MappingProxyType({
    # academic & research
    "peer-reviewed-journal": (
        "abstract", "methodology", "results", "discussion", "conclusion", "references",
        "doi:", "journal", "volume", "issue", "pmid", "pubmed",
    ),
    "research-paper": (
        "research", "study", "analysis", "findings", "hypothesis", "literature review",
        "data collection", "statistical",
    ),
    "case-study": (
        "case study", "patient", "clinical case", "diagnosis", "treatment", "outcome", "follow-up",
    ),
    "review-article": (
        "systematic review", "meta-analysis", "literature review", "overview", "comprehensive review",
    ),

    # educational
    "textbook": (
        "chapter", "edition", "isbn", "publisher", "learning objectives", "summary",
        "key concepts", "exercises", "problems",
    ),
    "lecture-notes": (
        "lecture", "notes", "slides", "presentation", "course", "university", "professor", "class",
    ),
    "tutorial": (
        "step by step", "how to", "guide", "tutorial", "instructions", "beginner", "advanced", "learn",
    ),

    # professional & industry
    "clinical-guideline": (
        "guideline", "protocol", "recommendation", "standard of care", "best practice",
        "clinical practice", "evidence-based",
    ),
    "technical-manual": (
        "manual", "handbook", "technical", "procedure", "operation", "maintenance",
        "troubleshooting", "specifications",
    ),
    "white-paper": (
        "white paper", "whitepaper", "industry report", "market analysis", "technical report",
        "position paper",
    ),

    # web & digital
    "blog-post": (
        "blog", "posted by", "comments", "tags", "share", "like", "subscribe", "social media",
    ),
    "news-article": (
        "breaking news", "reporter", "published", "press release", "news", "journalist", "editorial",
    ),
    "wiki-article": (
        "wikipedia", "wiki", "edit", "contributors", "references", "external links", "disambiguation",
    ),

    # veterinary
    "veterinary-journal": (
        "veterinary", "animal", "canine", "feline", "equine", "bovine", "small animal",
        "large animal", "veterinarian", "vet",
    ),
    "animal-care-guide": (
        "pet care", "animal care", "feeding", "grooming", "health", "vaccination",
        "preventive care", "wellness",
    ),
    "surgical-procedure": (
        "surgery", "surgical", "procedure", "anesthesia", "post-operative", "sterile",
        "incision", "suture",
    ),

    # content quality indicators
    "high-quality": (
        "peer-reviewed", "evidence-based", "clinical trial", "randomized", "controlled study",
        "meta-analysis", "systematic review",
    ),
    "educational": (
        "learning", "education", "training", "course", "curriculum", "teaching", "student", "academic",
    ),
    "reference-material": (
        "reference", "handbook", "encyclopedia", "dictionary", "atlas", "compendium", "guide",
    ),
})

# Quality-indicator labels never become the primary document type.
RESERVED_TYPE_LABELS = frozenset({"high-quality", "educational", "reference-material"})

DEFAULT_DOCUMENT_TYPE = "general-document"

VETERINARY_LABELS: Tuple[str, ...] = (
    "clinical-research",
    "animal-behavior",
    "diagnostic-imaging",
    "pharmacology",
    "surgery",
    "internal-medicine",
    "emergency-care",
    "preventive-medicine",
    "nutrition",
    "pathology",
    "anesthesia",
    "cardiology",
    "dermatology",
    "neurology",
    "oncology",
)


def build_patterns(raw: Mapping[str, Any]) -> PatternTable:
    """Validate a label -> keywords mapping and freeze it."""
    table: Dict[str, Tuple[str, ...]] = {}
    for label, keywords in raw.items():
        if isinstance(keywords, str) or not keywords:
            raise ValueError(f"Pattern '{label}' needs a non-empty list of keywords")
        table[str(label)] = tuple(str(k).lower() for k in keywords)
    return MappingProxyType(table)


def load_patterns(path: str) -> PatternTable:
    raw = load_yaml(path)
    if not raw:
        raise ValueError(f"No patterns defined in {path}")
    return build_patterns(raw)

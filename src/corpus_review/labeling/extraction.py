"""Heuristic content extraction for veterinary documents.

Derives the `ExtractedData` the corpus scoring profile looks at:
- title: first short line that looks like a heading, else the filename stem
- summary: up to three mid-length sentences mentioning study terms
- key points: list items, else clinical sentences, else generic points
- metadata: document kind, word count, processing date, focus, animals

and a small set of specialty labels (`auto_assign_labels`). All of it is
regex/substring based; there is no model behind it.
"""

from __future__ import annotations
from datetime import date
from typing import List, Optional, Tuple
import re
from ..pipeline.context import ExtractedData

_EXT_RE = re.compile(r"\.[^/.]+$")
_HEADING_RE = re.compile(r"^[A-Z][^.]*[.!?]$")
_TITLE_PREFIX_RE = re.compile(r"^(title|abstract|introduction):\s*", re.IGNORECASE)
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
_LIST_ITEM_RE = re.compile(r"(?:^\d+\.|^[-•*])\s*(.+)$", re.MULTILINE)
_LIST_MARKER_RE = re.compile(r"^\d+\.|^[-•*]\s*")

_ANIMAL_RE = re.compile(r"\b(dog|cat|horse|cattle|pig|sheep|goat|bird|reptile|exotic)\b", re.IGNORECASE)
_STUDY_RE = re.compile(r"\b(study|trial|research|investigation)\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_CLINICAL_RE = re.compile(r"\b(clinical|diagnosis|treatment|therapy)\b", re.IGNORECASE)
_ANIMALS_MENTIONED_RE = re.compile(
    r"\b(dogs?|cats?|horses?|cattle|pigs?|sheep|goats?|birds?|reptiles?|exotic)\b", re.IGNORECASE
)

SUMMARY_TERMS = ("study", "result", "conclusion", "treatment", "animal", "veterinary")
KEY_POINT_TERMS = ("treatment", "diagnosis", "symptoms", "therapy", "clinical", "pathology", "disease")

GENERIC_KEY_POINTS = (
    "Study methodology and animal subjects",
    "Clinical findings and observations",
    "Treatment protocols and outcomes",
    "Veterinary implications and recommendations",
)

# (label, terms) in reporting order; first three hits are kept
SPECIALTY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Small Animal Medicine", (
        "dog", "cat", "rabbit", "ferret", "guinea pig", "hamster", "bird", "canine", "feline",
    )),
    ("Large Animal Medicine", (
        "horse", "cattle", "cow", "bull", "pig", "sheep", "goat", "llama", "alpaca",
        "equine", "bovine", "porcine", "ovine",
    )),
    ("Exotic Animal Medicine", (
        "reptile", "snake", "lizard", "turtle", "bird", "parrot", "exotic", "wildlife", "zoo", "avian",
    )),
    ("Veterinary Surgery", (
        "surgery", "surgical", "operation", "procedure", "anesthesia", "post-operative", "pre-operative",
    )),
    ("Animal Pathology", (
        "pathology", "histopathology", "necropsy", "autopsy", "biopsy", "cytology", "tumor", "cancer",
    )),
    ("Clinical Diagnosis", (
        "diagnosis", "diagnostic", "examination", "clinical signs", "symptoms", "differential",
    )),
    ("Treatment Protocols", (
        "treatment", "therapy", "medication", "drug", "antibiotic", "protocol", "management",
    )),
    ("Preventive Medicine", (
        "prevention", "preventive", "vaccination", "vaccine", "prophylaxis", "wellness", "health maintenance",
    )),
    ("Animal Nutrition", (
        "nutrition", "diet", "feeding", "food", "nutritional", "supplement", "obesity", "weight",
    )),
    ("Veterinary Pharmacology", (
        "pharmacology", "drug", "medication", "dosage", "pharmacokinetics", "adverse effects",
    )),
    ("Animal Behavior", (
        "behavior", "behavioural", "training", "aggression", "anxiety", "stress", "enrichment",
    )),
    ("Emergency Medicine", (
        "emergency", "critical", "intensive care", "trauma", "shock", "resuscitation", "urgent",
    )),
    ("Veterinary Oncology", (
        "oncology", "cancer", "tumor", "neoplasia", "chemotherapy", "radiation", "metastasis",
    )),
    ("Reproductive Medicine", (
        "reproduction", "breeding", "pregnancy", "parturition", "fertility", "estrus", "mating",
    )),
    ("Infectious Diseases", (
        "infectious", "infection", "bacteria", "virus", "parasite", "contagious", "epidemic", "zoonotic",
    )),
)
FALLBACK_LABEL = "Veterinary Medicine"
FALLBACK_TERMS = ("veterinary", "animal", "clinical", "medical", "health")
MAX_SPECIALTY_LABELS = 3


def strip_extension(filename: str) -> str:
    return _EXT_RE.sub("", filename)


def extract_title(filename: str, content: str) -> str:
    for line in content.split("\n"):
        if not line.strip():
            continue
        if 10 < len(line) < 200 and (":" in line or _HEADING_RE.match(line)):
            return _TITLE_PREFIX_RE.sub("", line).strip()
    return strip_extension(filename)


def extract_summary(content: str, title: str) -> str:
    important = [
        s for s in _SENTENCE_RE.findall(content)
        if 50 < len(s) < 300 and any(t in s.lower() for t in SUMMARY_TERMS)
    ][:3]
    if important:
        return " ".join(important).strip()
    return (
        f"Veterinary research document analyzing {title.lower()}. "
        "This study presents findings relevant to veterinary medicine and animal health."
    )


def extract_key_points(content: str) -> List[str]:
    items = [m.group(0) for m in _LIST_ITEM_RE.finditer(content)]
    if items:
        points = [_LIST_MARKER_RE.sub("", item, count=1).strip() for item in items[:4]]
    else:
        points = [
            s for s in _SENTENCE_RE.findall(content)
            if any(t in s.lower() for t in KEY_POINT_TERMS) and 30 < len(s) < 200
        ][:4]
    return points or list(GENERIC_KEY_POINTS)


def extract_metadata(content: str, today: Optional[date] = None) -> dict:
    today = today or date.today()
    has_study = bool(_STUDY_RE.search(content))
    has_clinical = bool(_CLINICAL_RE.search(content))
    if has_study:
        kind = "Research Study"
    elif has_clinical:
        kind = "Clinical Report"
    else:
        kind = "Veterinary Document"

    metadata = {
        "Document Type": kind,
        "Word Count": f"~{len(_WHITESPACE_RE.split(content)):,} words",
        "Processing Date": today.isoformat(),
        "Content Focus": "Animal Health" if _ANIMAL_RE.search(content) else "Veterinary Medicine",
    }

    animals: List[str] = []
    for m in _ANIMALS_MENTIONED_RE.finditer(content):
        a = m.group(0).lower()
        if a not in animals:
            animals.append(a)
    if animals:
        metadata["Animals Mentioned"] = ", ".join(animals[:3])
    return metadata


def extract_content(filename: str, content: str, today: Optional[date] = None) -> ExtractedData:
    title = extract_title(filename, content)
    return ExtractedData(
        title=title,
        summary=extract_summary(content, title),
        key_points=extract_key_points(content),
        metadata=extract_metadata(content, today=today),
    )


def auto_assign_labels(content: str, filename: str, title: str = "") -> List[str]:
    """Up to three veterinary specialty labels, in rule order."""
    combined = f"{content} {filename} {title}".lower()
    labels = [
        label for label, terms in SPECIALTY_RULES
        if any(t in combined for t in terms)
    ]
    if not labels and any(t in combined for t in FALLBACK_TERMS):
        labels.append(FALLBACK_LABEL)
    return labels[:MAX_SPECIALTY_LABELS]

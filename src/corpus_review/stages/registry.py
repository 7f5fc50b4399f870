"""Stage registry.

Stages are configured by name in `review.yaml` (`stages: [duplicate_gate, auto_label]`).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from ..dedup.schema import DuplicateCheckOptions
from ..labeling.classifier import PatternClassifier
from ..labeling.patterns import load_patterns
from ..pipeline.context import Document
from .auto_label import AutoLabel
from .base import Stage
from .duplicate_gate import DuplicateGate

DEFAULT_STAGES = ("duplicate_gate", "auto_label")

def make_stages(
    stage_names: Optional[Sequence[str]],
    cfg: Dict[str, Any],
    corpus: Sequence[Document],
) -> List[Stage]:
    """
    Create review stages from configuration.

    Args:
        stage_names: Stage names in run order (defaults to duplicate_gate, auto_label)
        cfg: Full review config (duplicates / labeling / prefilter sections)
        corpus: Accepted corpus snapshot for the duplicate gate
    """
    options = DuplicateCheckOptions.from_policy(cfg.get("duplicates"))
    labeling = cfg.get("labeling") or {}
    patterns = load_patterns(labeling["patterns"]) if labeling.get("patterns") else None

    factories = {
        "duplicate_gate": lambda: DuplicateGate(corpus, options, prefilter=cfg.get("prefilter")),
        "auto_label": lambda: AutoLabel(
            PatternClassifier(patterns),
            specialty_labels=bool(labeling.get("specialty_labels", True)),
        ),
    }

    stages = []
    for n in stage_names or DEFAULT_STAGES:
        if n not in factories:
            raise ValueError(f"Unknown stage: {n}. Register it in corpus_review.stages.registry")
        stages.append(factories[n]())
    return stages

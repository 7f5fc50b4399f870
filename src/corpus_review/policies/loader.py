"""Policy loader.

Review settings and the label pattern table are YAML files with simple keys.
Keeping them in YAML allows:
- reviewers to tune thresholds without code changes
- versioned configuration alongside the corpus
"""

from __future__ import annotations
from typing import Any, Dict
import yaml

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

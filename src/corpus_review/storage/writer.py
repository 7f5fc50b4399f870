"""JSONL writers.

Append-only, one JSON object per line, UTF-8 without ASCII escaping.
"""

from __future__ import annotations
from typing import Any, Dict, List
import json
import os

def append_jsonl(path: str, rows: List[Dict[str, Any]]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")

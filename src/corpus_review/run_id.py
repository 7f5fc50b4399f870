"""Run ID resolution: explicit or generated from the command and a timestamp."""

from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Any, Dict


def generate_run_id(prefix: str = "review") -> str:
    """`<prefix>_YYYYMMDDHHMMSS` in UTC, prefix made safe for filenames."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    prefix = re.sub(r"[^\w\-]", "_", prefix) or "review"
    return f"{prefix}_{ts}"


def resolve_run_id(cfg: Dict[str, Any], prefix: str = "review") -> str:
    """Return run.run_id if set, else a generated one."""
    run = cfg.get("run") or {}
    explicit = run.get("run_id")
    if explicit is not None and str(explicit).strip():
        return str(explicit).strip()
    return generate_run_id(prefix)


def resolve_out_dir(cfg: Dict[str, Any], run_id: str) -> str:
    """Return out_dir with {run_id} placeholder replaced by the resolved run_id."""
    run = cfg.get("run") or {}
    out_dir = run.get("out_dir") or "review_output"
    if "{run_id}" in out_dir:
        return out_dir.replace("{run_id}", run_id)
    return out_dir

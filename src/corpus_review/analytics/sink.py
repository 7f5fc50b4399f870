"""Metrics snapshot sink.

Each `corpus-review metrics --out-dir ...` run appends one snapshot:

1) Metrics (append-only Parquet): `analytics/metrics/date=.../metrics.parquet`
2) Issues (append-only Parquet): `analytics/issues/date=.../issues.parquet`

Distribution mappings are stored as JSON strings; their keys change between
snapshots and Parquet structs need a fixed schema. Per-document quality
scores are summarized as p50/p90/p99.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
import json
import logging
import os
import time
from datetime import datetime, timezone
import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq
from ..quality.metrics import QualityIssue, QualityMetrics

log = logging.getLogger("corpus_review.analytics")

def _percentiles(xs: Sequence[float], ps=(50, 90, 99)) -> Dict[str, float]:
    if not xs:
        return {}
    arr = np.array(xs, dtype=np.float64)
    out = {}
    for p in ps:
        out[f"p{p}"] = float(np.percentile(arr, p))
    return out

def metrics_row(
    run_id: str,
    metrics: QualityMetrics,
    scores: Optional[Sequence[int]] = None,
    timestamp_ms: Optional[int] = None,
) -> Dict[str, Any]:
    row: Dict[str, Any] = {"run_id": run_id, "timestamp_ms": timestamp_ms or int(time.time() * 1000)}
    for k, v in metrics.to_dict().items():
        row[k] = json.dumps(v, sort_keys=True) if isinstance(v, dict) else v
    for pk, pv in _percentiles(scores or []).items():
        row[f"quality_score_{pk}"] = pv
    return row

class MetricsSink:
    def __init__(self, out_dir: str, run_id: str):
        self.out_dir = out_dir
        self.run_id = run_id
        self.metrics_dir = os.path.join(out_dir, "analytics", "metrics")
        self.issues_dir = os.path.join(out_dir, "analytics", "issues")
        os.makedirs(self.metrics_dir, exist_ok=True)
        os.makedirs(self.issues_dir, exist_ok=True)

    def emit(
        self,
        metrics: QualityMetrics,
        issues: List[QualityIssue],
        scores: Optional[Sequence[int]] = None,
    ) -> str:
        """Append one snapshot; returns the metrics file path."""
        ts = int(time.time() * 1000)
        date = datetime.fromtimestamp(ts / 1000, tz=timezone.utc).date().isoformat()

        mp = os.path.join(self.metrics_dir, f"date={date}", "metrics.parquet")
        self._append_parquet(mp, [metrics_row(self.run_id, metrics, scores, ts)])

        if issues:
            ip = os.path.join(self.issues_dir, f"date={date}", "issues.parquet")
            rows = []
            for issue in issues:
                d = issue.to_dict()
                rows.append({
                    "run_id": self.run_id,
                    "timestamp_ms": ts,
                    "type": d["type"],
                    "title": d["title"],
                    "description": d["description"],
                    "count": d.get("count"),
                    "action": d.get("action"),
                })
            self._append_parquet(ip, rows)
        log.info(f"Wrote metrics snapshot run_id={self.run_id} issues={len(issues)} path={mp}")
        return mp

    def _append_parquet(self, path: str, rows: List[Dict[str, Any]]) -> None:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        table = pa.Table.from_pylist(rows)
        if os.path.exists(path) and os.path.getsize(path) > 0:
            existing = pq.read_table(path)
            table = pa.concat_tables([existing, table], promote_options="default")
        pq.write_table(table, path, compression="zstd")

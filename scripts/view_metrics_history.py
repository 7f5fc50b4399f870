"""View metrics snapshots written by `corpus-review metrics --out-dir`.

Usage:
    python scripts/view_metrics_history.py review_output
"""

from __future__ import annotations
import glob
import os
import sys
import pyarrow as pa
import pyarrow.parquet as pq

COLUMNS = ("run_id", "total_documents", "approved_documents", "readiness_score", "duplicate_risk", "quality_score_p50")

def view_history(out_dir: str) -> None:
    files = sorted(glob.glob(os.path.join(out_dir, "analytics", "metrics", "date=*", "metrics.parquet")))
    if not files:
        print(f"No metrics snapshots under {out_dir}")
        return
    table = pa.concat_tables([pq.read_table(f) for f in files], promote_options="default")
    cols = [c for c in COLUMNS if c in table.column_names]
    print(" | ".join(cols))
    print("-" * 80)
    for row in table.select(cols).to_pylist():
        print(" | ".join(str(row[c]) for c in cols))
    print(f"\n{table.num_rows} snapshots in {len(files)} files")

if __name__ == "__main__":
    view_history(sys.argv[1] if len(sys.argv) > 1 else "review_output")

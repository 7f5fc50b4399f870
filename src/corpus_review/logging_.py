"""Logging utilities.

We use Python's standard `logging` module with a plain structured format.

- Logs go to: `<log_dir>/<run_id>.log` (default `<out_dir>/logs`)
- Also prints to the console (stderr), so stdout stays clean for JSON output.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

def setup_logging(out_dir: str, run_id: str, log_dir: Optional[str] = None, level: int = logging.INFO) -> str:
    """
    Setup logging configuration.

    Args:
        out_dir: Output directory
        run_id: Run identifier, used as the log file name
        log_dir: Log directory (if None, uses out_dir/logs)
        level: Root log level

    Returns:
        Path of the log file.
    """
    if log_dir is None:
        log_dir = os.path.join(out_dir, "logs")

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")

    root = logging.getLogger()
    root.setLevel(level)

    # drop handlers from an earlier call in the same process
    for h in list(root.handlers):
        if getattr(h, "_corpus_review", False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # File
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    fh._corpus_review = True
    root.addHandler(fh)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch._corpus_review = True
    root.addHandler(ch)
    return log_path

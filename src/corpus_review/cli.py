"""CLI entrypoint.

Commands:
- `corpus-review check --corpus corpus.jsonl --name report.pdf --file report.txt`
- `corpus-review classify --file report.txt [--name report.pdf]`
- `corpus-review review --corpus corpus.jsonl --input incoming.jsonl [--decisions decisions.jsonl]`
- `corpus-review metrics --corpus corpus.jsonl [--out-dir DIR] [--json]`

All commands accept `--config configs/review.yaml`. JSON results go to
stdout; logs go to stderr and `<out_dir>/logs/<run_id>.log`.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from .dedup.detector import DuplicateDetector
from .dedup.prefilter import CandidatePrefilter
from .dedup.schema import DuplicateCheckOptions
from .labeling.classifier import PatternClassifier
from .labeling.patterns import load_patterns
from .logging_ import setup_logging
from .policies.loader import load_yaml
from .run_id import resolve_out_dir, resolve_run_id

log = logging.getLogger("corpus_review.cli")

def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()

def _emit(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, indent=2, ensure_ascii=False) + "\n")

def _classifier(cfg: Dict[str, Any]) -> PatternClassifier:
    path = (cfg.get("labeling") or {}).get("patterns")
    return PatternClassifier(load_patterns(path) if path else None)

def cmd_check(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    from .storage.jsonl_store import read_documents
    corpus = read_documents(args.corpus)
    content = _read_text(args.file)
    options = DuplicateCheckOptions.from_policy(cfg.get("duplicates"))
    prefilter = cfg.get("prefilter") or {}
    if prefilter.get("enabled", False):
        pf = CandidatePrefilter(
            corpus, options,
            threshold=float(prefilter.get("threshold", 0.5)),
            num_perm=int(prefilter.get("num_perm", 128)),
        )
        corpus = pf.candidates(args.name, content)
    result = DuplicateDetector(options).check(args.name, content, corpus)
    _emit(result.to_dict())
    return 1 if result.is_duplicate else 0

def cmd_classify(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    name = args.name or args.file
    analysis = _classifier(cfg).classify(name, _read_text(args.file))
    _emit(analysis.to_dict())
    return 0

def cmd_review(args: argparse.Namespace, cfg: Dict[str, Any]) -> int:
    from .pipeline.review import review_documents
    from .storage.jsonl_store import JSONLDocumentStore, read_documents
    store = JSONLDocumentStore(args.corpus, decisions_path=args.decisions)
    incoming = read_documents(args.input)
    decisions = review_documents(incoming, store, cfg, show_progress=not args.quiet)
    _emit({
        "reviewed": len(decisions),
        "accepted": sum(1 for d in decisions if d.accepted),
        "rejected": [d.to_dict() for d in decisions if not d.accepted],
    })
    return 0

def cmd_metrics(args: argparse.Namespace, cfg: Dict[str, Any], run_id: str) -> int:
    from .quality.metrics import compute_corpus_metrics, score_document
    from .storage.jsonl_store import read_documents
    corpus = read_documents(args.corpus)
    recent_days = int((cfg.get("metrics") or {}).get("recent_days", 7))
    metrics, issues = compute_corpus_metrics(corpus, now=datetime.now(timezone.utc), recent_days=recent_days)

    if args.out_dir and metrics is not None:
        from .analytics.sink import MetricsSink
        MetricsSink(args.out_dir, run_id).emit(metrics, issues, [score_document(d) for d in corpus])

    if args.json:
        _emit({
            "metrics": metrics.to_dict() if metrics else None,
            "issues": [i.to_dict() for i in issues],
        })
    else:
        from .monitor.report import print_metrics
        print_metrics(metrics, issues)
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="corpus-review")
    p.add_argument("--config", default=None, help="review.yaml with duplicates/labeling/metrics settings")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("check", help="Check one document for duplicates")
    pc.add_argument("--corpus", required=True)
    pc.add_argument("--name", required=True)
    pc.add_argument("--file", required=True, help="Plain-text content of the document")

    pl = sub.add_parser("classify", help="Label, type and score one document")
    pl.add_argument("--file", required=True)
    pl.add_argument("--name", default=None, help="Filename to classify under (default: --file)")

    pr = sub.add_parser("review", help="Review a JSONL batch against the corpus")
    pr.add_argument("--corpus", required=True)
    pr.add_argument("--input", required=True)
    pr.add_argument("--decisions", default=None, help="Append decisions to this JSONL file")
    pr.add_argument("--quiet", action="store_true", help="No progress bar")

    pm = sub.add_parser("metrics", help="Corpus quality metrics and issues")
    pm.add_argument("--corpus", required=True)
    pm.add_argument("--out-dir", default=None, help="Append a Parquet snapshot under this directory")
    pm.add_argument("--json", action="store_true", help="Print JSON instead of the terminal report")
    return p

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = load_yaml(args.config) if args.config else {}

    run_id = resolve_run_id(cfg, prefix=args.cmd)
    out_dir = resolve_out_dir(cfg, run_id)
    setup_logging(out_dir=out_dir, run_id=run_id, level=logging.DEBUG if args.debug else logging.INFO)
    log.info(f"corpus-review {args.cmd} run_id={run_id}")

    if args.cmd == "check":
        code = cmd_check(args, cfg)
    elif args.cmd == "classify":
        code = cmd_classify(args, cfg)
    elif args.cmd == "review":
        code = cmd_review(args, cfg)
    else:
        code = cmd_metrics(args, cfg, run_id)
    sys.exit(code)

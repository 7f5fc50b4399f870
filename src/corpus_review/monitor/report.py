"""Terminal report for corpus metrics.

Renders a QualityMetrics snapshot and its issues with rich:
- headline panel (readiness, totals, coverage)
- quality buckets and distributions
- issue table, most severe first
"""

from __future__ import annotations
from typing import Dict, List, Optional
from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from ..labeling.classifier import format_label
from ..quality.metrics import IssueKind, QualityIssue, QualityMetrics

_ISSUE_STYLE = {
    IssueKind.ERROR: "bold red",
    IssueKind.WARNING: "yellow",
    IssueKind.INFO: "cyan",
}

def quality_color(score: float) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    if score >= 40:
        return "dark_orange"
    return "red"

def _distribution_table(title: str, dist: Dict[str, int], limit: int = 10, pretty: bool = False) -> Table:
    t = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold")
    t.add_column("Key")
    t.add_column("Count", justify="right")
    for key, count in sorted(dist.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]:
        t.add_row(format_label(key) if pretty else key, str(count))
    return t

def render_metrics(metrics: Optional[QualityMetrics], issues: List[QualityIssue]) -> Group:
    if metrics is None:
        return Group(Panel(Text("No documents in corpus", style="dim"), title="Data Quality Metrics"))

    headline = Table.grid(padding=(0, 2))
    headline.add_column(style="bold")
    headline.add_column()
    headline.add_row("Readiness", Text(f"{metrics.readiness_score}%", style=f"bold {quality_color(metrics.readiness_score)}"))
    headline.add_row("Documents", f"{metrics.total_documents:,} ({metrics.approved_documents:,} approved)")
    headline.add_row("Avg length", f"{metrics.average_content_length:,} chars")
    headline.add_row("Avg quality", f"{metrics.average_quality_score:.1f}")
    headline.add_row("Labeled", f"{metrics.documents_with_labels:,} / {metrics.total_documents:,}")
    headline.add_row("Recent uploads", f"{metrics.recent_uploads:,} (7d)")
    headline.add_row("Duplicate risk", str(metrics.duplicate_risk))

    buckets = Table(title="Content Quality (approved)", box=box.SIMPLE)
    for name in ("excellent", "good", "fair", "poor"):
        buckets.add_column(name.capitalize(), justify="right")
    buckets.add_row(*(str(metrics.content_quality_scores[k]) for k in ("excellent", "good", "fair", "poor")))

    parts = [
        Panel(headline, title="Data Quality Metrics", box=box.ROUNDED),
        buckets,
        _distribution_table("Labels (approved)", metrics.approved_label_distribution, pretty=True),
        _distribution_table("Types", metrics.type_distribution),
        _distribution_table("Sources", metrics.source_distribution),
    ]

    if issues:
        it = Table(title="Quality Issues", box=box.SIMPLE_HEAVY)
        it.add_column("Type")
        it.add_column("Issue")
        it.add_column("Action")
        for issue in issues:
            it.add_row(
                Text(issue.kind.value, style=_ISSUE_STYLE[issue.kind]),
                f"{issue.title}: {issue.description}",
                issue.action or "",
            )
        parts.append(it)
    else:
        parts.append(Text("No quality issues found", style="green"))
    return Group(*parts)

def print_metrics(metrics: Optional[QualityMetrics], issues: List[QualityIssue], console: Optional[Console] = None) -> None:
    (console or Console()).print(render_metrics(metrics, issues))

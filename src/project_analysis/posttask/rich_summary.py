"""Post-analysis task printing the analysis summary with rich."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import CeTaskStatus, EvaluationStatus, ProjectAnalysis, QualityGateStatus

_GATE_STYLES = {
    QualityGateStatus.OK: "green",
    QualityGateStatus.WARN: "yellow",
    QualityGateStatus.ERROR: "red",
}

_CONDITION_STYLES = {
    EvaluationStatus.OK: "green",
    EvaluationStatus.WARN: "yellow",
    EvaluationStatus.ERROR: "red",
    EvaluationStatus.NO_VALUE: "dim",
}


class RichSummaryTask:
    """Render the ProjectAnalysis as tables on a rich console."""

    name = "rich-summary"

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def finished(self, analysis: ProjectAnalysis) -> None:
        status_style = "green" if analysis.ce_task.status is CeTaskStatus.SUCCESS else "red"

        table = Table(show_header=False, pad_edge=True, title="ANALYSIS")
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Task", escape(analysis.ce_task.uuid))
        table.add_row("Status", f"[{status_style}]{analysis.ce_task.status.value}[/{status_style}]")
        table.add_row("Project", escape(f"{analysis.project.name} ({analysis.project.key})"))
        table.add_row("Date", analysis.date.isoformat())

        gate = analysis.quality_gate
        if gate is None:
            table.add_row("Quality gate", "[dim]none[/dim]")
            self.console.print(table)
            return

        style = _GATE_STYLES[gate.status]
        table.add_row("Quality gate", f"{escape(gate.name)} [{style}]{gate.status.value}[/{style}]")
        self.console.print(table)

        if not gate.conditions:
            return
        conditions = Table(show_header=True, title="CONDITIONS")
        conditions.add_column("Metric")
        conditions.add_column("Operator")
        conditions.add_column("Warning", justify="right")
        conditions.add_column("Error", justify="right")
        conditions.add_column("Value", justify="right")
        conditions.add_column("Status")
        for condition in gate.conditions:
            cstyle = _CONDITION_STYLES[condition.status]
            conditions.add_row(
                escape(condition.metric_key) + (" (leak)" if condition.on_leak_period else ""),
                condition.operator.value,
                escape(condition.warning_threshold or "-"),
                escape(condition.error_threshold or "-"),
                escape(condition.value) if condition.value is not None else "-",
                f"[{cstyle}]{condition.status.value}[/{cstyle}]",
            )
        self.console.print(conditions)

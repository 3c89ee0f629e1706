"""Tests for the rich summary task."""

from datetime import datetime, timezone

from rich.console import Console

from project_analysis.posttask import (
    CeTask,
    CeTaskStatus,
    ConditionOperator,
    ConditionSummary,
    EvaluationStatus,
    Project,
    ProjectAnalysis,
    QualityGateStatus,
    QualityGateSummary,
    RichSummaryTask,
)


def _analysis(status=CeTaskStatus.SUCCESS, quality_gate=None):
    return ProjectAnalysis(
        ce_task=CeTask("TASK-1", status),
        project=Project("PROJ-UUID", "org.example:proj", "Example project"),
        date=datetime(2016, 6, 15, tzinfo=timezone.utc),
        quality_gate=quality_gate,
    )


def _render(analysis):
    console = Console(record=True, width=120)
    RichSummaryTask(console=console).finished(analysis)
    return console.export_text()


def test_prints_task_and_project():
    output = _render(_analysis())

    assert "TASK-1" in output
    assert "org.example:proj" in output
    assert "SUCCESS" in output
    assert "none" in output


def test_prints_failed_status():
    assert "FAILED" in _render(_analysis(status=CeTaskStatus.FAILED))


def test_prints_conditions():
    gate = QualityGateSummary(
        id="7",
        name="Default gate",
        status=QualityGateStatus.WARN,
        conditions=(
            ConditionSummary(
                status=EvaluationStatus.WARN,
                metric_key="coverage",
                operator=ConditionOperator.LESS_THAN,
                error_threshold="80",
                warning_threshold="90",
                on_leak_period=False,
                value="85.0",
            ),
            ConditionSummary(
                status=EvaluationStatus.NO_VALUE,
                metric_key="new_bugs",
                operator=ConditionOperator.GREATER_THAN,
                error_threshold="0",
                warning_threshold=None,
                on_leak_period=True,
            ),
        ),
    )

    output = _render(_analysis(quality_gate=gate))

    assert "Default gate" in output
    assert "WARN" in output
    assert "85.0" in output
    assert "new_bugs (leak)" in output
    assert "NO_VALUE" in output


def test_task_has_a_name():
    assert RichSummaryTask.name == "rich-summary"


def test_names_with_brackets_are_printed_verbatim():
    gate = QualityGateSummary(
        id="7",
        name="gate [/strict]",
        status=QualityGateStatus.OK,
        conditions=(
            ConditionSummary(
                status=EvaluationStatus.OK,
                metric_key="[bold]custom",
                operator=ConditionOperator.GREATER_THAN,
                error_threshold="[/x]",
                warning_threshold=None,
                on_leak_period=False,
                value="[1]",
            ),
        ),
    )
    analysis = ProjectAnalysis(
        ce_task=CeTask("TASK-1", CeTaskStatus.SUCCESS),
        project=Project("PROJ-UUID", "org.example:proj", "lib [/legacy] app"),
        date=datetime(2016, 6, 15, tzinfo=timezone.utc),
        quality_gate=gate,
    )

    output = _render(analysis)

    assert "lib [/legacy] app" in output
    assert "gate [/strict]" in output
    assert "[bold]custom" in output
    assert "[/x]" in output

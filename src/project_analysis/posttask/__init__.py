"""Post-analysis notification: public snapshot API and its executor."""

from .api import (
    CeTask,
    CeTaskStatus,
    ConditionOperator,
    ConditionSummary,
    EvaluationStatus,
    PostProjectAnalysisTask,
    Project,
    ProjectAnalysis,
    QualityGateStatus,
    QualityGateSummary,
)
from .executor import ExtensionFailure, PostProjectAnalysisTasksExecutor, convert_status
from .rich_summary import RichSummaryTask

__all__ = [
    "CeTask",
    "CeTaskStatus",
    "ConditionOperator",
    "ConditionSummary",
    "EvaluationStatus",
    "PostProjectAnalysisTask",
    "Project",
    "ProjectAnalysis",
    "QualityGateStatus",
    "QualityGateSummary",
    "ExtensionFailure",
    "PostProjectAnalysisTasksExecutor",
    "RichSummaryTask",
    "convert_status",
]

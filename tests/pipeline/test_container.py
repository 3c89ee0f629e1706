"""End-to-end tests of an analysis assembled from an AnalysisContainer."""

import pytest

from project_analysis.components import build_component
from project_analysis.config import AnalysisConfig
from project_analysis.exceptions import InvalidConfigurationError
from project_analysis.formula import FormulaRegistry, VariationSumFormula
from project_analysis.measures import Measure, MeasureVariations, Metric
from project_analysis.periods import Period, all_periods
from project_analysis.pipeline import AnalysisContainer
from project_analysis.posttask import CeTaskStatus
from project_analysis.qualitygate import QualityGate, QualityGateStatus

TREE = {
    "uuid": "P",
    "key": "proj",
    "type": "project",
    "children": [
        {
            "uuid": "D",
            "key": "proj:src",
            "type": "directory",
            "children": [
                {"uuid": "F1", "key": "proj:src/a.py", "type": "file"},
                {"uuid": "F2", "key": "proj:src/b.py", "type": "file"},
            ],
        }
    ],
}


class RecordingTask:
    name = "recording"

    def __init__(self):
        self.analyses = []

    def finished(self, analysis):
        self.analyses.append(analysis)


class LoadReportStep:
    """Fills the holders the way the report loading steps would."""

    description = "Load report"

    def __init__(self, container, gate=None):
        self.container = container
        self.gate = gate

    def execute(self):
        c = self.container
        root = build_component(TREE)
        c.tree_root_holder.set_root(root)
        c.periods_holder.set_periods([Period(1, "previous_analysis", 0)])
        c.analysis_metadata_holder.set_analysis_date(1_466_000_000_000)
        f1, f2 = root.children[0].children
        c.measure_repository.add_input(f1, "new_violations", Measure.no_value(MeasureVariations.of(2)))
        c.measure_repository.add_input(f2, "new_violations", Measure.no_value(MeasureVariations.of(3)))
        if self.gate is None:
            c.quality_gate_holder.set_no_quality_gate()
        else:
            c.quality_gate_holder.set_quality_gate(self.gate)


class GateStatusStep:
    description = "Compute quality gate status"

    def __init__(self, container):
        self.container = container

    def execute(self):
        self.container.quality_gate_status_holder.set_status(QualityGateStatus.OK, {})


class FailingStep:
    description = "Broken step"

    def execute(self):
        raise RuntimeError("step failed")


@pytest.fixture
def container(ce_task):
    container = AnalysisContainer.create(ce_task)
    container.metric_repository.register(Metric("new_violations", "New violations"))
    return container


@pytest.fixture
def registry():
    return FormulaRegistry([VariationSumFormula("new_violations", all_periods)])


def test_successful_analysis(container, registry):
    task = RecordingTask()
    gate = QualityGate(1, "Default gate")
    steps = [LoadReportStep(container, gate), container.formula_step(registry), GateStatusStep(container)]

    container.step_executor(steps, tasks=[task]).execute()

    root = container.tree_root_holder.get_root()
    assert container.measure_repository.get_measure(root, "new_violations").variations.as_dict() == {1: 5.0}
    analysis = task.analyses[0]
    assert analysis.ce_task.status is CeTaskStatus.SUCCESS
    assert analysis.quality_gate.name == "Default gate"


def test_failed_analysis_hides_gate(container, registry):
    task = RecordingTask()
    steps = [LoadReportStep(container, QualityGate(1, "Default gate")), FailingStep()]

    with pytest.raises(RuntimeError):
        container.step_executor(steps, tasks=[task]).execute()

    analysis = task.analyses[0]
    assert analysis.ce_task.status is CeTaskStatus.FAILED
    assert analysis.quality_gate is None


def test_formula_step_freezes_registry(container, registry):
    container.formula_step(registry)
    assert registry.frozen


def test_max_periods_from_config(ce_task):
    container = AnalysisContainer.create(ce_task, AnalysisConfig(max_periods=1))
    with pytest.raises(InvalidConfigurationError):
        container.periods_holder.set_periods([Period(2, "days", 0)])


def test_reset(container, registry):
    container.step_executor([LoadReportStep(container), container.formula_step(registry)]).execute()

    container.reset()

    assert not container.periods_holder.is_initialized
    assert len(container.measure_repository) == 0
    container.tree_root_holder.set_root(build_component(TREE))

"""Shared test fixtures for project-analysis tests."""

import logging

import pytest

from project_analysis.ce_task import CeTaskDescriptor
from project_analysis.components import Component, ComponentType
from project_analysis.logging_config import ROOT_LOGGER_NAME
from project_analysis.measures import MeasureRepository, Metric, MetricRepository
from project_analysis.periods import Period, PeriodsHolder


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and level installed by setup_logging during a test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


METRIC_KEY = "new_violations"


def make_period(index: int) -> Period:
    return Period(index=index, mode="previous_analysis", snapshot_date=1_000_000 * index)


def make_file(uuid: str) -> Component:
    return Component(uuid=uuid, key=f"proj:{uuid}.py", type=ComponentType.FILE, name=f"{uuid}.py")


@pytest.fixture
def period_1() -> Period:
    return make_period(1)


@pytest.fixture
def period_2() -> Period:
    return make_period(2)


@pytest.fixture
def periods_holder(period_1, period_2) -> PeriodsHolder:
    """Holder with periods 1 and 2 active."""
    holder = PeriodsHolder()
    holder.set_periods([period_1, period_2])
    return holder


@pytest.fixture
def measure_repository() -> MeasureRepository:
    return MeasureRepository()


@pytest.fixture
def metric_repository() -> MetricRepository:
    return MetricRepository(
        [
            Metric(METRIC_KEY, "New violations"),
            Metric("lines", "Lines"),
            Metric("total_lines", "Total lines"),
        ]
    )


@pytest.fixture
def ce_task() -> CeTaskDescriptor:
    return CeTaskDescriptor(
        uuid="TASK-1",
        component_uuid="PROJ-UUID",
        component_key="org.example:proj",
        component_name="Example project",
    )

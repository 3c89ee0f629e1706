"""Per-analysis holders.

Holders are written once by the step producing their content and read by
later steps and by the post-analysis notifier. Reading a holder before its
producer ran raises HolderNotInitializedError; writing twice raises
HolderAlreadyInitializedError. ``reset()`` tears a holder down at the end of
an analysis.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Mapping, Optional, TypeVar

from .components import Component
from .exceptions import (
    HolderAlreadyInitializedError,
    HolderNotInitializedError,
    InvalidConfigurationError,
)
from .qualitygate import Condition, ConditionStatus, QualityGate, QualityGateStatus

T = TypeVar("T")


class _SetOnce(Generic[T]):
    """A single set-once slot, named after what it holds."""

    def __init__(self, holder: str, what: str) -> None:
        self._holder = holder
        self._what = what
        self._initialized = False
        self._value: Optional[T] = None

    def set(self, value: T) -> None:
        if self._initialized:
            raise HolderAlreadyInitializedError(self._holder, self._what)
        self._value = value
        self._initialized = True

    def get(self) -> T:
        if not self._initialized:
            raise HolderNotInitializedError(self._holder, self._what)
        return self._value  # type: ignore[return-value]

    @property
    def initialized(self) -> bool:
        return self._initialized

    def reset(self) -> None:
        self._initialized = False
        self._value = None


class TreeRootHolder:
    """Root of the component tree built for the analysis."""

    def __init__(self) -> None:
        self._root: _SetOnce[Component] = _SetOnce("TreeRootHolder", "Root component")

    def set_root(self, root: Component) -> None:
        self._root.set(root)

    def get_root(self) -> Component:
        return self._root.get()

    def reset(self) -> None:
        self._root.reset()


class AnalysisMetadataHolder:
    """Metadata of the running analysis: uuid and analysis date."""

    def __init__(self) -> None:
        self._uuid: _SetOnce[str] = _SetOnce("AnalysisMetadataHolder", "Analysis uuid")
        self._analysis_date: _SetOnce[int] = _SetOnce("AnalysisMetadataHolder", "Analysis date")

    def set_uuid(self, uuid: str) -> None:
        if not uuid:
            raise InvalidConfigurationError("analysis.uuid", uuid, "uuid can not be empty")
        self._uuid.set(uuid)

    def get_uuid(self) -> str:
        return self._uuid.get()

    def set_analysis_date(self, date_millis: int) -> None:
        """Set the analysis instant, in milliseconds since the epoch (UTC)."""
        if date_millis is None or date_millis < 0:
            raise InvalidConfigurationError("analysis.date", date_millis, "date must be a non-negative number of millis")
        self._analysis_date.set(int(date_millis))

    def get_analysis_date(self) -> int:
        return self._analysis_date.get()

    def reset(self) -> None:
        self._uuid.reset()
        self._analysis_date.reset()


class QualityGateHolder:
    """The quality gate configured for the project, if any."""

    def __init__(self) -> None:
        self._gate: _SetOnce[Optional[QualityGate]] = _SetOnce("QualityGateHolder", "Quality gate")

    def set_quality_gate(self, quality_gate: QualityGate) -> None:
        if quality_gate is None:
            raise InvalidConfigurationError("quality_gate", None, "use set_no_quality_gate()")
        self._gate.set(quality_gate)

    def set_no_quality_gate(self) -> None:
        self._gate.set(None)

    def get_quality_gate(self) -> Optional[QualityGate]:
        return self._gate.get()

    def reset(self) -> None:
        self._gate.reset()


class QualityGateStatusHolder:
    """Overall gate status and the status of each of its conditions."""

    def __init__(self) -> None:
        self._status: _SetOnce[QualityGateStatus] = _SetOnce("QualityGateStatusHolder", "Quality gate status")
        self._per_condition: Mapping[Condition, ConditionStatus] = MappingProxyType({})

    def set_status(
        self, status: QualityGateStatus, status_per_conditions: Mapping[Condition, ConditionStatus]
    ) -> None:
        if status is None:
            raise InvalidConfigurationError("quality_gate.status", None, "status can not be None")
        if status_per_conditions is None:
            raise InvalidConfigurationError("quality_gate.conditions", None, "status per condition can not be None")
        self._status.set(status)
        self._per_condition = MappingProxyType(dict(status_per_conditions))

    def get_status(self) -> QualityGateStatus:
        return self._status.get()

    def get_status_per_conditions(self) -> Mapping[Condition, ConditionStatus]:
        self._status.get()
        return self._per_condition

    def reset(self) -> None:
        self._status.reset()
        self._per_condition = MappingProxyType({})

"""Descriptor of the background task running an analysis."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class CeTaskDescriptor:
    """The task as queued: its uuid and the project component it analyses."""

    uuid: str
    component_uuid: str
    component_key: str
    component_name: str

    def __post_init__(self) -> None:
        for name in ("uuid", "component_uuid", "component_key", "component_name"):
            if not getattr(self, name):
                raise InvalidConfigurationError(f"ce_task.{name}", getattr(self, name), "can not be empty")

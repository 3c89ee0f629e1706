"""Component model for project-analysis.

Components form the tree the formula engine folds over. A child is never
higher than its parent; same-type nesting (a module inside a module) is
allowed:

    Project (root)
        └── Module
                └── Directory
                        └── File (leaf)

Each component has a stable uuid, a key, a name, a type and ordered children.
Component types are ordered by depth so that a depth limit can be compared
against them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping

from .exceptions import InvalidConfigurationError


class ComponentType(Enum):
    """The kinds of component, ordered from the root downwards."""

    PROJECT = ("project", 0)
    MODULE = ("module", 1)
    DIRECTORY = ("directory", 2)
    FILE = ("file", 3)

    def __init__(self, label: str, depth: int) -> None:
        self.label = label
        self.depth = depth

    def is_deeper_than(self, other: ComponentType) -> bool:
        return self.depth > other.depth

    def is_higher_than(self, other: ComponentType) -> bool:
        return self.depth < other.depth

    @classmethod
    def from_label(cls, label: str) -> ComponentType:
        for member in cls:
            if member.label == label.lower():
                return member
        raise InvalidConfigurationError("component.type", label, "unknown component type")


class CrawlerDepthLimit(Enum):
    """How deep in the tree a formula is allowed to emit measures.

    LEAVES is deeper than every component type, so a formula limited to
    LEAVES emits on every component.
    """

    PROJECT = 0
    MODULE = 1
    DIRECTORY = 2
    FILE = 3
    LEAVES = 4

    def is_deeper_than(self, component_type: ComponentType) -> bool:
        return self.value > component_type.depth

    def is_same_as(self, component_type: ComponentType) -> bool:
        return self.value == component_type.depth

    @classmethod
    def from_name(cls, name: str) -> CrawlerDepthLimit:
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidConfigurationError("depth_limit", name, "unknown depth limit")


@dataclass(frozen=True)
class Component:
    """A node of the component tree.

    Equality and hashing use the uuid only, so a component can be used as a
    dictionary key regardless of its subtree.
    """

    uuid: str
    key: str
    type: ComponentType
    name: str = ""
    children: tuple[Component, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.uuid:
            raise InvalidConfigurationError("component.uuid", self.uuid, "uuid can not be empty")
        if not self.key:
            raise InvalidConfigurationError("component.key", self.key, "key can not be empty")
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if self.children and self.type is ComponentType.FILE:
            raise InvalidConfigurationError("component.children", self.key, "a file can not have children")
        for child in self.children:
            if child.type.is_higher_than(self.type):
                raise InvalidConfigurationError(
                    "component.children",
                    child.key,
                    f"{child.type.label} can not be a child of {self.type.label}",
                )

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return False
        return self.uuid == other.uuid

    @property
    def is_leaf(self) -> bool:
        return not self.children


def walk_post_order(root: Component) -> Iterator[Component]:
    """Yield every component of the tree, children before their parent."""
    for child in root.children:
        yield from walk_post_order(child)
    yield root


def build_component(definition: Mapping[str, Any]) -> Component:
    """Build a component tree from nested mappings.

    Each mapping holds ``uuid``, ``key``, ``type`` (a ComponentType label),
    an optional ``name`` and an optional ``children`` list. Uuids must be
    unique across the whole tree.

    Example:
        >>> root = build_component({
        ...     "uuid": "P1", "key": "proj", "type": "project",
        ...     "children": [{"uuid": "F1", "key": "proj:a.py", "type": "file"}],
        ... })
        >>> root.children[0].is_leaf
        True
    """
    seen: set[str] = set()

    def _build(node: Mapping[str, Any]) -> Component:
        uuid = node.get("uuid", "")
        if uuid in seen:
            raise InvalidConfigurationError("component.uuid", uuid, "uuid is used more than once")
        seen.add(uuid)
        raw_type = node.get("type", "")
        component_type = raw_type if isinstance(raw_type, ComponentType) else ComponentType.from_label(raw_type)
        return Component(
            uuid=uuid,
            key=node.get("key", ""),
            type=component_type,
            name=node.get("name", ""),
            children=tuple(_build(child) for child in node.get("children", ())),
        )

    return _build(definition)

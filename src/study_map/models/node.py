"""Domain models for study-map documents."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class NodeKind(str, Enum):
    """Whether a node has children."""

    BRANCH = "branch"
    LEAF = "leaf"


@dataclass(frozen=True)
class TreeNode:
    """A single titled node in a study-map tree."""

    id: str
    title: str
    summary: str = ""
    children: tuple["TreeNode", ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BRANCH if self.children else NodeKind.LEAF

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class Document:
    """A loaded study-map document. Immutable for the lifetime of a session."""

    root: TreeNode
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    source: str | None = None


# Sequence of child indices from the root. () is the root itself.
NavigationPath = tuple[int, ...]

"""Layout types shared by the tree layout and the graph builders."""

from __future__ import annotations

from dataclasses import dataclass, field

from syntharena_routes.types import NodeStatus


@dataclass
class LayoutNode:
    """A route node augmented with its subtree width and position.

    ``status`` is only set for merged (comparison) trees.
    """

    id: str
    smiles: str
    inchikey: str
    children: list[LayoutNode] = field(default_factory=list)
    status: NodeStatus | None = None
    width: float = 0
    x: float = 0
    y: float = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class Point:
    """A 2D point in pixel coordinates (top-left origin)."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass
class LayoutEdge:
    source: str
    target: str
    is_ghost: bool = False


@dataclass
class TreeLayout:
    """Flattened layout: nodes in pre-order, one edge per parent-child pair."""

    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)

    def leaf_ids(self) -> set[str]:
        parents = {edge.source for edge in self.edges}
        return {node.id for node in self.nodes if node.id not in parents}

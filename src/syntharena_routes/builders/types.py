"""Render output handed to the graph-rendering component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from syntharena_routes.layout.types import LayoutEdge, LayoutNode, Point
from syntharena_routes.types import DEFAULT_EDGE_STYLE, GHOST_EDGE_STYLE, MOLECULE_NODE_TYPE, EdgeStyle, NodeStatus


@dataclass
class MoleculeNodeData:
    smiles: str
    status: NodeStatus
    is_leaf: bool | None = None
    in_stock: bool | None = None
    ppg: float | None = None
    source: str | None = None
    lead_time: str | None = None
    link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase wire form; unset optional fields are omitted."""
        data: dict[str, Any] = {"smiles": self.smiles, "status": self.status.value}
        optional = (
            ("isLeaf", self.is_leaf),
            ("inStock", self.in_stock),
            ("ppg", self.ppg),
            ("source", self.source),
            ("leadTime", self.lead_time),
            ("link", self.link),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value
        return data


@dataclass
class FlowNode:
    id: str
    position: Point
    data: MoleculeNodeData
    type: str = MOLECULE_NODE_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": self.position.to_dict(),
            "data": self.data.to_dict(),
        }


@dataclass
class FlowEdge:
    id: str
    source: str
    target: str
    style: EdgeStyle = DEFAULT_EDGE_STYLE
    animated: bool = False

    @property
    def is_ghost(self) -> bool:
        return self.style.stroke_dasharray is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "animated": self.animated,
            "style": self.style.to_dict(),
        }


@dataclass
class RouteGraph:
    """Positioned nodes and styled edges for one rendered route panel."""

    nodes: list[FlowNode] = field(default_factory=list)
    edges: list[FlowEdge] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.nodes

    def node(self, node_id: str) -> FlowNode:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }


def flow_node(layout_node: LayoutNode, data: MoleculeNodeData) -> FlowNode:
    return FlowNode(id=layout_node.id, position=Point(layout_node.x, layout_node.y), data=data)


def flow_edges(edges: list[LayoutEdge], edge_id_prefix: str) -> list[FlowEdge]:
    """Number edges in layout order as ``{edge_id_prefix}{index}``."""
    return [
        FlowEdge(
            id=f"{edge_id_prefix}{index}",
            source=edge.source,
            target=edge.target,
            style=GHOST_EDGE_STYLE if edge.is_ghost else DEFAULT_EDGE_STYLE,
        )
        for index, edge in enumerate(edges)
    ]

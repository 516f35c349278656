"""Route tree data structures.

A route is a tree of molecules: the target at the root, purchasable starting
materials at the leaves. InChIKeys are the identity used for stock lookups and
for matching molecules across two routes; SMILES are only display labels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from syntharena_routes.config import MAX_ROUTE_DEPTH
from syntharena_routes.errors import RouteDepthError, RouteFormatError
from syntharena_routes.types import NodeStatus


@dataclass
class RouteVisualizationNode:
    smiles: str
    inchikey: str
    children: list[RouteVisualizationNode] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], max_depth: int = MAX_ROUTE_DEPTH) -> RouteVisualizationNode:
        """Build a route tree from its JSON form.

        ``children`` may be missing, ``None`` or a list.

        Raises:
            RouteFormatError: If a node lacks a string ``smiles``/``inchikey``.
            RouteDepthError: If the tree is deeper than ``max_depth``.
        """
        return _node_from_dict(data, depth=0, max_depth=max_depth)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"smiles": self.smiles, "inchikey": self.inchikey}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class MergedRouteNode:
    """A node of two routes reconciled into one tree."""

    smiles: str
    inchikey: str
    status: NodeStatus
    children: list[MergedRouteNode] = field(default_factory=list)


@dataclass
class BuyableMetadata:
    """Vendor listing for a purchasable molecule."""

    ppg: float | None = None  # price per gram
    source: str | None = None
    lead_time: str | None = None
    link: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BuyableMetadata:
        ppg = data.get("ppg")
        if ppg is not None and (isinstance(ppg, bool) or not isinstance(ppg, (int, float))):
            raise RouteFormatError("buyable 'ppg' must be a number", context={"ppg": ppg})
        return cls(
            ppg=None if ppg is None else float(ppg),
            source=data.get("source"),
            lead_time=data.get("leadTime", data.get("lead_time")),
            link=data.get("link"),
        )


def check_depth(depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise RouteDepthError(
            f"route tree exceeds maximum depth of {max_depth}",
            context={"max_depth": max_depth},
        )


def _node_from_dict(data: Mapping[str, Any], depth: int, max_depth: int) -> RouteVisualizationNode:
    check_depth(depth, max_depth)
    if not isinstance(data, Mapping):
        raise RouteFormatError(f"route node must be an object, got {type(data).__name__}")
    smiles = data.get("smiles")
    inchikey = data.get("inchikey")
    if not isinstance(smiles, str) or not isinstance(inchikey, str):
        raise RouteFormatError(
            "route node requires string 'smiles' and 'inchikey'",
            context={"smiles": smiles, "inchikey": inchikey},
        )
    raw_children = data.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise RouteFormatError("route node 'children' must be a list", context={"smiles": smiles})
    children = [_node_from_dict(child, depth + 1, max_depth) for child in raw_children]
    return RouteVisualizationNode(smiles=smiles, inchikey=inchikey, children=children)


def collect_inchikeys(
    node: RouteVisualizationNode,
    into: set[str],
    max_depth: int = MAX_ROUTE_DEPTH,
    _depth: int = 0,
) -> None:
    """Add every InChIKey in the tree rooted at ``node`` to ``into``."""
    check_depth(_depth, max_depth)
    into.add(node.inchikey)
    for child in node.children:
        collect_inchikeys(child, into, max_depth, _depth + 1)


def collect_smiles(
    node: RouteVisualizationNode,
    into: set[str],
    max_depth: int = MAX_ROUTE_DEPTH,
    _depth: int = 0,
) -> None:
    """Add every SMILES in the tree rooted at ``node`` to ``into``."""
    check_depth(_depth, max_depth)
    into.add(node.smiles)
    for child in node.children:
        collect_smiles(child, into, max_depth, _depth + 1)

"""Graph IR — flat route node records as a networkx DiGraph.

Stored routes are flat rows: every node carries its own id and the id of its
parent. This module rebuilds and validates the hierarchy before the tree is
handed to layout and the graph builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import networkx as nx

from syntharena_routes.config import MAX_ROUTE_DEPTH
from syntharena_routes.errors import RouteFormatError, RouteStructureError
from syntharena_routes.ir.route import RouteVisualizationNode, check_depth


@dataclass
class RouteNodeRecord:
    id: str
    parent_id: str | None
    smiles: str
    inchikey: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RouteNodeRecord:
        node_id = data.get("id")
        parent_id = data.get("parentId", data.get("parent_id"))
        smiles = data.get("smiles")
        inchikey = data.get("inchikey")
        if not isinstance(node_id, str) or not isinstance(smiles, str) or not isinstance(inchikey, str):
            raise RouteFormatError(
                "route node record requires string 'id', 'smiles' and 'inchikey'",
                context={"id": node_id},
            )
        if parent_id is not None and not isinstance(parent_id, str):
            raise RouteFormatError("route node record 'parentId' must be a string or null", context={"id": node_id})
        return cls(id=node_id, parent_id=parent_id, smiles=smiles, inchikey=inchikey)


class RouteGraphIR:
    """A single route held as a rooted tree in a networkx DiGraph.

    Edges point from parent to child. Each node stores its molecule in the
    ``smiles``/``inchikey`` attributes and its position among its siblings in
    ``order``.
    """

    def __init__(self, digraph: nx.DiGraph, root: str) -> None:
        self.digraph = digraph
        self.root = root

    @classmethod
    def from_records(cls, records: Iterable[RouteNodeRecord]) -> RouteGraphIR:
        """Build and validate a route graph from flat node records.

        Raises:
            RouteStructureError: If the records do not form exactly one tree.
        """
        records = list(records)
        digraph: nx.DiGraph = nx.DiGraph()
        roots: list[str] = []

        for record in records:
            if record.id in digraph:
                raise RouteStructureError(f"duplicate route node id '{record.id}'", context={"id": record.id})
            digraph.add_node(record.id, smiles=record.smiles, inchikey=record.inchikey, order=0)
            if record.parent_id is None:
                roots.append(record.id)

        if not roots:
            raise RouteStructureError("no root node found in route nodes")
        if len(roots) > 1:
            raise RouteStructureError("route has more than one root node", context={"roots": roots})

        child_counts: dict[str, int] = {}
        for record in records:
            if record.parent_id is None:
                continue
            if record.parent_id not in digraph:
                raise RouteStructureError(
                    f"route node '{record.id}' references unknown parent '{record.parent_id}'",
                    context={"id": record.id, "parent_id": record.parent_id},
                )
            order = child_counts.get(record.parent_id, 0)
            child_counts[record.parent_id] = order + 1
            digraph.nodes[record.id]["order"] = order
            digraph.add_edge(record.parent_id, record.id)

        if not nx.is_arborescence(digraph):
            raise RouteStructureError("route nodes contain a cycle or a disconnected branch")

        return cls(digraph=digraph, root=roots[0])

    @classmethod
    def from_route(cls, route: RouteVisualizationNode, max_depth: int = MAX_ROUTE_DEPTH) -> RouteGraphIR:
        """Build a route graph from a nested tree, using path ids ("0", "0-1", ...)."""
        digraph: nx.DiGraph = nx.DiGraph()
        stack: list[tuple[RouteVisualizationNode, str, str | None, int, int]] = [(route, "0", None, 0, 0)]
        while stack:
            node, node_id, parent_id, order, depth = stack.pop()
            check_depth(depth, max_depth)
            digraph.add_node(node_id, smiles=node.smiles, inchikey=node.inchikey, order=order)
            if parent_id is not None:
                digraph.add_edge(parent_id, node_id)
            for index, child in enumerate(node.children):
                stack.append((child, f"{node_id}-{index}", node_id, index, depth + 1))
        return cls(digraph=digraph, root="0")

    def to_route(self, max_depth: int = MAX_ROUTE_DEPTH) -> RouteVisualizationNode:
        return self._build_node(self.root, 0, max_depth)

    def _build_node(self, node_id: str, depth: int, max_depth: int) -> RouteVisualizationNode:
        check_depth(depth, max_depth)
        attrs = self.digraph.nodes[node_id]
        children = sorted(self.digraph.successors(node_id), key=lambda n: self.digraph.nodes[n]["order"])
        return RouteVisualizationNode(
            smiles=attrs["smiles"],
            inchikey=attrs["inchikey"],
            children=[self._build_node(child, depth + 1, max_depth) for child in children],
        )

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def depth(self) -> int:
        """Number of reaction steps on the longest root-to-leaf path."""
        return nx.dag_longest_path_length(self.digraph)

    def leaf_inchikeys(self) -> set[str]:
        return {self.digraph.nodes[n]["inchikey"] for n in self.digraph.nodes if self.digraph.out_degree(n) == 0}

    def inchikeys(self) -> set[str]:
        return {data["inchikey"] for _, data in self.digraph.nodes(data=True)}

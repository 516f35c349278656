"""Single-route graph builder with stock and vendor annotations."""

from __future__ import annotations

from typing import Mapping

from syntharena_routes.builders.types import MoleculeNodeData, RouteGraph, flow_edges, flow_node
from syntharena_routes.config import LayoutConfig, resolve_config
from syntharena_routes.ir.route import BuyableMetadata, RouteVisualizationNode, collect_inchikeys
from syntharena_routes.layout.tree import layout_tree
from syntharena_routes.types import NodeStatus


def build_route_graph(
    route: RouteVisualizationNode,
    in_stock_inchikeys: set[str],
    id_prefix: str,
    buyables: Mapping[str, BuyableMetadata] | None = None,
    config: LayoutConfig | None = None,
) -> RouteGraph:
    """Lay out ``route`` and mark each molecule as in stock or not.

    Vendor metadata is attached for molecules found in ``buyables``; a
    molecule without a listing simply has no price/source/lead time/link.
    """
    layout = layout_tree(route, id_prefix, config)

    nodes = []
    for layout_node in layout.nodes:
        in_stock = layout_node.inchikey in in_stock_inchikeys
        data = MoleculeNodeData(
            smiles=layout_node.smiles,
            status=NodeStatus.InStock if in_stock else NodeStatus.Default,
            in_stock=in_stock,
        )
        metadata = buyables.get(layout_node.inchikey) if buyables else None
        if metadata is not None:
            data.ppg = metadata.ppg
            data.source = metadata.source
            data.lead_time = metadata.lead_time
            data.link = metadata.link
        nodes.append(flow_node(layout_node, data))

    return RouteGraph(nodes=nodes, edges=flow_edges(layout.edges, f"{id_prefix}edge-"))


def get_all_route_inchikeys_set(route: RouteVisualizationNode, config: LayoutConfig | None = None) -> set[str]:
    """Distinct InChIKeys of a route, for a single batched stock lookup."""
    keys: set[str] = set()
    collect_inchikeys(route, keys, resolve_config(config).max_depth)
    return keys

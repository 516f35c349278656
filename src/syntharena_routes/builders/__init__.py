"""Render-ready graph builders for single routes and route comparisons."""

from syntharena_routes.builders.comparison import (
    build_diff_overlay_graph,
    build_prediction_diff_overlay_graph,
    build_prediction_side_by_side_graph,
    build_side_by_side_graph,
    build_side_by_side_pair,
    merge_route_roots,
    merge_route_trees,
)
from syntharena_routes.builders.route import build_route_graph, get_all_route_inchikeys_set
from syntharena_routes.builders.types import FlowEdge, FlowNode, MoleculeNodeData, RouteGraph

__all__ = [
    "FlowEdge",
    "FlowNode",
    "MoleculeNodeData",
    "RouteGraph",
    "build_diff_overlay_graph",
    "build_prediction_diff_overlay_graph",
    "build_prediction_side_by_side_graph",
    "build_route_graph",
    "build_side_by_side_graph",
    "build_side_by_side_pair",
    "get_all_route_inchikeys_set",
    "merge_route_roots",
    "merge_route_trees",
]

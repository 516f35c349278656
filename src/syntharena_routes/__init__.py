"""syntharena-routes: layout and comparison of retrosynthesis route trees."""

from syntharena_routes.builders import (
    RouteGraph,
    build_diff_overlay_graph,
    build_prediction_diff_overlay_graph,
    build_prediction_side_by_side_graph,
    build_route_graph,
    build_side_by_side_graph,
    build_side_by_side_pair,
    get_all_route_inchikeys_set,
)
from syntharena_routes.config import (
    HORIZONTAL_SPACING,
    LAYOUT_CONFIG,
    NODE_HEIGHT,
    NODE_WIDTH,
    VERTICAL_SPACING,
    LayoutConfig,
)
from syntharena_routes.ir import BuyableMetadata, MergedRouteNode, RouteVisualizationNode
from syntharena_routes.layout import layout_tree
from syntharena_routes.types import NodeStatus

__all__ = [
    "HORIZONTAL_SPACING",
    "LAYOUT_CONFIG",
    "NODE_HEIGHT",
    "NODE_WIDTH",
    "VERTICAL_SPACING",
    "BuyableMetadata",
    "LayoutConfig",
    "MergedRouteNode",
    "NodeStatus",
    "RouteGraph",
    "RouteVisualizationNode",
    "build_diff_overlay_graph",
    "build_prediction_diff_overlay_graph",
    "build_prediction_side_by_side_graph",
    "build_route_graph",
    "build_side_by_side_graph",
    "build_side_by_side_pair",
    "get_all_route_inchikeys_set",
    "layout_tree",
]

"""Route tree layout: public API."""

from __future__ import annotations

from syntharena_routes.layout.tree import (
    assign_positions,
    build_layout_tree,
    build_merged_layout_tree,
    calculate_subtree_width,
    child_id,
    flatten_layout_tree,
    layout_forest,
    layout_tree,
    root_id,
)
from syntharena_routes.layout.types import LayoutEdge, LayoutNode, Point, TreeLayout

__all__ = [
    "LayoutEdge",
    "LayoutNode",
    "Point",
    "TreeLayout",
    "assign_positions",
    "build_layout_tree",
    "build_merged_layout_tree",
    "calculate_subtree_width",
    "child_id",
    "flatten_layout_tree",
    "layout_forest",
    "layout_tree",
    "root_id",
]

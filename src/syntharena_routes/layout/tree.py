"""Tidy tree layout for route visualization.

Two depth-first passes over a freshly built LayoutNode tree:
  1. Width (post-order): a leaf is one node wide; an internal node is as wide
     as its children side by side, but never narrower than a node.
  2. Position (pre-order): each node is centered within its allocated width and
     its children are placed left to right inside that span.

The result is flattened into pre-ordered nodes and parent-to-child edges.
"""

from __future__ import annotations

import logging

from syntharena_routes.config import LayoutConfig, resolve_config
from syntharena_routes.ir.route import MergedRouteNode, RouteVisualizationNode, check_depth
from syntharena_routes.layout.types import LayoutEdge, LayoutNode, TreeLayout

logger = logging.getLogger(__name__)


def root_id(id_prefix: str, index: int = 0) -> str:
    return f"{id_prefix}{index}"


def child_id(parent_id: str, index: int) -> str:
    return f"{parent_id}-{index}"


# ─── Tree construction ───────────────────────────────────────────────────────


def build_layout_tree(
    route: RouteVisualizationNode,
    node_id: str,
    config: LayoutConfig | None = None,
    _depth: int = 0,
) -> LayoutNode:
    """Build a LayoutNode tree with path ids derived from ``node_id``.

    Ids depend only on the tree shape, never on SMILES or InChIKeys, so
    repeated molecules still get distinct ids.
    """
    cfg = resolve_config(config)
    check_depth(_depth, cfg.max_depth)
    return LayoutNode(
        id=node_id,
        smiles=route.smiles,
        inchikey=route.inchikey,
        children=[
            build_layout_tree(child, child_id(node_id, index), cfg, _depth + 1)
            for index, child in enumerate(route.children)
        ],
    )


def build_merged_layout_tree(
    merged: MergedRouteNode,
    node_id: str,
    config: LayoutConfig | None = None,
    _depth: int = 0,
) -> LayoutNode:
    """Build a LayoutNode tree from a merged tree, keeping each node's status."""
    cfg = resolve_config(config)
    check_depth(_depth, cfg.max_depth)
    return LayoutNode(
        id=node_id,
        smiles=merged.smiles,
        inchikey=merged.inchikey,
        status=merged.status,
        children=[
            build_merged_layout_tree(child, child_id(node_id, index), cfg, _depth + 1)
            for index, child in enumerate(merged.children)
        ],
    )


# ─── Width and position passes ───────────────────────────────────────────────


def calculate_subtree_width(node: LayoutNode, config: LayoutConfig | None = None) -> float:
    """Set ``width`` on every node of the subtree and return the root's width."""
    cfg = resolve_config(config)
    if node.is_leaf:
        node.width = cfg.node_width
        return node.width

    children_width = sum(calculate_subtree_width(child, cfg) for child in node.children)
    total = children_width + (len(node.children) - 1) * cfg.horizontal_spacing
    node.width = max(cfg.node_width, total)
    return node.width


def assign_positions(node: LayoutNode, x: float, y: float, config: LayoutConfig | None = None) -> None:
    """Place ``node`` in the span starting at ``x`` and its subtree below it.

    Requires ``calculate_subtree_width`` to have run on the subtree.
    """
    cfg = resolve_config(config)
    node.x = x + (node.width - cfg.node_width) / 2
    node.y = float(y)

    current_x = x
    for child in node.children:
        assign_positions(child, current_x, y + cfg.level_height, cfg)
        current_x += child.width + cfg.horizontal_spacing


# ─── Flattening ──────────────────────────────────────────────────────────────


def flatten_layout_tree(
    node: LayoutNode,
    result: TreeLayout,
    parent_id: str | None = None,
    parent_is_ghost: bool = False,
) -> TreeLayout:
    """Append the subtree to ``result`` in pre-order.

    An edge is ghost when its child is dashed (ghost / pred-2-only) or when an
    edge above it already is, so a missing subtree renders dashed throughout.
    """
    is_ghost = parent_is_ghost or (node.status is not None and node.status.is_dashed)
    result.nodes.append(node)
    if parent_id is not None:
        result.edges.append(LayoutEdge(source=parent_id, target=node.id, is_ghost=is_ghost))
    for child in node.children:
        flatten_layout_tree(child, result, node.id, is_ghost)
    return result


def layout_forest(roots: list[LayoutNode], config: LayoutConfig | None = None) -> TreeLayout:
    """Lay out built LayoutNode trees left to right on a shared top row."""
    cfg = resolve_config(config)
    result = TreeLayout()
    current_x: float = 0
    for root in roots:
        calculate_subtree_width(root, cfg)
        assign_positions(root, current_x, 0, cfg)
        flatten_layout_tree(root, result)
        current_x += root.width + cfg.horizontal_spacing
    return result


def layout_tree(route: RouteVisualizationNode, id_prefix: str, config: LayoutConfig | None = None) -> TreeLayout:
    """Complete layout pipeline for a single route tree."""
    cfg = resolve_config(config)
    root = build_layout_tree(route, root_id(id_prefix), cfg)
    result = layout_forest([root], cfg)
    logger.debug("laid out route %r: %d nodes, width %s", id_prefix, len(result.nodes), root.width)
    return result

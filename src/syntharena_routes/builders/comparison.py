"""Graph builders for comparing two routes.

Side-by-side: each route is laid out on its own and every node is tagged by
whether its InChIKey occurs anywhere in the other route.

Diff overlay: the two routes are merged into one tree, children paired by
InChIKey, and laid out once. Ghost statuses dash the edge into the node and
every edge below it.
"""

from __future__ import annotations

import logging
from typing import Callable

from syntharena_routes.builders.types import MoleculeNodeData, RouteGraph, flow_edges, flow_node
from syntharena_routes.config import LayoutConfig, resolve_config
from syntharena_routes.ir.route import MergedRouteNode, RouteVisualizationNode, check_depth, collect_inchikeys
from syntharena_routes.layout.tree import build_merged_layout_tree, layout_forest, layout_tree, root_id
from syntharena_routes.layout.types import TreeLayout
from syntharena_routes.types import DIFF_STATUSES, PREDICTION_STATUSES, NodeStatus, StatusScheme

logger = logging.getLogger(__name__)

DIFF_ID_PREFIX = "diff_"
DIFF_EDGE_PREFIX = "diff-edge-"
PRED_DIFF_ID_PREFIX = "diff_pred_"
PRED_DIFF_EDGE_PREFIX = "diff-pred-edge-"


def _in_stock(inchikey: str, in_stock_inchikeys: set[str] | None) -> bool | None:
    if in_stock_inchikeys is None:
        return None
    return inchikey in in_stock_inchikeys


def _route_keys(route: RouteVisualizationNode | None, cfg: LayoutConfig) -> set[str]:
    keys: set[str] = set()
    if route is not None:
        collect_inchikeys(route, keys, cfg.max_depth)
    return keys


def _classified_graph(
    layout: TreeLayout,
    id_prefix: str,
    status_of: Callable[[str], NodeStatus],
    in_stock_inchikeys: set[str] | None,
) -> RouteGraph:
    leaf_ids = layout.leaf_ids()
    nodes = [
        flow_node(
            node,
            MoleculeNodeData(
                smiles=node.smiles,
                status=status_of(node.inchikey),
                is_leaf=node.id in leaf_ids,
                in_stock=_in_stock(node.inchikey, in_stock_inchikeys),
            ),
        )
        for node in layout.nodes
    ]
    return RouteGraph(nodes=nodes, edges=flow_edges(layout.edges, f"{id_prefix}edge-"))


# ─── Side-by-side ────────────────────────────────────────────────────────────


def build_side_by_side_graph(
    route: RouteVisualizationNode,
    gt_inchikeys: set[str],
    is_ground_truth: bool,
    id_prefix: str,
    in_stock_inchikeys: set[str] | None = None,
    config: LayoutConfig | None = None,
) -> RouteGraph:
    """Build one panel of a ground truth vs. prediction side-by-side view.

    The ground truth panel shows every node as ``match``. The prediction panel
    marks nodes ``match`` when their InChIKey is in ``gt_inchikeys`` and
    ``extension`` otherwise, and carries leaf and stock flags.
    """
    layout = layout_tree(route, id_prefix, config)

    if is_ground_truth:
        nodes = [
            flow_node(node, MoleculeNodeData(smiles=node.smiles, status=NodeStatus.Match)) for node in layout.nodes
        ]
        return RouteGraph(nodes=nodes, edges=flow_edges(layout.edges, f"{id_prefix}edge-"))

    def status_of(inchikey: str) -> NodeStatus:
        return NodeStatus.Match if inchikey in gt_inchikeys else NodeStatus.Extension

    return _classified_graph(layout, id_prefix, status_of, in_stock_inchikeys)


def build_prediction_side_by_side_graph(
    route: RouteVisualizationNode,
    pred1_inchikeys: set[str],
    pred2_inchikeys: set[str],
    is_first_route: bool,
    id_prefix: str,
    in_stock_inchikeys: set[str] | None = None,
    config: LayoutConfig | None = None,
) -> RouteGraph:
    """Build one panel of a prediction vs. prediction side-by-side view."""
    layout = layout_tree(route, id_prefix, config)
    other_keys = pred2_inchikeys if is_first_route else pred1_inchikeys
    own_status = NodeStatus.Pred1Only if is_first_route else NodeStatus.Pred2Only

    def status_of(inchikey: str) -> NodeStatus:
        return NodeStatus.PredShared if inchikey in other_keys else own_status

    return _classified_graph(layout, id_prefix, status_of, in_stock_inchikeys)


def build_side_by_side_pair(
    left: RouteVisualizationNode,
    right: RouteVisualizationNode,
    in_stock_inchikeys: set[str] | None = None,
    prediction_mode: bool = False,
    config: LayoutConfig | None = None,
) -> tuple[RouteGraph, RouteGraph]:
    """Build both panels, computing each route's InChIKey set once.

    ``left`` is the ground truth (or prediction 1 in ``prediction_mode``),
    ``right`` the prediction (or prediction 2).
    """
    cfg = resolve_config(config)
    left_keys = _route_keys(left, cfg)
    right_keys = _route_keys(right, cfg)
    if prediction_mode:
        return (
            build_prediction_side_by_side_graph(left, left_keys, right_keys, True, "pred1_", in_stock_inchikeys, cfg),
            build_prediction_side_by_side_graph(right, left_keys, right_keys, False, "pred2_", in_stock_inchikeys, cfg),
        )
    return (
        build_side_by_side_graph(left, left_keys, True, "gt_", in_stock_inchikeys, cfg),
        build_side_by_side_graph(right, left_keys, False, "pred_", in_stock_inchikeys, cfg),
    )


# ─── Merge ───────────────────────────────────────────────────────────────────


def merge_route_trees(
    primary: RouteVisualizationNode | None,
    secondary: RouteVisualizationNode | None,
    primary_keys: set[str],
    secondary_keys: set[str],
    scheme: StatusScheme = DIFF_STATUSES,
    config: LayoutConfig | None = None,
    _depth: int = 0,
) -> MergedRouteNode | None:
    """Merge two nodes at the same position into one annotated subtree.

    ``primary`` is the prediction (or prediction 1): its molecule is used when
    present and its children come first. Each primary child is paired with the
    first secondary sibling sharing its InChIKey; only the first primary
    sibling with a given InChIKey gets a partner, later duplicates merge alone.
    Unpaired secondary children follow. No molecule is dropped.
    """
    if primary is None and secondary is None:
        return None
    cfg = resolve_config(config)
    check_depth(_depth, cfg.max_depth)

    identity = primary if primary is not None else secondary
    status = scheme.classify(identity.inchikey, primary_keys, secondary_keys)

    primary_children = primary.children if primary is not None else []
    secondary_children = secondary.children if secondary is not None else []

    children: list[MergedRouteNode] = []
    paired: set[int] = set()
    seen: set[str] = set()
    for child in primary_children:
        partner = None
        if child.inchikey not in seen:
            seen.add(child.inchikey)
            for index, candidate in enumerate(secondary_children):
                if candidate.inchikey == child.inchikey:
                    partner = candidate
                    paired.add(index)
                    break
        children.append(merge_route_trees(child, partner, primary_keys, secondary_keys, scheme, cfg, _depth + 1))

    for index, child in enumerate(secondary_children):
        if index not in paired:
            children.append(merge_route_trees(None, child, primary_keys, secondary_keys, scheme, cfg, _depth + 1))

    return MergedRouteNode(smiles=identity.smiles, inchikey=identity.inchikey, status=status, children=children)


def merge_route_roots(
    primary: RouteVisualizationNode | None,
    secondary: RouteVisualizationNode | None,
    primary_keys: set[str],
    secondary_keys: set[str],
    scheme: StatusScheme = DIFF_STATUSES,
    config: LayoutConfig | None = None,
) -> list[MergedRouteNode]:
    """Merge two whole routes.

    Routes for the same target share a root and yield one merged tree. Roots
    with different InChIKeys are kept apart, giving two trees.
    """
    if primary is not None and secondary is not None and primary.inchikey != secondary.inchikey:
        pairs = [(primary, None), (None, secondary)]
    else:
        pairs = [(primary, secondary)]

    roots = []
    for p, s in pairs:
        merged = merge_route_trees(p, s, primary_keys, secondary_keys, scheme, config)
        if merged is not None:
            roots.append(merged)
    return roots


# ─── Diff overlay ────────────────────────────────────────────────────────────


def _overlay_graph(
    primary: RouteVisualizationNode | None,
    secondary: RouteVisualizationNode | None,
    scheme: StatusScheme,
    id_prefix: str,
    edge_prefix: str,
    in_stock_inchikeys: set[str] | None,
    config: LayoutConfig | None,
) -> RouteGraph:
    cfg = resolve_config(config)
    primary_keys = _route_keys(primary, cfg)
    secondary_keys = _route_keys(secondary, cfg)

    merged_roots = merge_route_roots(primary, secondary, primary_keys, secondary_keys, scheme, cfg)
    if not merged_roots:
        return RouteGraph()

    layout_roots = [
        build_merged_layout_tree(merged, root_id(id_prefix, index), cfg) for index, merged in enumerate(merged_roots)
    ]
    layout = layout_forest(layout_roots, cfg)
    logger.debug("diff overlay %r: %d merged nodes in %d tree(s)", id_prefix, len(layout.nodes), len(layout_roots))

    nodes = [
        flow_node(
            node,
            MoleculeNodeData(
                smiles=node.smiles,
                status=node.status,
                is_leaf=node.is_leaf,
                in_stock=_in_stock(node.inchikey, in_stock_inchikeys),
            ),
        )
        for node in layout.nodes
    ]
    return RouteGraph(nodes=nodes, edges=flow_edges(layout.edges, edge_prefix))


def build_diff_overlay_graph(
    gt_route: RouteVisualizationNode | None,
    pred_route: RouteVisualizationNode | None,
    in_stock_inchikeys: set[str] | None = None,
    config: LayoutConfig | None = None,
) -> RouteGraph:
    """Overlay a prediction on its ground truth route.

    Nodes are ``match`` (in both routes), ``extension`` (prediction only) or
    ``ghost`` (ground truth only). Two missing routes give an empty graph.
    """
    return _overlay_graph(
        pred_route, gt_route, DIFF_STATUSES, DIFF_ID_PREFIX, DIFF_EDGE_PREFIX, in_stock_inchikeys, config
    )


def build_prediction_diff_overlay_graph(
    pred1_route: RouteVisualizationNode | None,
    pred2_route: RouteVisualizationNode | None,
    in_stock_inchikeys: set[str] | None = None,
    config: LayoutConfig | None = None,
) -> RouteGraph:
    """Overlay two predicted routes: ``pred-shared``, ``pred-1-only``, ``pred-2-only``."""
    return _overlay_graph(
        pred1_route,
        pred2_route,
        PREDICTION_STATUSES,
        PRED_DIFF_ID_PREFIX,
        PRED_DIFF_EDGE_PREFIX,
        in_stock_inchikeys,
        config,
    )

"""Shared type definitions for syntharena-routes.

Enums and small value types used across the IR, layout, and graph builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeStatus(Enum):
    Default = "default"
    InStock = "in-stock"
    Match = "match"  # in both routes (or ground truth side)
    Extension = "extension"  # prediction only
    Ghost = "ghost"  # ground truth only
    PredShared = "pred-shared"
    Pred1Only = "pred-1-only"
    Pred2Only = "pred-2-only"

    @property
    def is_dashed(self) -> bool:
        return self in (NodeStatus.Ghost, NodeStatus.Pred2Only)


@dataclass(frozen=True)
class StatusScheme:
    """Statuses assigned by a two-route merge.

    The primary route is the one whose node identity is preferred (the
    prediction, or prediction 1); the secondary is the reference it is
    compared against.
    """

    both: NodeStatus
    primary_only: NodeStatus
    secondary_only: NodeStatus

    def classify(self, inchikey: str, primary_keys: set[str], secondary_keys: set[str]) -> NodeStatus:
        in_primary = inchikey in primary_keys
        if in_primary and inchikey in secondary_keys:
            return self.both
        if in_primary:
            return self.primary_only
        return self.secondary_only


DIFF_STATUSES = StatusScheme(NodeStatus.Match, NodeStatus.Extension, NodeStatus.Ghost)
PREDICTION_STATUSES = StatusScheme(NodeStatus.PredShared, NodeStatus.Pred1Only, NodeStatus.Pred2Only)


@dataclass(frozen=True)
class EdgeStyle:
    stroke: str
    stroke_width: int = 2
    stroke_dasharray: str | None = None

    def to_dict(self) -> dict[str, object]:
        style: dict[str, object] = {"stroke": self.stroke, "strokeWidth": self.stroke_width}
        if self.stroke_dasharray is not None:
            style["strokeDasharray"] = self.stroke_dasharray
        return style


DEFAULT_EDGE_STYLE = EdgeStyle(stroke="#94a3b8")
GHOST_EDGE_STYLE = EdgeStyle(stroke="#9ca3af", stroke_dasharray="5,5")

MOLECULE_NODE_TYPE = "molecule"

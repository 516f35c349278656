"""Intermediate representation: route trees and flat route graphs."""

from syntharena_routes.ir.graph import RouteGraphIR, RouteNodeRecord
from syntharena_routes.ir.route import (
    BuyableMetadata,
    MergedRouteNode,
    RouteVisualizationNode,
    collect_inchikeys,
    collect_smiles,
)

__all__ = [
    "BuyableMetadata",
    "MergedRouteNode",
    "RouteGraphIR",
    "RouteNodeRecord",
    "RouteVisualizationNode",
    "collect_inchikeys",
    "collect_smiles",
]

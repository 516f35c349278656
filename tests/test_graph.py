"""Tests for ir.graph — rebuilding route trees from flat node records."""

from __future__ import annotations

import networkx as nx
import pytest

from syntharena_routes.errors import RouteStructureError
from syntharena_routes.ir.graph import RouteGraphIR, RouteNodeRecord
from syntharena_routes.ir.route import RouteVisualizationNode


def rec(node_id: str, parent_id: str | None, smiles: str | None = None) -> RouteNodeRecord:
    smiles = smiles or node_id.upper()
    return RouteNodeRecord(id=node_id, parent_id=parent_id, smiles=smiles, inchikey=f"KEY-{smiles}")


class TestFromRecords:
    def test_single_root(self):
        gir = RouteGraphIR.from_records([rec("a", None)])
        assert gir.node_count() == 1
        assert gir.edge_count() == 0
        assert gir.depth() == 0
        assert gir.to_route() == RouteVisualizationNode(smiles="A", inchikey="KEY-A")

    def test_tree_in_any_record_order(self):
        gir = RouteGraphIR.from_records([rec("c", "a"), rec("a", None), rec("d", "c"), rec("b", "a")])
        route = gir.to_route()
        assert route.smiles == "A"
        # siblings keep record order
        assert [c.smiles for c in route.children] == ["C", "B"]
        assert route.children[0].children[0].smiles == "D"
        assert gir.depth() == 2
        assert gir.leaf_inchikeys() == {"KEY-B", "KEY-D"}
        assert gir.inchikeys() == {"KEY-A", "KEY-B", "KEY-C", "KEY-D"}

    def test_repeated_molecules_are_distinct_nodes(self):
        gir = RouteGraphIR.from_records([rec("r", None, "A"), rec("x1", "r", "B"), rec("x2", "r", "B")])
        assert gir.node_count() == 3
        assert len(gir.to_route().children) == 2

    def test_no_root(self):
        with pytest.raises(RouteStructureError, match="no root"):
            RouteGraphIR.from_records([rec("a", "b"), rec("b", "a")])

    def test_empty(self):
        with pytest.raises(RouteStructureError):
            RouteGraphIR.from_records([])

    def test_two_roots(self):
        with pytest.raises(RouteStructureError, match="more than one root"):
            RouteGraphIR.from_records([rec("a", None), rec("b", None)])

    def test_unknown_parent(self):
        with pytest.raises(RouteStructureError) as excinfo:
            RouteGraphIR.from_records([rec("a", None), rec("b", "zzz")])
        assert excinfo.value.context["parent_id"] == "zzz"

    def test_cycle_detached_from_root(self):
        with pytest.raises(RouteStructureError, match="cycle"):
            RouteGraphIR.from_records([rec("a", None), rec("b", "c"), rec("c", "b")])

    def test_duplicate_ids(self):
        with pytest.raises(RouteStructureError, match="duplicate"):
            RouteGraphIR.from_records([rec("a", None), rec("a", None)])


class TestFromRoute:
    def test_path_ids_and_round_trip(self):
        route = RouteVisualizationNode(
            "A", "KA", [RouteVisualizationNode("B", "KB", [RouteVisualizationNode("D", "KD")]), RouteVisualizationNode("C", "KC")]
        )
        gir = RouteGraphIR.from_route(route)
        assert set(gir.digraph.nodes) == {"0", "0-0", "0-0-0", "0-1"}
        assert nx.is_arborescence(gir.digraph)
        assert gir.to_route() == route

    def test_record_from_dict(self):
        record = RouteNodeRecord.from_dict({"id": "n1", "parentId": None, "smiles": "C", "inchikey": "K"})
        assert record == RouteNodeRecord(id="n1", parent_id=None, smiles="C", inchikey="K")

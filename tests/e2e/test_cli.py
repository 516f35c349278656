"""End-to-end CLI tests: route files in, graph JSON out."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from syntharena_routes.__main__ import main

GROUND_TRUTH = {
    "smiles": "A",
    "inchikey": "KEY-A",
    "children": [{"smiles": "B", "inchikey": "KEY-B"}, {"smiles": "C", "inchikey": "KEY-C"}],
}
PREDICTION = {
    "nodes": [
        {"id": "n0", "parentId": None, "smiles": "A", "inchikey": "KEY-A"},
        {"id": "n1", "parentId": "n0", "smiles": "B", "inchikey": "KEY-B"},
        {"id": "n2", "parentId": "n0", "smiles": "D", "inchikey": "KEY-D"},
    ]
}


@pytest.fixture
def files(tmp_path):
    gt = tmp_path / "gt.json"
    gt.write_text(json.dumps(GROUND_TRUTH))
    pred = tmp_path / "pred.json"
    pred.write_text(json.dumps(PREDICTION))
    stock = tmp_path / "stock.txt"
    stock.write_text("# building blocks\nKEY-B\n\nKEY-D\n")
    buyables = tmp_path / "buyables.json"
    buyables.write_text(json.dumps({"KEY-B": {"ppg": 4.5, "source": "Enamine", "leadTime": "5 days"}}))
    return {"gt": str(gt), "pred": str(pred), "stock": str(stock), "buyables": str(buyables), "dir": tmp_path}


def run(*args: str):
    return CliRunner().invoke(main, list(args))


class TestRouteMode:
    def test_route_json(self, files):
        result = run(files["gt"], "--stock", files["stock"], "--buyables", files["buyables"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [n["id"] for n in data["nodes"]] == ["route-0", "route-0-0", "route-0-1"]
        b = data["nodes"][1]["data"]
        assert b == {"smiles": "B", "status": "in-stock", "inStock": True, "ppg": 4.5, "source": "Enamine", "leadTime": "5 days"}
        assert len(data["edges"]) == 2

    def test_custom_prefix(self, files):
        result = run(files["gt"], "--prefix", "x_")
        assert json.loads(result.output)["edges"][0]["id"] == "x_edge-0"

    def test_flat_records_input(self, files):
        result = run(files["pred"])
        assert result.exit_code == 0
        assert [n["data"]["smiles"] for n in json.loads(result.output)["nodes"]] == ["A", "B", "D"]

    def test_output_file(self, files):
        out = files["dir"] / "out.json"
        result = run(files["gt"], "-o", str(out), "--indent", "2")
        assert result.exit_code == 0
        assert result.output == ""
        assert len(json.loads(out.read_text())["nodes"]) == 3

    def test_rejects_second_route(self, files):
        result = run(files["gt"], files["pred"])
        assert result.exit_code == 1
        assert "single route" in result.output


class TestComparisonModes:
    def test_overlay(self, files):
        result = run(files["gt"], files["pred"], "--mode", "overlay")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert {n["data"]["smiles"]: n["data"]["status"] for n in data["nodes"]} == {
            "A": "match",
            "B": "match",
            "D": "extension",
            "C": "ghost",
        }
        dashed = [e for e in data["edges"] if "strokeDasharray" in e["style"]]
        assert len(dashed) == 1

    def test_prediction_overlay(self, files):
        result = run(files["gt"], files["pred"], "--mode", "overlay", "--predictions")
        statuses = {n["data"]["smiles"]: n["data"]["status"] for n in json.loads(result.output)["nodes"]}
        assert statuses["C"] == "pred-1-only"
        assert statuses["D"] == "pred-2-only"

    def test_side_by_side(self, files):
        result = run(files["gt"], files["pred"], "-m", "side-by-side", "--stock", files["stock"])
        data = json.loads(result.output)
        assert set(data) == {"left", "right"}
        right = {n["data"]["smiles"]: n["data"] for n in data["right"]["nodes"]}
        assert right["D"]["status"] == "extension"
        assert right["D"]["inStock"] is True
        assert right["D"]["isLeaf"] is True

    def test_needs_two_routes(self, files):
        result = run(files["gt"], "--mode", "overlay")
        assert result.exit_code == 1
        assert "needs two route files" in result.output

    def test_buyables_only_in_route_mode(self, files):
        result = run(files["gt"], files["pred"], "--mode", "overlay", "--buyables", files["buyables"])
        assert result.exit_code == 1


class TestErrors:
    def test_invalid_json(self, files):
        bad = files["dir"] / "bad.json"
        bad.write_text("{not json")
        result = run(str(bad))
        assert result.exit_code == 1
        assert "invalid JSON" in result.output

    def test_malformed_route(self, files):
        bad = files["dir"] / "bad.json"
        bad.write_text(json.dumps({"smiles": "C"}))
        result = run(str(bad))
        assert result.exit_code == 1
        assert "inchikey" in result.output

    def test_broken_record_tree(self, files):
        bad = files["dir"] / "bad.json"
        bad.write_text(json.dumps({"nodes": [{"id": "a", "parentId": "b", "smiles": "C", "inchikey": "K"}]}))
        result = run(str(bad))
        assert result.exit_code == 1
        assert "no root" in result.output

    def test_non_utf8_route(self, files):
        bad = files["dir"] / "bad.json"
        bad.write_bytes(b'{"smiles": "\xff\xfe"}')
        result = run(str(bad))
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

    def test_non_utf8_stock(self, files):
        bad = files["dir"] / "stock.txt"
        bad.write_bytes(b"KEY-B\n\xff\xfe\n")
        result = run(files["gt"], "--stock", str(bad))
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output

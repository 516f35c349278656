"""Tests for types — node statuses and status schemes."""

from syntharena_routes.types import DIFF_STATUSES, PREDICTION_STATUSES, NodeStatus


class TestNodeStatus:
    def test_wire_values(self):
        assert [s.value for s in NodeStatus] == [
            "default",
            "in-stock",
            "match",
            "extension",
            "ghost",
            "pred-shared",
            "pred-1-only",
            "pred-2-only",
        ]

    def test_dashed_statuses(self):
        assert {s for s in NodeStatus if s.is_dashed} == {NodeStatus.Ghost, NodeStatus.Pred2Only}


class TestStatusScheme:
    def test_diff(self):
        assert DIFF_STATUSES.classify("k", {"k"}, {"k"}) == NodeStatus.Match
        assert DIFF_STATUSES.classify("k", {"k"}, set()) == NodeStatus.Extension
        assert DIFF_STATUSES.classify("k", set(), {"k"}) == NodeStatus.Ghost

    def test_prediction(self):
        assert PREDICTION_STATUSES.classify("k", {"k"}, {"k"}) == NodeStatus.PredShared
        assert PREDICTION_STATUSES.classify("k", {"k"}, set()) == NodeStatus.Pred1Only
        assert PREDICTION_STATUSES.classify("k", set(), {"k"}) == NodeStatus.Pred2Only

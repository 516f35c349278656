"""Tests for config — layout defaults and validation."""

from __future__ import annotations

import dataclasses
import sys

import pytest

from syntharena_routes.config import (
    HORIZONTAL_SPACING,
    LAYOUT_CONFIG,
    NODE_HEIGHT,
    NODE_WIDTH,
    VERTICAL_SPACING,
    LayoutConfig,
)


class TestLayoutConfig:
    def test_defaults(self):
        assert (NODE_WIDTH, NODE_HEIGHT, HORIZONTAL_SPACING, VERTICAL_SPACING) == (150, 60, 30, 160)
        assert LAYOUT_CONFIG.node_width == NODE_WIDTH
        assert LAYOUT_CONFIG.level_height == 220

    def test_default_config_is_read_only(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LAYOUT_CONFIG.node_width = 10  # type: ignore[misc]

    def test_spacing_smaller_than_node(self):
        assert HORIZONTAL_SPACING < NODE_WIDTH

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"node_width": 0},
            {"node_height": -1},
            {"horizontal_spacing": -5},
            {"vertical_spacing": -1},
            {"max_depth": 0},
        ],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    def test_rejects_depth_beyond_recursion_limit(self):
        with pytest.raises(ValueError, match="recursion limit"):
            LayoutConfig(max_depth=sys.getrecursionlimit())

    def test_default_depth_fits_recursion_limit(self):
        assert LayoutConfig(max_depth=LAYOUT_CONFIG.max_depth).max_depth == 256

    def test_zero_spacing_allowed(self):
        assert LayoutConfig(horizontal_spacing=0, vertical_spacing=0).level_height == NODE_HEIGHT

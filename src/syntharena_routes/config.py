"""Centralized layout configuration for route visualization."""

from __future__ import annotations

import sys
from dataclasses import dataclass

# Pixel defaults used by the graph renderer.
NODE_WIDTH: int = 150
NODE_HEIGHT: int = 60
HORIZONTAL_SPACING: int = 30
VERTICAL_SPACING: int = 160

MAX_ROUTE_DEPTH: int = 256

# Stack frames per tree level in the recursive passes (call + comprehension),
# plus headroom for the caller's own frames.
_FRAMES_PER_LEVEL = 2
_STACK_HEADROOM = 100


@dataclass(frozen=True)
class LayoutConfig:
    """Node dimensions and spacing for the tree layout."""

    node_width: float = NODE_WIDTH
    node_height: float = NODE_HEIGHT
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING
    max_depth: int = MAX_ROUTE_DEPTH

    def __post_init__(self) -> None:
        if self.node_width <= 0 or self.node_height <= 0:
            raise ValueError("node_width and node_height must be positive")
        if self.horizontal_spacing < 0 or self.vertical_spacing < 0:
            raise ValueError("spacing values must not be negative")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.max_depth * _FRAMES_PER_LEVEL + _STACK_HEADROOM > sys.getrecursionlimit():
            raise ValueError(
                f"max_depth {self.max_depth} exceeds what the recursion limit ({sys.getrecursionlimit()}) allows"
            )

    @property
    def level_height(self) -> float:
        """Vertical distance between two consecutive depth levels."""
        return self.node_height + self.vertical_spacing


LAYOUT_CONFIG = LayoutConfig()


def resolve_config(config: LayoutConfig | None) -> LayoutConfig:
    return LAYOUT_CONFIG if config is None else config

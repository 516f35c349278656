"""Error hierarchy for syntharena-routes."""

from __future__ import annotations

from typing import Any, Mapping


class RouteError(ValueError):
    """Base exception for malformed route input."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context else {}


class RouteDepthError(RouteError):
    """Route tree is deeper than the configured maximum (likely a cycle)."""


class RouteStructureError(RouteError):
    """Flat route records do not form a single rooted tree."""


class RouteFormatError(RouteError):
    """Serialized route data is missing fields or has the wrong types."""


__all__ = [
    "RouteDepthError",
    "RouteError",
    "RouteFormatError",
    "RouteStructureError",
]

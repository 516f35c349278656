"""Read routes, stock lists, and vendor listings from files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from syntharena_routes.config import MAX_ROUTE_DEPTH
from syntharena_routes.errors import RouteFormatError
from syntharena_routes.ir.graph import RouteGraphIR, RouteNodeRecord
from syntharena_routes.ir.route import BuyableMetadata, RouteVisualizationNode

logger = logging.getLogger(__name__)


def _read_text(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RouteFormatError(f"{path}: not valid UTF-8 text") from e


def _read_json(path: str | Path) -> Any:
    text = _read_text(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RouteFormatError(f"{path}: invalid JSON: {e}") from e


def parse_route(data: Any, max_depth: int = MAX_ROUTE_DEPTH) -> RouteVisualizationNode:
    """Parse a nested route object or a ``{"nodes": [...]}`` list of flat records."""
    if isinstance(data, dict) and "nodes" in data and "smiles" not in data:
        raw_nodes = data["nodes"]
        if not isinstance(raw_nodes, list):
            raise RouteFormatError("'nodes' must be a list of route node records")
        records = [RouteNodeRecord.from_dict(raw) for raw in raw_nodes]
        return RouteGraphIR.from_records(records).to_route(max_depth)
    if not isinstance(data, dict):
        raise RouteFormatError("route must be a JSON object")
    return RouteVisualizationNode.from_dict(data, max_depth)


def load_route(path: str | Path, max_depth: int = MAX_ROUTE_DEPTH) -> RouteVisualizationNode:
    route = parse_route(_read_json(path), max_depth)
    logger.debug("loaded route %s rooted at %s", path, route.inchikey)
    return route


def load_inchikeys(path: str | Path) -> set[str]:
    """Read InChIKeys from a JSON array or a text file with one key per line.

    Blank lines and lines starting with ``#`` are ignored in text files.
    """
    text = _read_text(path)
    if text.lstrip().startswith("["):
        try:
            keys = json.loads(text)
        except json.JSONDecodeError as e:
            raise RouteFormatError(f"{path}: invalid JSON: {e}") from e
        if not all(isinstance(key, str) for key in keys):
            raise RouteFormatError(f"{path}: InChIKey list must contain only strings")
        return set(keys)
    keys = set()
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            keys.add(line)
    return keys


def load_buyables(path: str | Path) -> dict[str, BuyableMetadata]:
    data = _read_json(path)
    if not isinstance(data, dict):
        raise RouteFormatError(f"{path}: buyables must be an object keyed by InChIKey")
    buyables: dict[str, BuyableMetadata] = {}
    for inchikey, entry in data.items():
        if not isinstance(entry, dict):
            raise RouteFormatError(f"{path}: buyable entry for {inchikey} must be an object")
        buyables[inchikey] = BuyableMetadata.from_dict(entry)
    return buyables

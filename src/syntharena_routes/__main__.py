"""CLI entry point for syntharena-routes."""

import json
import logging
import sys

import click

from syntharena_routes.builders import (
    build_diff_overlay_graph,
    build_prediction_diff_overlay_graph,
    build_route_graph,
    build_side_by_side_pair,
)
from syntharena_routes.errors import RouteError
from syntharena_routes.loaders import load_buyables, load_inchikeys, load_route

_MODES = ("route", "side-by-side", "overlay")


@click.command()
@click.argument("route", type=click.Path(exists=True, dir_okay=False))
@click.argument("other", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--mode", "-m", type=click.Choice(_MODES), default="route", help="Output to build (default: route)")
@click.option("--predictions", is_flag=True, help="Compare two predictions instead of ground truth vs. prediction")
@click.option("--stock", "stock", type=click.Path(exists=True, dir_okay=False), default=None, help="In-stock InChIKeys")
@click.option("--buyables", "buyables", type=click.Path(exists=True, dir_okay=False), default=None, help="Vendor metadata JSON")
@click.option("--prefix", "prefix", type=str, default="route-", help="Node id prefix for route mode")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--indent", type=int, default=None, help="Indent JSON output by this many spaces")
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr")
def main(
    route: str,
    other: str | None,
    mode: str,
    predictions: bool,
    stock: str | None,
    buyables: str | None,
    prefix: str,
    output: str | None,
    indent: int | None,
    verbose: bool,
) -> None:
    """Lay out retrosynthesis routes as graph JSON (nodes and edges).

    ROUTE is the ground truth (or first prediction); OTHER is the route it is
    compared against in side-by-side and overlay modes.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if mode == "route" and other is not None:
        click.echo("error: route mode takes a single route file", err=True)
        sys.exit(1)
    if mode != "route" and other is None:
        click.echo(f"error: {mode} mode needs two route files", err=True)
        sys.exit(1)
    if buyables is not None and mode != "route":
        click.echo("error: --buyables is only supported in route mode", err=True)
        sys.exit(1)

    try:
        first = load_route(route)
        second = load_route(other) if other is not None else None
        in_stock = load_inchikeys(stock) if stock is not None else None
        metadata = load_buyables(buyables) if buyables is not None else None
    except (OSError, RouteError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if mode == "route":
        result = build_route_graph(first, in_stock or set(), prefix, metadata).to_dict()
    elif mode == "side-by-side":
        left, right = build_side_by_side_pair(first, second, in_stock, prediction_mode=predictions)
        result = {"left": left.to_dict(), "right": right.to_dict()}
    elif predictions:
        result = build_prediction_diff_overlay_graph(first, second, in_stock).to_dict()
    else:
        result = build_diff_overlay_graph(first, second, in_stock).to_dict()

    rendered = json.dumps(result, indent=indent)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()

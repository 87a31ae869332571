"""
json-tree-graph CLI - Main entry point.

Commands:
  build  Print the renderer export (nodes + edges) for a JSON document.
  find   Resolve a path query against a JSON document's graph.

Both read the document from FILE, or from stdin when FILE is omitted or "-".
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

import click

from json_tree_graph import __version__
from json_tree_graph.api import build_graph, copy_path, parse_document, search
from json_tree_graph.errors import InvalidSourceDocumentError
from json_tree_graph.layout.config import DEFAULT_X_STEP, DEFAULT_Y_STEP, LayoutConfig
from json_tree_graph.render import to_flow
from json_tree_graph.resolver import SearchStatus
from json_tree_graph.tree.builder import escape_surrogates

EXIT_NO_MATCH = 1
EXIT_INVALID_DOCUMENT = 2


def _load(source: IO[str]) -> Any:
    try:
        return parse_document(source.read())
    except InvalidSourceDocumentError as exc:
        click.echo(click.style(str(exc), fg="red"), err=True)
        sys.exit(EXIT_INVALID_DOCUMENT)


@click.group()
@click.version_option(__version__, package_name="json-tree-graph")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool) -> None:
    """json-tree-graph: turn JSON documents into positioned node graphs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--x-step", type=float, default=DEFAULT_X_STEP, show_default=True,
              help="Horizontal spacing between slots in a depth tier")
@click.option("--y-step", type=float, default=DEFAULT_Y_STEP, show_default=True,
              help="Vertical spacing between depth tiers")
@click.option("--highlight", default=None, help="Path query of a node to highlight")
@click.option("--indent", type=int, default=2, show_default=True)
def build(source: IO[str], x_step: float, y_step: float,
          highlight: str | None, indent: int) -> None:
    """
    Build the graph for SOURCE and print it as JSON.
    """
    try:
        config = LayoutConfig(x_step=x_step, y_step=y_step)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    graph = build_graph(_load(source), config=config)

    highlight_id = None
    if highlight:
        result = search(highlight, graph.nodes)
        if result.node is None:
            click.echo(click.style(result.message, fg="yellow"), err=True)
        else:
            highlight_id = result.node.id

    flow = to_flow(graph, highlight_id)
    # keys and ids may still hold lone surrogates; escaped they stay valid JSON
    text = json.dumps(flow, indent=indent, ensure_ascii=False)
    click.echo(escape_surrogates(text))


@main.command()
@click.argument("query")
@click.argument("source", type=click.File("r"), default="-")
def find(query: str, source: IO[str]) -> None:
    """
    Resolve QUERY (e.g. "$.user.name" or "items[0].id") in SOURCE.
    Prints the node id, label and copyable path; exits 1 when nothing matches.
    """
    graph = build_graph(_load(source))
    result = search(query, graph.nodes)

    if result.status is SearchStatus.EMPTY:
        return

    if result.node is None:
        click.echo(click.style(result.message, fg="yellow"))
        sys.exit(EXIT_NO_MATCH)

    node = result.node
    node_id = escape_surrogates(node.id)
    click.echo(f"{click.style(result.message, fg='green')}: {node_id}")
    click.echo(f"  label: {escape_surrogates(node.label)}")
    click.echo(f"  kind:  {node.kind}")
    click.echo(f"  path:  {escape_surrogates(copy_path(node.id))}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer

from mstweight.core import compute_mst_weight
from mstweight.errors import MSTError
from mstweight.loader import read_graph


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


app = typer.Typer(help="Total weight of a minimum spanning tree, computed with Prim's algorithm.")


@app.command()
def main(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Edge list file."),
    source: int = typer.Option(1, "--source", "-s", help="Label of the vertex the tree is grown from."),
    scipy: bool = typer.Option(False, "--scipy", help="Use scipy's MST routine instead of naive Prim's."),
    dump: bool = typer.Option(False, "--dump", help="Print the vertices and edges read before the result."),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", envvar="MSTWEIGHT_LOG_LEVEL", case_sensitive=False, help="Logging level."
    ),
) -> None:
    """Read a graph from PATH and print the weight of its minimum spanning tree."""
    logging.basicConfig(level=log_level.value, format=LOG_FORMAT)

    try:
        graph = read_graph(path)

        if dump:
            typer.echo("The representation of the graph read is:\n")
            typer.echo(graph.describe())
            typer.echo("\nThe edges of the graph are:\n")
            typer.echo(graph.describe_edges())

        total_weight = compute_mst_weight(graph, source=source, use_scipy_implementation=scipy)
    except MSTError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"\nSum = {total_weight}")


if __name__ == "__main__":
    app()

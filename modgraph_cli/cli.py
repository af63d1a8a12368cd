"""Typer-based CLI for rendering module dependency graphs as Graphviz DOT."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__, config_manager
from .builder import build_graph
from .classifier import classify
from .convert import convert, convert_paths
from .errors import ModGraphError
from .graph_export import RenderOptions

logger = logging.getLogger(__name__)

app = typer.Typer(
    help=(
        "🧭 ModGraph CLI: turn `go mod graph` style edge lists into Graphviz DOT.\n\n"
        "For each module, the node with the greatest version (the one minimal "
        "version selection picks) is colored green and superseded versions grey."
    ),
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"ModGraph CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Log debug details to stderr."),
):
    """ModGraph CLI: dependency graph paths and version selection as DOT."""
    package_logger = logging.getLogger("modgraph_cli")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _render_options(plain: bool = False) -> RenderOptions:
    options = RenderOptions.from_config(config_manager.load_render_config())
    if plain:
        options.wrap_versions = False
    return options


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"modgraph: {exc}", err=True)
    return typer.Exit(code=1)


@app.command("render")
def render(
    input_file: typer.FileText = typer.Option("-", "--input", "-i", help="Edge list to read (default: stdin)."),
    output_file: typer.FileTextWrite = typer.Option("-", "--output", "-o", help="DOT file to write (default: stdout)."),
    plain: bool = typer.Option(False, "--plain", help="Keep module@version on a single label line."),
):
    """Render the whole graph, coloring selected and superseded versions.

    Example:
      go mod graph | modgraph render | dot -Tpng -o graph.png
    """
    try:
        classification = convert(input_file, output_file, _render_options(plain))
    except ModGraphError as exc:
        raise _fail(exc) from exc
    logger.info(
        "Rendered graph: %d selected, %d superseded",
        len(classification.selected), len(classification.superseded),
    )


@app.command("paths")
def paths(
    target: str = typer.Argument(..., help="Node to find paths to, e.g. golang.org/x/text@v0.3.0."),
    input_file: typer.FileText = typer.Option("-", "--input", "-i", help="Edge list to read (default: stdin)."),
    output_file: typer.FileTextWrite = typer.Option("-", "--output", "-o", help="DOT file to write (default: stdout)."),
    plain: bool = typer.Option(False, "--plain", help="Keep module@version on a single label line."),
):
    """Render every acyclic path from the root to TARGET.

    Example:
      go mod graph | modgraph paths golang.org/x/text@v0.3.0 | dot -Tsvg
    """
    try:
        result = convert_paths(input_file, output_file, target, _render_options(plain))
    except ModGraphError as exc:
        raise _fail(exc) from exc
    logger.info("Path graph to %s: %d nodes, %d edges", target, len(result), result.edge_count)


@app.command("classify")
def classify_command(
    input_file: typer.FileText = typer.Option("-", "--input", "-i", help="Edge list to read (default: stdin)."),
):
    """List selected and superseded module versions."""
    try:
        graph = build_graph(input_file)
    except ModGraphError as exc:
        raise _fail(exc) from exc
    classification = classify(graph)

    console = Console()
    if not classification.selected:
        console.print("No versioned modules found.")
        raise typer.Exit(code=0)

    table = Table(title=f"Version selection (root: {graph.root_name})")
    table.add_column("Status")
    table.add_column("Module")
    for name in classification.selected:
        table.add_row("[green]selected[/green]", escape(name))
    for name in classification.superseded:
        table.add_row("[dim]superseded[/dim]", escape(name))
    console.print(table)
    console.print(
        f"Selected: {len(classification.selected)} | Superseded: {len(classification.superseded)}"
    )


@app.command("show-config")
def show_config():
    """Show the effective DOT rendering settings."""
    console = Console()
    table = Table(title=f"Render settings ({config_manager.CONFIG_FILE})")
    table.add_column("Option")
    table.add_column("Value")
    for key, value in config_manager.load_render_config().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command("set-config")
def set_config(
    key: str = typer.Argument(..., help="Render option, e.g. picked_color."),
    value: str = typer.Argument(..., help="New value."),
):
    """Change one DOT rendering setting."""
    try:
        stored = config_manager.save_render_option(key, value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo(f"Set {key} = {stored}")


if __name__ == "__main__":
    app()

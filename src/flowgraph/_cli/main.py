import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from flowgraph._config import ConfigError, get_config
from flowgraph._errors import GraphError
from flowgraph._graph import EdgeSource, EdgeTarget
from flowgraph._registry import NodeKind, lookup, node_kinds
from flowgraph._schema import node_type_schemas
from flowgraph._session import GraphSession

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Flowgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _max_label(max_connections: int | None) -> str:
    return "∞" if max_connections is None else str(max_connections)


@app.command("types")
def list_types() -> None:
    """List the registered node types and their sockets."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="bold", no_wrap=True)
    table.add_column("Title")
    table.add_column("Inputs", style="yellow")
    table.add_column("Outputs", style="green")
    table.add_column("Default config", style="dim")

    for kind in node_kinds():
        definition = lookup(kind)
        inputs = ", ".join(f"{s.name}: {s.value_type} (max {_max_label(s.max_connections)})" for s in definition.inputs)
        outputs = ", ".join(f"{s.name}: {s.value_type}" for s in definition.outputs) or "-"
        table.add_row(str(kind), definition.title, inputs, outputs, repr(list(definition.default_config())))

    out_console.print(
        Panel(
            table,
            title="[bold]Node types[/bold]",
            subtitle=f"[dim]{len(node_kinds())} kinds[/dim]",
            border_style="cyan",
        ),
    )


@app.command()
def schema(
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output JSON file (defaults to stdout)"),
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation spaces"),
    ] = 2,
) -> None:
    """Write the node type schemas as JSON."""
    schemas = {name: s.model_dump(mode="json", by_alias=True) for name, s in node_type_schemas().items()}
    text = json.dumps(schemas, indent=indent)

    if output is None:
        out_console.print_json(text)
        return

    err_console.print(f"[cyan]Writing schemas to:[/cyan] {output}")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n")
    err_console.print("[green]✓ Schema generation complete[/green]")


@app.command()
def demo(
    *,
    first: Annotated[float, typer.Option("--first", help="Initial value of the first number")] = 5,
    second: Annotated[float, typer.Option("--second", help="Value of the second number")] = 3,
    updated: Annotated[float, typer.Option("--updated", help="New value of the first number")] = 10,
) -> None:
    """Build a small adder graph, evaluate it, update an input and evaluate again."""
    try:
        session = GraphSession(get_config())
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(code=1) from e

    try:
        a = session.add_node(NodeKind.NUMBER_LITERAL, config=[first])
        b = session.add_node(NodeKind.NUMBER_LITERAL, config=[second])
        add = session.add_node(NodeKind.ADD)
        sink = session.add_node(NodeKind.SINK)
        session.add_edge(EdgeSource(a.id), EdgeTarget(add.id, 0))
        session.add_edge(EdgeSource(b.id), EdgeTarget(add.id, 1))
        session.add_edge(EdgeSource(add.id), EdgeTarget(sink.id))

        out_console.print(f"[cyan]{sink.id}[/cyan] = {session.evaluate(sink.id)!r}")
        purged = session.update_node_data(a.id, [updated])
        out_console.print(f"[dim]Invalidated: {', '.join(sorted(purged))}[/dim]")
        out_console.print(f"[cyan]{sink.id}[/cyan] = {session.evaluate(sink.id)!r}")
    except GraphError as e:
        err_console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1) from e


def main() -> None:
    app()

"""CLI entry point for wikigraph."""

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import load_config

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show traversal progress")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Wikigraph - Map the links around a note in your personal wiki."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _get_config(ctx) -> dict:
    try:
        return load_config(ctx.obj.get("config_path"))
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        ctx.exit(1)


def _build(ctx, config: dict, start: str, depth: int | None, workers: int | None = None,
           timeout: float | None = None):
    from .graph import build_graph

    try:
        return build_graph(
            start,
            depth if depth is not None else config["max_depth"],
            config["wiki_path"],
            extension=config["extension"],
            max_workers=workers or config.get("max_workers"),
            timeout=timeout if timeout is not None else config.get("timeout"),
        )
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        ctx.exit(1)


@cli.command()
@click.argument("start")
@click.option("--depth", "-d", type=int, default=None, help="Maximum number of hops")
@click.option("--format", "-f", "fmt", type=click.Choice(["table", "dot", "json"]), default="table",
              help="Output format")
@click.option("--workers", type=int, default=None, help="Worker threads for link extraction")
@click.option("--timeout", type=float, default=None, help="Stop expanding after this many seconds")
@click.pass_context
def graph(ctx, start, depth, fmt, workers, timeout):
    """Build the link graph around START."""
    from .export import to_dot, to_json_dict

    config = _get_config(ctx)
    result = _build(ctx, config, start, depth, workers, timeout)

    if not result.start_found:
        console.print(f"[yellow]Start document not found: {result.start}[/]")
        ctx.exit(1)

    if fmt == "dot":
        click.echo(to_dot(result), nl=False)
        return
    if fmt == "json":
        click.echo(json.dumps(to_json_dict(result), indent=2))
        return

    if not len(result):
        console.print("[yellow]No links found.[/]")
        return

    table = Table(title=f"Links around {result.start}")
    table.add_column("Target", style="cyan")
    table.add_column("Source")
    table.add_column("Distance", justify="right", style="green")
    for target, source, distance in result.edges():
        table.add_row(target, source, str(distance))
    console.print(table)

    if result.cancelled:
        console.print("[yellow]Traversal stopped early; results are partial.[/]")


@cli.command()
@click.argument("start")
@click.option("--depth", "-d", type=int, default=None, help="Maximum number of hops")
@click.pass_context
def distances(ctx, start, depth):
    """List each document reachable from START with its shortest distance."""
    from .graph import shortest_paths

    config = _get_config(ctx)
    result = _build(ctx, config, start, depth)

    if not result.start_found:
        console.print(f"[yellow]Start document not found: {result.start}[/]")
        ctx.exit(1)

    nodes = shortest_paths(result)
    table = Table(title="Distances")
    table.add_column("Document", style="cyan")
    table.add_column("Distance", justify="right", style="green")
    for n in nodes:
        table.add_row(n.name, str(n.distance) if n.reachable else "[dim]unreachable[/]")
    console.print(table)

    unreachable = sum(1 for n in nodes if not n.reachable)
    console.print(f"{len(nodes)} documents discovered, {unreachable} unreachable")


@cli.command()
@click.argument("file")
@click.pass_context
def links(ctx, file):
    """Show forward and backward links of a single document."""
    from .links import extract_links, normalize

    config = _get_config(ctx)
    path = normalize(file, config["wiki_path"])
    result = extract_links(path, config["extension"])

    console.print(f"[bold]{path}[/]")
    console.print(f"\n[bold]Forward ({len(result.forward)}):[/]")
    for p in result.forward:
        console.print(f"  → {p}")
    console.print(f"\n[bold]Backward ({len(result.backward)}):[/]")
    for p in result.backward:
        console.print(f"  ← {p}")


if __name__ == "__main__":
    cli()

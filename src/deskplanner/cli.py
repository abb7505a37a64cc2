"""Command Line Interface for the floor-plan core.

This module provides a simple CLI for building floor structure documents
from wall lists and for listing the rooms of a stored floor.
"""

import json
import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import config
from .core.model import Room
from .editor.blueprint import Blueprint
from .graph.topology import build_wall_graph, dangling_nodes
from .io.structure import load_floor, load_walls, save_floor

app = typer.Typer(
    name="deskplanner",
    help="A CLI tool for extracting rooms from office floor plans",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _rooms_table(rooms: List[Room]) -> Table:
    table = Table(title="Rooms")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Corners", justify="right")
    table.add_column("Area (m²)", justify="right")
    table.add_column("Top level", justify="center")
    table.add_column("Rooms inside")

    for room in rooms:
        table.add_row(
            str(room.number),
            room.name,
            str(len(room.points)),
            f"{room.area:.2f}",
            "yes" if room.is_direct_child else "no",
            ", ".join(str(r) for r in room.rooms_inside),
        )
    return table


def _report(blueprint: Blueprint, rooms: List[Room]) -> None:
    console.print(_rooms_table(rooms))

    dangling = dangling_nodes(build_wall_graph(blueprint.extractor))
    if dangling:
        console.print(f"[yellow]{len(dangling)} wall end(s) not connected to any room[/yellow]")


@app.command()
def build(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall list JSON file"),
    out: Path = typer.Option(..., "--out", "-o", help="Path to output floor JSON file"),
    floor: int = typer.Option(1, "--floor", "-f", help="Floor number"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Draw a list of walls and save the resulting floor structure."""
    _setup_logging(verbose)
    try:
        segments = load_walls(str(walls))
        console.print(f"[green]✓[/green] Loaded {len(segments)} walls from {walls}")

        blueprint = Blueprint(floor)
        for segment in segments:
            blueprint.draw_wall(segment.start, segment.end)

        rooms = blueprint.rooms()
        save_floor(blueprint, str(out), rooms)
        console.print(
            f"[green]✓[/green] Saved floor {floor} with {len(blueprint.walls)} walls "
            f"and {len(rooms)} rooms to {out}"
        )
        _report(blueprint, rooms)

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def rooms(
    floor_file: Path = typer.Option(..., "--floor-file", "-f", help="Path to floor JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """List the rooms enclosed by the walls of a stored floor."""
    _setup_logging(verbose)
    try:
        blueprint = load_floor(str(floor_file))
        console.print(f"[green]✓[/green] Loaded floor {blueprint.floor} from {floor_file}")

        found = blueprint.rooms()
        if not found:
            console.print("[yellow]No closed rooms on this floor[/yellow]")
            return
        _report(blueprint, found)

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

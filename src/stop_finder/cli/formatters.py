"""Output formatters for CLI display."""

import json
from collections.abc import Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import StopPoint

console = Console()


def format_stop_json(stop_points: Sequence[StopPoint]) -> str:
    """Format stops as JSON."""
    return json.dumps(
        [stop_point.model_dump() for stop_point in stop_points],
        ensure_ascii=False,
        indent=2,
    )


def print_stop_json(stop_points: Sequence[StopPoint]) -> None:
    click.echo(format_stop_json(stop_points))


def format_stop_table(stop_points: Sequence[StopPoint]) -> None:
    """Display stops as a rich table."""
    if not stop_points:
        console.print("No stops found.")
        return

    table = Table(title="Nearby Stops", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Stop ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")

    for idx, stop_point in enumerate(stop_points, 1):
        table.add_row(
            str(idx), escape(stop_point.identifier), escape(stop_point.display_name)
        )

    console.print(table)

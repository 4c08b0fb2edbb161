"""Plain stop list output."""

from collections.abc import Iterable

import click

from .models import StopPoint


def present_stop_points(stop_points: Iterable[StopPoint]) -> None:
    """Print each stop's name on its own line."""
    for stop_point in stop_points:
        click.echo(stop_point.display_name)

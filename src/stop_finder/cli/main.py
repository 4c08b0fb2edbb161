"""CLI main entry point for the nearby stop finder."""

import asyncio
import logging
import sys
from collections.abc import Callable, Sequence

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core import (
    ConsoleLineReader,
    HttpFetcher,
    HttpStatusError,
    MalformedResponseError,
    NearbyStopsPipeline,
    PostcodeGeocoder,
    StopFinderError,
    StopFinderSettings,
    StopPoint,
    StopPointLocator,
    TransportError,
    present_stop_points,
)
from .formatters import format_stop_table, print_stop_json

console = Console()
error_console = Console(stderr=True)

PRESENTERS: dict[str, Callable[[Sequence[StopPoint]], None]] = {
    "plain": present_stop_points,
    "json": print_stop_json,
    "table": format_stop_table,
}

app_id_option = click.option(
    "--app-id",
    envvar="TFL_APP_ID",
    default="",
    show_envvar=True,
    help="TfL application id",
)
app_key_option = click.option(
    "--app-key",
    envvar="TFL_APP_KEY",
    default="",
    show_envvar=True,
    help="TfL application key",
)


async def run_pipeline(
    settings: StopFinderSettings,
    presenter: Callable[[Sequence[StopPoint]], None] = present_stop_points,
) -> None:
    """Wire up the collaborators from ``settings`` and run once."""
    async with HttpFetcher() as fetcher:
        pipeline = NearbyStopsPipeline(
            line_reader=ConsoleLineReader(console),
            geocoder=PostcodeGeocoder(fetcher, settings.postcodes_base_url),
            locator=StopPointLocator(fetcher, settings),
            presenter=presenter,
            result_count=settings.result_count,
        )
        await pipeline.run()


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Nearby Stop Finder - List the bus stops closest to a UK postcode."""
    pass


@cli.command()
@app_id_option
@app_key_option
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(PRESENTERS)),
    default="plain",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed information")
def nearby(app_id: str, app_key: str, output_format: str, verbose: bool) -> None:
    """Prompt for a postcode and list the nearest stops.

    Examples:
        stop-finder nearby
        stop-finder nearby --format table
        TFL_APP_KEY=... stop-finder nearby --format json
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    settings = StopFinderSettings(app_id=app_id, app_key=app_key)

    try:
        asyncio.run(run_pipeline(settings, PRESENTERS[output_format]))
    except (EOFError, KeyboardInterrupt):
        error_console.print("[yellow]No postcode entered[/yellow]")
        sys.exit(1)
    except HttpStatusError as e:
        error_console.print(f"[red]Request failed:[/red] HTTP {e.status_code}")
        if verbose and e.url:
            error_console.print(f"URL: {escape(e.url)}")
        sys.exit(1)
    except TransportError as e:
        error_console.print(f"[red]Network error:[/red] {escape(str(e))}")
        sys.exit(1)
    except MalformedResponseError as e:
        error_console.print(f"[red]Unexpected response:[/red] {escape(str(e))}")
        sys.exit(1)
    except StopFinderError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@app_id_option
@app_key_option
def show_config(app_id: str, app_key: str) -> None:
    """Show current configuration."""
    settings = StopFinderSettings(app_id=app_id, app_key=app_key)
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Postcode service: {settings.postcodes_base_url}")
    console.print(f"• TfL API: {settings.tfl_base_url}")
    console.print(f"• Stop types: {settings.stop_types}")
    console.print(f"• Search radius: {settings.search_radius}")
    console.print(f"• Result count: {settings.result_count}")
    console.print(f"• App id: {settings.app_id or '(not set)'}")
    console.print(f"• App key: {settings.masked_app_key()}")


if __name__ == "__main__":
    cli()

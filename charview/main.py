from __future__ import annotations

import asyncio
import sys
from typing import Optional

import typer
from rich.console import Console

from charview.commands import HELP_TEXT, CommandError, apply_command, parse_command
from charview.config import get_settings
from charview.controller import ViewController, ViewStatus
from charview.loader.http_source import HttpPageSource
from charview.reporter import print_view
from charview.utils.logging import configure_logging

app = typer.Typer(help="Rick and Morty character viewer CLI.")


async def _load(controller: ViewController) -> bool:
    async with HttpPageSource(controller.settings) as source:
        return await controller.load(source)


def _prepare(species: Optional[str], status: Optional[str]) -> ViewController:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    controller = ViewController(settings)
    asyncio.run(_load(controller))
    controller.set_filters(species=species, status=status)
    return controller


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"API={settings.api_base_url} | target={settings.target_count} "
        f"page_size={settings.page_size} window=±{settings.window_radius} "
        f"skip={settings.skip_step} attempts={settings.fetch_max_attempts}"
    )


@app.command()
def show(
    species: Optional[str] = typer.Option(None, "--species", help="Species substring filter."),
    status: Optional[str] = typer.Option(None, "--status", help="Status substring filter."),
    page: int = typer.Option(1, "--page", "-p", help="Page to display (clamped)."),
    select: Optional[int] = typer.Option(
        None, "--select", help="Character id to show in the detail panel."
    ),
) -> None:
    """
    Load the collection once and render a single frame.
    """
    controller = _prepare(species, status)
    console = Console()
    if controller.status is ViewStatus.FAILED:
        print_view(controller, console)
        raise typer.Exit(code=1)

    controller.go_to_page(page)
    if select is not None:
        try:
            controller.select_id(select)
        except KeyError as exc:
            typer.echo(exc.args[0], err=True)
            raise typer.Exit(code=2)
    print_view(controller, console)


@app.command()
def browse(
    species: Optional[str] = typer.Option(None, "--species", help="Initial species filter."),
    status: Optional[str] = typer.Option(None, "--status", help="Initial status filter."),
) -> None:
    """
    Load the collection, then filter, page and inspect interactively.
    """
    console = Console()
    console.print("Loading characters...", style="dim")
    controller = _prepare(species, status)
    if controller.status is ViewStatus.READY:
        console.print(
            f"Loaded {len(controller.collection)} characters in {controller.load_seconds:.2f}s",
            style="dim",
        )

    running = True
    while running:
        print_view(controller, console)
        line = typer.prompt(">", default="", show_default=False)
        try:
            command = parse_command(line)
            if command.name == "help":
                console.print(HELP_TEXT, highlight=False)
                continue
            running = apply_command(controller, command)
        except CommandError as exc:
            console.print(str(exc), style="red")

    controller.close()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from charview.controller import ViewController, ViewStatus
from charview.domain.models import Character, Filters
from charview.pagination import PageView

TITLE = "Rick and Morty Characters"
EMPTY_MESSAGE = "No characters match the filter."


def build_filter_line(filters: Filters) -> Text:
    """Render the two filter inputs as `Species: [..]  Status: [..]`."""
    line = Text()
    line.append("Species: ", style="bold")
    line.append(f"[{filters.species}]", style="cyan")
    line.append("   ")
    line.append("Status: ", style="bold")
    line.append(f"[{filters.status}]", style="cyan")
    return line


def build_characters_table(view: PageView) -> Table:
    """
    Render the current page as a table with Id, Name, Species, Status columns.

    The leading `#` column is the row number used by `select <row>`.
    """
    table = Table(box=box.ROUNDED, caption=f"{view.total_items} matching characters")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Id", justify="right", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Species", style="green")
    table.add_column("Status", style="yellow")

    for row, character in enumerate(view.items, start=1):
        table.add_row(
            str(row),
            str(character.id),
            Text(character.name),
            Text(character.species),
            Text(character.status),
        )
    return table


def build_details_panel(character: Optional[Character]) -> Optional[Panel]:
    """Expanded read-only view of the selection; None when nothing is selected."""
    if character is None:
        return None

    body = Text()
    body.append("Image: ", style="bold")
    body.append(f"{character.image}\n")
    body.append("Status: ", style="bold")
    body.append(f"{character.status}\n")
    body.append("Species: ", style="bold")
    body.append(f"{character.species}\n")
    body.append("Gender: ", style="bold")
    body.append(f"{character.gender}\n")
    body.append("Origin: ", style="bold")
    body.append(character.origin.name)
    if character.location is not None:
        body.append("\nLocation: ", style="dim")
        body.append(character.location.name, style="dim")

    return Panel(body, title=Text(character.name, style="bold"), border_style="blue")


def build_pagination_bar(view: PageView) -> Text:
    """
    `Previous 5 | 1 2 [3] 4 ... | Next 5`, greying out the skip buttons that
    cannot move.
    """
    bar = Text()
    bar.append("< Previous 5", style="bold" if view.has_previous else "dim strike")
    bar.append("  ")
    for number in view.window:
        if number == view.page:
            bar.append(f"[{number}]", style="reverse bold")
        else:
            bar.append(str(number))
        bar.append(" ")
    bar.append(" ")
    bar.append("Next 5 >", style="bold" if view.has_next else "dim strike")
    return bar


def build_status_line(controller: ViewController) -> Optional[Text]:
    if controller.status is ViewStatus.FAILED:
        return Text(f"Could not load characters: {controller.error}", style="red")
    if controller.status is ViewStatus.LOADING:
        return Text("Loading characters...", style="dim")
    if controller.status is ViewStatus.READY and controller.exhausted:
        return Text(
            f"Source ran out after {len(controller.collection)} of "
            f"{controller.settings.target_count} characters",
            style="yellow",
        )
    return None


def render_view(controller: ViewController) -> RenderableType:
    """Compose the full frame for the controller's current state."""
    view = controller.page_view()
    parts: List[RenderableType] = [
        Text(TITLE, style="bold underline"),
        build_filter_line(controller.filters),
    ]

    status_line = build_status_line(controller)
    if status_line is not None:
        parts.append(status_line)

    if view.is_empty:
        parts.append(Text(EMPTY_MESSAGE, style="italic"))
    else:
        parts.append(build_characters_table(view))

    details = build_details_panel(controller.selection)
    if details is not None:
        parts.append(details)

    parts.append(build_pagination_bar(view))
    return Group(*parts)


def print_view(controller: ViewController, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(render_view(controller))


__all__ = [
    "EMPTY_MESSAGE",
    "TITLE",
    "build_characters_table",
    "build_details_panel",
    "build_filter_line",
    "build_pagination_bar",
    "print_view",
    "render_view",
]

"""
Command parsing and dispatch for the interactive browse loop.

Each input line maps to one controller action:

    species <text>   set the species filter (no text clears it)
    status <text>    set the status filter (no text clears it)
    clear            clear both filters
    page <n>         jump to page n
    next / prev      skip forward / backward by the configured step
    select <row>     show details for a row of the current page
    id <id>          show details for a character id
    help             list commands
    quit             leave the loop
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from charview.controller import ViewController
from charview.loader.abstract import ViewerError

HELP_TEXT = __doc__.split("\n\n", 2)[2].rstrip() if __doc__ else ""

_ALIASES = {
    "n": "next",
    "p": "prev",
    "previous": "prev",
    "s": "select",
    "q": "quit",
    "exit": "quit",
    "?": "help",
}

_INT_COMMANDS = {"page", "select", "id"}
_TEXT_COMMANDS = {"species", "status"}
_BARE_COMMANDS = {"clear", "next", "prev", "help", "quit"}


class CommandError(ViewerError):
    """The input line could not be understood or applied."""


@dataclass(frozen=True)
class Command:
    name: str
    text: str = ""
    number: Optional[int] = None


def parse_command(line: str) -> Command:
    """Turn an input line into a Command; raises CommandError on bad input."""
    stripped = line.strip()
    if not stripped:
        raise CommandError("empty command; type 'help' for a list")
    head, _, rest = stripped.partition(" ")
    name = _ALIASES.get(head.lower(), head.lower())
    rest = rest.strip()

    if name in _TEXT_COMMANDS:
        return Command(name=name, text=rest)
    if name in _INT_COMMANDS:
        try:
            return Command(name=name, number=int(rest))
        except ValueError:
            raise CommandError(f"'{name}' expects a number, got '{rest}'") from None
    if name in _BARE_COMMANDS:
        return Command(name=name)
    raise CommandError(f"unknown command '{head}'; type 'help' for a list")


def apply_command(controller: ViewController, command: Command) -> bool:
    """
    Apply `command` to `controller`.

    Returns False when the loop should stop.
    """
    if command.name == "quit":
        return False
    if command.name in _TEXT_COMMANDS:
        controller.set_filter(command.name, command.text)
    elif command.name == "clear":
        controller.clear_filters()
    elif command.name == "page":
        controller.go_to_page(command.number)
    elif command.name == "next":
        controller.skip(1)
    elif command.name == "prev":
        controller.skip(-1)
    elif command.name == "select":
        try:
            controller.select_row(command.number)
        except IndexError as exc:
            raise CommandError(str(exc)) from exc
    elif command.name == "id":
        try:
            controller.select_id(command.number)
        except KeyError as exc:
            raise CommandError(exc.args[0]) from exc
    return True


__all__ = ["Command", "CommandError", "HELP_TEXT", "apply_command", "parse_command"]

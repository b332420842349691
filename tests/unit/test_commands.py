from __future__ import annotations

import pytest

from charview.commands import Command, CommandError, apply_command, parse_command
from charview.controller import ViewController


@pytest.fixture()
def controller(loaded_controller, characters) -> ViewController:
    return loaded_controller(characters)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("species human", Command(name="species", text="human")),
        ("  STATUS   Dead ", Command(name="status", text="Dead")),
        ("species", Command(name="species", text="")),
        ("page 4", Command(name="page", number=4)),
        ("s 2", Command(name="select", number=2)),
        ("id 17", Command(name="id", number=17)),
        ("n", Command(name="next")),
        ("previous", Command(name="prev")),
        ("clear", Command(name="clear")),
        ("q", Command(name="quit")),
    ],
)
def test_parse_command(line: str, expected: Command) -> None:
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "page two", "select", "dance"])
def test_parse_command_rejects_bad_input(line: str) -> None:
    with pytest.raises(CommandError):
        parse_command(line)


def test_apply_command_drives_controller(controller: ViewController) -> None:
    assert apply_command(controller, parse_command("species human"))
    assert controller.filters.species == "human"

    apply_command(controller, parse_command("page 3"))
    assert controller.page == 3

    apply_command(controller, parse_command("next"))
    assert controller.page == min(8, controller.total_pages)

    apply_command(controller, parse_command("select 1"))
    assert controller.selection is controller.visible[0]

    apply_command(controller, parse_command("clear"))
    assert controller.filters.is_empty


def test_apply_command_quit_stops_loop(controller: ViewController) -> None:
    assert apply_command(controller, parse_command("quit")) is False


def test_apply_command_reports_bad_selection(controller: ViewController) -> None:
    with pytest.raises(CommandError, match="not on the current page"):
        apply_command(controller, parse_command("select 42"))
    with pytest.raises(CommandError, match="no character with id 999"):
        apply_command(controller, parse_command("id 999"))

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from charview import main as cli
from charview.loader.abstract import SourceError

runner = CliRunner()


@pytest.fixture()
def patched_cli(monkeypatch, test_settings, fake_source):
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "get_settings", lambda: test_settings)
    monkeypatch.setattr(cli, "HttpPageSource", lambda settings: fake_source)
    return fake_source


def test_info_prints_effective_settings(monkeypatch, test_settings) -> None:
    monkeypatch.setattr(cli, "get_settings", lambda: test_settings)

    result = runner.invoke(cli.app, ["info"])

    assert result.exit_code == 0
    assert "target=300" in result.output
    assert "page_size=10" in result.output


def test_show_renders_filtered_page_with_details(patched_cli) -> None:
    result = runner.invoke(
        cli.app, ["show", "--status", "dead", "--page", "2", "--select", "3"]
    )

    assert result.exit_code == 0, result.output
    assert "Rick and Morty Characters" in result.output
    assert "Status: [dead]" in result.output
    assert "Next 5" in result.output
    assert patched_cli.requested == list(range(1, 16))
    assert patched_cli.closed is True


def test_show_unknown_selection_exits_with_error(patched_cli) -> None:
    result = runner.invoke(cli.app, ["show", "--select", "9999"])

    assert result.exit_code == 2


def test_show_exits_non_zero_when_load_fails(
    monkeypatch, test_settings, characters, source_factory
) -> None:
    source = source_factory(
        characters, fail_on=1, error=SourceError("page 1: upstream returned HTTP 500", page=1)
    )
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "get_settings", lambda: test_settings)
    monkeypatch.setattr(cli, "HttpPageSource", lambda settings: source)

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 1
    assert "Could not load characters" in result.output
    assert "No characters match the filter." in result.output


def test_browse_applies_commands_until_quit(patched_cli) -> None:
    result = runner.invoke(
        cli.app,
        ["browse"],
        input="species human\nbogus\nselect 1\nhelp\nquit\n",
    )

    assert result.exit_code == 0, result.output
    assert "Species: [human]" in result.output
    assert "unknown command 'bogus'" in result.output
    assert "next / prev" in result.output


def test_browse_reports_load_summary(patched_cli) -> None:
    result = runner.invoke(cli.app, ["browse"], input="quit\n")

    assert result.exit_code == 0, result.output
    assert "Loaded 300 characters in" in result.output


def test_show_flags_short_collection(
    monkeypatch, test_settings, characters, source_factory
) -> None:
    source = source_factory(characters[:45], page_size=20)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "get_settings", lambda: test_settings)
    monkeypatch.setattr(cli, "HttpPageSource", lambda settings: source)

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 0, result.output
    assert "Source ran out after 45 of 300 characters" in result.output

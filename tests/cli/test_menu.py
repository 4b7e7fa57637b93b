"""Tests for the interactive menu shown when no command is given."""

from pathlib import Path

from click.testing import CliRunner

from skillsync.cli.cli import cli
from tests.fakes.git import FakeGit
from tests.test_utils.builders import make_context, make_registry


def test_menu_dispatches_chosen_action(tmp_path: Path) -> None:
    registry = make_registry(vendor={"beta": "https://example.com/beta"})
    ctx = make_context(tmp_path, registry, FakeGit())

    result = CliRunner().invoke(cli, [], obj=ctx, input="check\n")

    assert result.exit_code == 0, result.output
    assert "Skills Manager" in result.output
    assert "All submodules are up to date" in result.output


def test_menu_defaults_to_sync(tmp_path: Path) -> None:
    registry = make_registry(vendor={"beta": "https://example.com/beta"})
    git = FakeGit()
    ctx = make_context(tmp_path, registry, git)

    result = CliRunner().invoke(cli, [], obj=ctx, input="\n")

    assert result.exit_code == 0, result.output
    assert git.update_calls == 1
    assert "All skills synced" in result.output

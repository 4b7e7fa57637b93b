"""Tests for the check command."""

from pathlib import Path

from click.testing import CliRunner

from skillsync.cli.cli import cli
from tests.fakes.git import FakeGit
from tests.test_utils.builders import make_context, make_registry


def _registry():
    return make_registry(
        sources={"alpha": "https://example.com/alpha"},
        vendor={"beta": "https://example.com/beta"},
    )


def test_check_lists_entries_behind(tmp_path: Path) -> None:
    for rel in ("sources/alpha", "vendor/beta"):
        (tmp_path / rel).mkdir(parents=True)
    git = FakeGit(
        submodules=["sources/alpha", "vendor/beta"],
        behind_counts={tmp_path / "sources/alpha": 0, tmp_path / "vendor/beta": 5},
    )
    ctx = make_context(tmp_path, _registry(), git)

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Updates available:" in result.output
    assert "beta (vendor): 5 commits behind" in result.output
    assert "alpha" not in result.output
    assert git.update_calls == 0


def test_check_everything_current(tmp_path: Path) -> None:
    ctx = make_context(tmp_path, _registry(), FakeGit())

    result = CliRunner().invoke(cli, ["check"], obj=ctx)

    assert result.exit_code == 0
    assert "All submodules are up to date" in result.output

"""Tests for locating the enclosing repository root."""

from pathlib import Path

from skillsync.core.repo_discovery import discover_repo_root


def test_discovers_root_from_nested_directory(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "skills" / "beta"
    nested.mkdir(parents=True)

    assert discover_repo_root(nested) == tmp_path.resolve()


def test_git_file_marks_a_root(tmp_path: Path) -> None:
    """A `.git` file (worktree or submodule checkout) counts as a root."""
    checkout = tmp_path / "vendor" / "beta"
    checkout.mkdir(parents=True)
    (checkout / ".git").write_text("gitdir: ../../.git/modules/beta\n", encoding="utf-8")

    assert discover_repo_root(checkout) == checkout.resolve()


def test_missing_directory_is_none(tmp_path: Path) -> None:
    assert discover_repo_root(tmp_path / "does-not-exist") is None

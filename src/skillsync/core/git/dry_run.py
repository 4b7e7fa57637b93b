"""Dry-run Git wrapper.

This module provides a Git wrapper that prevents execution of mutating
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

import click

from skillsync.cli.output import user_output
from skillsync.core.git.abc import Git

# ============================================================================
# Dry-run Wrapper
# ============================================================================


class DryRunGit(Git):
    """Wrapper that prints mutating operations instead of executing them.

    Read-only operations (including `fetch`, which only updates remote refs)
    are delegated to the wrapped implementation so reports stay accurate.

    Usage:
        real_ops = RealGit()
        dry_run_ops = DryRunGit(real_ops)

        # Prints message instead of cloning
        dry_run_ops.add_submodule(repo_root, url, "vendor/foo")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    def _announce(self, command: str) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: {command}")

    # Read-only operations: delegate to wrapped implementation

    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        """List submodule paths (read-only, delegates to wrapped)."""
        return self._wrapped.list_submodule_paths(repo_root)

    def is_submodule(self, repo_root: Path, path: str) -> bool:
        """Check submodule registration (read-only, delegates to wrapped)."""
        return self._wrapped.is_submodule(repo_root, path)

    def fetch(self, cwd: Path) -> None:
        """Fetch remote refs (delegates to wrapped - considered read-only for dry-run)."""
        self._wrapped.fetch(cwd)

    def get_head_revision(self, cwd: Path) -> str | None:
        """Get HEAD revision (read-only, delegates to wrapped)."""
        return self._wrapped.get_head_revision(cwd)

    def count_commits_behind_upstream(self, cwd: Path) -> int | None:
        """Count commits behind upstream (read-only, delegates to wrapped)."""
        return self._wrapped.count_commits_behind_upstream(cwd)

    # Mutating operations: print instead of executing

    def add_submodule(self, repo_root: Path, url: str, path: str) -> None:
        """Print the submodule add command without executing it."""
        self._announce(f"git submodule add {url} {path}")

    def update_submodules_remote_merge(self, repo_root: Path) -> None:
        """Print the submodule update command without executing it."""
        self._announce("git submodule update --remote --merge")

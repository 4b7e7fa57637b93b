"""High-level git operations interface.

This module provides a clean abstraction over the git subprocess calls that
skillsync needs for submodule management, making the reconciliation engine
testable without a real git binary or network.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- DryRunGit: Wrapper that prints mutating operations instead of running them

Conventions:
- Read-only queries return None/False/empty on failure (LBYL for callers)
- Mutating operations raise RuntimeError with command context on failure
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real, dry-run and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.

    Submodule paths are always relative to the enclosing repository root and use
    POSIX separators, matching the `path = ...` entries in `.gitmodules`.
    """

    @abstractmethod
    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        """List submodule paths registered in `.gitmodules`.

        Args:
            repo_root: Path to the enclosing repository root

        Returns:
            Registered paths in manifest order. Empty when `.gitmodules` is
            missing or unreadable.
        """
        ...

    @abstractmethod
    def is_submodule(self, repo_root: Path, path: str) -> bool:
        """Check whether `path` is registered as a submodule of `repo_root`."""
        ...

    @abstractmethod
    def add_submodule(self, repo_root: Path, url: str, path: str) -> None:
        """Add a submodule at `path` cloned from `url`.

        Raises:
            RuntimeError: If git fails (network, existing path, invalid url)
        """
        ...

    @abstractmethod
    def update_submodules_remote_merge(self, repo_root: Path) -> None:
        """Fetch every submodule's upstream branch and merge it.

        Equivalent to `git submodule update --remote --merge`. A single call that
        updates all submodules together.

        Raises:
            RuntimeError: If any submodule fails to update
        """
        ...

    @abstractmethod
    def fetch(self, cwd: Path) -> None:
        """Fetch remote refs for the repository at `cwd`.

        Raises:
            RuntimeError: If `cwd` is not the top level of a checkout or the
                fetch fails
        """
        ...

    @abstractmethod
    def get_head_revision(self, cwd: Path) -> str | None:
        """Get the commit SHA checked out at `cwd`.

        Returns:
            Full SHA, or None if `cwd` is not the top level of a checkout
            (for example an uninitialized submodule directory) or has no commits
        """
        ...

    @abstractmethod
    def count_commits_behind_upstream(self, cwd: Path) -> int | None:
        """Count commits on the upstream tracking branch that HEAD does not have.

        Does not fetch; callers refresh remote refs first.

        Returns:
            Commit count, or None if `cwd` is not the top level of a checkout,
            no upstream is configured, or the query fails
        """
        ...

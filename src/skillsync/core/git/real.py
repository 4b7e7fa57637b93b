"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from pathlib import Path

from skillsync.core.git.abc import Git
from skillsync.core.subprocess import DEFAULT_TIMEOUT_SECONDS, run_subprocess_with_context

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess. Every call
    is bounded by `timeout` seconds so an unreachable remote cannot hang a run.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def _query(self, cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str] | None:
        """Run a read-only git query, returning None when it cannot complete."""
        if not cwd.is_dir():
            return None
        try:
            return subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
                timeout=self._timeout,
            )
        except (subprocess.TimeoutExpired, FileNotFoundError) as e:
            logger.debug("git query %s in %s did not complete: %s", cmd, cwd, e)
            return None

    def _is_checkout_root(self, cwd: Path) -> bool:
        """Check that `cwd` is the top level of its own working tree.

        An uninitialized submodule is an empty directory inside the parent
        checkout; git run there would answer for the parent repository.
        """
        result = self._query(["git", "rev-parse", "--show-toplevel"], cwd=cwd)
        if result is None or result.returncode != 0:
            return False
        toplevel = result.stdout.strip()
        if not toplevel:
            return False
        return Path(toplevel).resolve() == cwd.resolve()

    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        """List submodule paths registered in `.gitmodules`."""
        if not (repo_root / ".gitmodules").is_file():
            return []

        result = self._query(
            ["git", "config", "--file", ".gitmodules", "--get-regexp", r"^submodule\..*\.path$"],
            cwd=repo_root,
        )
        # Exit code 1 means no matching keys
        if result is None or result.returncode != 0:
            return []

        paths: list[str] = []
        for line in result.stdout.splitlines():
            parts = line.strip().split(maxsplit=1)
            if len(parts) == 2:
                paths.append(parts[1])
        return paths

    def is_submodule(self, repo_root: Path, path: str) -> bool:
        """Check whether `path` is registered in `.gitmodules`."""
        return path in self.list_submodule_paths(repo_root)

    def add_submodule(self, repo_root: Path, url: str, path: str) -> None:
        """Add a submodule at `path` cloned from `url`."""
        run_subprocess_with_context(
            ["git", "submodule", "add", url, path],
            operation_context=f"add submodule '{path}' from {url}",
            cwd=repo_root,
            timeout=self._timeout,
        )

    def update_submodules_remote_merge(self, repo_root: Path) -> None:
        """Fetch and merge every submodule's upstream tracking branch."""
        run_subprocess_with_context(
            ["git", "submodule", "update", "--remote", "--merge"],
            operation_context="update submodules from their remotes",
            cwd=repo_root,
            timeout=self._timeout,
        )

    def fetch(self, cwd: Path) -> None:
        """Fetch remote refs for the repository at `cwd`."""
        if not self._is_checkout_root(cwd):
            raise RuntimeError(f"Failed to fetch remote changes in '{cwd}': not a git checkout")
        run_subprocess_with_context(
            ["git", "fetch"],
            operation_context=f"fetch remote changes in '{cwd}'",
            cwd=cwd,
            timeout=self._timeout,
        )

    def get_head_revision(self, cwd: Path) -> str | None:
        """Get the commit SHA checked out at `cwd`."""
        if not self._is_checkout_root(cwd):
            return None

        result = self._query(["git", "rev-parse", "HEAD"], cwd=cwd)
        if result is None or result.returncode != 0:
            return None

        sha = result.stdout.strip()
        if not sha:
            return None
        return sha

    def count_commits_behind_upstream(self, cwd: Path) -> int | None:
        """Count upstream commits not yet merged into HEAD."""
        if not self._is_checkout_root(cwd):
            return None

        # Check if HEAD has an upstream first; rev-list fails the same way but
        # this keeps "no upstream" distinguishable in debug logs
        result = self._query(["git", "rev-parse", "--abbrev-ref", "@{upstream}"], cwd=cwd)
        if result is None or result.returncode != 0:
            logger.debug("No upstream tracking ref configured in %s", cwd)
            return None

        result = self._query(["git", "rev-list", "--count", "HEAD..@{upstream}"], cwd=cwd)
        if result is None or result.returncode != 0:
            return None

        try:
            return int(result.stdout.strip())
        except ValueError:
            return None

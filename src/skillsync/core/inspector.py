"""Repository state inspection for registry entries.

All queries are read-only and never raise: git failures (RuntimeError from the
git layer) and filesystem errors degrade to None/False so a report over many
entries can finish even when some of them are unreachable.

Nothing here is cached; each call observes the current state on disk and
upstream.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from skillsync.core.git.abc import Git
from skillsync.core.registry import RegistryEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackedCopyState:
    """Snapshot of one entry's local copy, computed fresh on every inspection."""

    exists: bool
    revision: str | None
    behind_count: int | None


class RepositoryStateInspector:
    """Answers tracked/revision/behind questions for submodule paths."""

    def __init__(self, git: Git, repo_root: Path) -> None:
        self._git = git
        self._repo_root = repo_root

    def is_tracked(self, local_path: str) -> bool:
        """Check whether `local_path` is registered in `.gitmodules`.

        A missing manifest means nothing is tracked.
        """
        try:
            return self._git.is_submodule(self._repo_root, local_path)
        except (RuntimeError, OSError) as e:
            logger.debug("is_tracked(%s) failed: %s", local_path, e)
            return False

    def current_revision(self, local_path: str) -> str | None:
        """Resolve the checked-out revision of a tracked copy.

        Returns:
            Commit SHA, or None when the path is untracked, has no commits,
            or cannot be queried
        """
        if not self.is_tracked(local_path):
            return None
        try:
            return self._git.get_head_revision(self._repo_root / local_path)
        except (RuntimeError, OSError) as e:
            logger.debug("current_revision(%s) failed: %s", local_path, e)
            return None

    def commits_behind(self, local_path: str) -> int | None:
        """Count upstream commits not merged into the local copy.

        Fetches first so the count reflects the remote as it is now. A failed
        fetch yields None rather than a count against stale refs.

        Returns:
            Non-negative count, or None when there is no upstream tracking
            ref or the remote cannot be reached
        """
        path = self._repo_root / local_path
        if not path.is_dir():
            return None
        try:
            self._git.fetch(path)
            behind = self._git.count_commits_behind_upstream(path)
        except (RuntimeError, OSError) as e:
            logger.debug("commits_behind(%s) failed: %s", local_path, e)
            return None

        if behind is None or behind < 0:
            return None
        return behind

    def inspect(self, entry: RegistryEntry, *, with_behind: bool = True) -> TrackedCopyState:
        """Compute the state of one entry.

        Args:
            entry: Registry entry to inspect
            with_behind: Whether to fetch and count upstream commits. When False,
                `behind_count` is None and no network access happens.
        """
        if not self.is_tracked(entry.local_path):
            return TrackedCopyState(exists=False, revision=None, behind_count=None)
        return TrackedCopyState(
            exists=True,
            revision=self.current_revision(entry.local_path),
            behind_count=self.commits_behind(entry.local_path) if with_behind else None,
        )

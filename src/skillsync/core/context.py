"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from skillsync.core.config import load_config
from skillsync.core.filesystem import DryRunFilesystem, Filesystem, RealFilesystem
from skillsync.core.git import DryRunGit, Git, RealGit
from skillsync.core.inspector import RepositoryStateInspector
from skillsync.core.registry import Registry
from skillsync.core.time import RealTime, Time


@dataclass(frozen=True)
class SkillSyncContext:
    """Immutable context holding all dependencies for skillsync operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    filesystem: Filesystem
    time: Time
    repo_root: Path
    registry: Registry
    dry_run: bool

    def abspath(self, relative: str) -> Path:
        """Resolve a registry-relative POSIX path against the repository root."""
        return self.repo_root / relative

    @property
    def inspector(self) -> RepositoryStateInspector:
        """Inspector bound to this context's git and repository root."""
        return RepositoryStateInspector(self.git, self.repo_root)

    @staticmethod
    def for_test(
        *,
        git: Git,
        registry: Registry,
        repo_root: Path,
        filesystem: Filesystem | None = None,
        time: Time | None = None,
        dry_run: bool = False,
    ) -> "SkillSyncContext":
        """Create a context for tests with real filesystem and clock defaults.

        Args:
            git: Git implementation (usually FakeGit with scripted state)
            registry: Registry under test
            repo_root: Repository root, typically a pytest `tmp_path`
            filesystem: Optional Filesystem; defaults to RealFilesystem
            time: Optional Time; defaults to RealTime
            dry_run: Whether to mark the context as dry-run

        Example:
            >>> git = FakeGit(submodules=["vendor/beta"])
            >>> ctx = SkillSyncContext.for_test(git=git, registry=registry, repo_root=tmp_path)
        """
        return SkillSyncContext(
            git=git,
            filesystem=filesystem if filesystem is not None else RealFilesystem(),
            time=time if time is not None else RealTime(),
            repo_root=repo_root,
            registry=registry,
            dry_run=dry_run,
        )


def create_context(*, repo_root: Path, dry_run: bool) -> SkillSyncContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        repo_root: Repository root holding `skills.toml`
        dry_run: If True, wrap git and filesystem in dry-run wrappers that
                 print intended mutations without executing them

    Raises:
        RegistryError: If `skills.toml` is missing or invalid
    """
    config = load_config(repo_root)

    git: Git = RealGit(timeout=config.git_timeout)
    filesystem: Filesystem = RealFilesystem()
    if dry_run:
        git = DryRunGit(git)
        filesystem = DryRunFilesystem(filesystem)

    return SkillSyncContext(
        git=git,
        filesystem=filesystem,
        time=RealTime(),
        repo_root=repo_root,
        registry=config.registry,
        dry_run=dry_run,
    )

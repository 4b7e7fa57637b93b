"""Git integration for submodule management."""

from skillsync.core.git.abc import Git
from skillsync.core.git.dry_run import DryRunGit
from skillsync.core.git.real import RealGit

__all__ = ["DryRunGit", "Git", "RealGit"]

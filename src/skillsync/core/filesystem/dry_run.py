"""Dry-run Filesystem wrapper.

Reads are delegated; writes, copies and deletions are printed instead of
performed.
"""

from pathlib import Path

import click

from skillsync.cli.output import user_output
from skillsync.core.filesystem.abc import Filesystem


class DryRunFilesystem(Filesystem):
    """Wrapper that reports mutating filesystem operations without executing them."""

    def __init__(self, wrapped: Filesystem) -> None:
        self._wrapped = wrapped

    def _announce(self, action: str) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would {action}")

    def exists(self, path: Path) -> bool:
        return self._wrapped.exists(path)

    def is_dir(self, path: Path) -> bool:
        return self._wrapped.is_dir(path)

    def list_files_recursive(self, root: Path) -> list[str]:
        return self._wrapped.list_files_recursive(root)

    def read_text(self, path: Path) -> str:
        return self._wrapped.read_text(path)

    def make_dirs(self, path: Path) -> None:
        # Directory creation is implied by the copies/writes that follow
        pass

    def copy_file(self, src: Path, dst: Path) -> None:
        self._announce(f"copy {src} -> {dst}")

    def write_text(self, path: Path, content: str) -> None:
        self._announce(f"write {path}")

    def remove_file(self, path: Path) -> None:
        self._announce(f"remove {path}")

    def remove_empty_dirs(self, root: Path) -> None:
        pass

"""Filesystem operations interface.

The generator only touches disk through this interface so dry-run mode can
swap in a wrapper that reports writes without performing them.

Mutating operations raise OSError on failure; callers decide whether a
failure is fatal.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract interface for filesystem operations."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents (no-op if present)."""
        ...

    @abstractmethod
    def list_files_recursive(self, root: Path) -> list[str]:
        """List every file under `root`, recursively.

        Args:
            root: Directory to walk

        Returns:
            Sorted POSIX paths relative to `root`. Directories are not included.
            Empty if `root` does not exist.
        """
        ...

    @abstractmethod
    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file contents from `src` to `dst`, replacing `dst` if present."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content."""
        ...

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        """Delete a single file."""
        ...

    @abstractmethod
    def remove_empty_dirs(self, root: Path) -> None:
        """Remove directories under `root` that contain no files.

        `root` itself is kept.
        """
        ...

"""Production Filesystem implementation backed by pathlib and shutil."""

import shutil
from pathlib import Path

from skillsync.core.filesystem.abc import Filesystem


class RealFilesystem(Filesystem):
    """Filesystem operations against the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_files_recursive(self, root: Path) -> list[str]:
        if not root.is_dir():
            return []
        return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())

    def copy_file(self, src: Path, dst: Path) -> None:
        shutil.copyfile(src, dst)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_empty_dirs(self, root: Path) -> None:
        if not root.is_dir():
            return
        # Deepest first so parents empty out before they are checked
        dirs = sorted((p for p in root.rglob("*") if p.is_dir()), key=lambda p: len(p.parts))
        for directory in reversed(dirs):
            if not any(directory.iterdir()):
                directory.rmdir()

"""Repository discovery functionality.

Finds the enclosing repository root before the context is created, so the
registry file can be located.
"""

from pathlib import Path


def discover_repo_root(cwd: Path) -> Path | None:
    """Walk up from `cwd` to find a directory containing `.git`.

    `.git` may be a directory (regular checkout) or a file (worktree or
    submodule checkout); either marks a repository root.

    Returns:
        The repository root, or None if `cwd` is not inside a repository
    """
    if not cwd.exists():
        return None

    cur = cwd.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / ".git").exists():
            return parent
    return None

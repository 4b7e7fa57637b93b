"""Reconcile the working copy against the registry.

Three operations:
- materialize: add missing registry entries as submodules (per-entry isolation)
- advance: fetch and merge every submodule's upstream in one batch call
- diff: report entries that are behind upstream (no mutation)
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath

from skillsync.core.context import SkillSyncContext
from skillsync.core.errors import ExternalCallFailed
from skillsync.core.registry import (
    Partition,
    RegistryEntry,
    Role,
    partition_entries,
    select_entries,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of adding one registry entry as a submodule."""

    entry: RegistryEntry
    added: bool
    error: str | None = None


@dataclass(frozen=True)
class DiffEntry:
    """A registry entry with upstream commits not yet merged locally."""

    name: str
    role: Role
    behind_count: int


def partition_registry(ctx: SkillSyncContext) -> Partition:
    """Split the registry into tracked and missing entries, in declaration order."""
    return partition_entries(ctx.registry, ctx.inspector.is_tracked)


def materialize(
    ctx: SkillSyncContext,
    missing: Sequence[RegistryEntry],
    selected_names: Iterable[str] | None = None,
) -> list[MaterializeResult]:
    """Add selected missing entries as submodules.

    Each addition is attempted independently; a failure on one entry is
    recorded and the next entry is still attempted.

    Args:
        ctx: Application context
        missing: Entries without a tracked copy (the `missing` partition)
        selected_names: Names to materialize; None materializes all of `missing`

    Returns:
        One result per selected entry, in declaration order

    Raises:
        RegistryError: If a selected name is not in `missing` (before any mutation)
    """
    selected = (
        list(missing) if selected_names is None else select_entries(missing, selected_names)
    )

    results: list[MaterializeResult] = []
    for entry in selected:
        logger.debug("Materializing %s at %s from %s", entry.name, entry.local_path, entry.location)
        parent = ctx.abspath(str(PurePosixPath(entry.local_path).parent))
        try:
            ctx.filesystem.make_dirs(parent)
            ctx.git.add_submodule(ctx.repo_root, entry.location, entry.local_path)
        except (RuntimeError, OSError) as e:
            logger.debug("Materializing %s failed", entry.name, exc_info=True)
            results.append(MaterializeResult(entry=entry, added=False, error=str(e)))
            continue

        if not ctx.dry_run and not ctx.inspector.is_tracked(entry.local_path):
            results.append(
                MaterializeResult(
                    entry=entry,
                    added=False,
                    error=f"{entry.local_path} is not registered in .gitmodules after add",
                )
            )
            continue

        results.append(MaterializeResult(entry=entry, added=True))

    return results


def advance(ctx: SkillSyncContext) -> None:
    """Fetch and merge upstream for all submodules in a single batch call.

    Raises:
        ExternalCallFailed: With step "advance" if the update fails. Callers
            must not generate output from the unmerged state.
    """
    logger.debug("Advancing all submodules in %s", ctx.repo_root)
    try:
        ctx.git.update_submodules_remote_merge(ctx.repo_root)
    except (RuntimeError, OSError) as e:
        raise ExternalCallFailed("advance", str(e)) from e


def diff(ctx: SkillSyncContext) -> list[DiffEntry]:
    """Report registry entries that are behind upstream.

    Entries without a local checkout, without an upstream tracking ref, or
    with nothing to merge are omitted.

    Returns:
        Entries with a positive behind count, in declaration order
    """
    report: list[DiffEntry] = []
    inspector = ctx.inspector
    for entry in ctx.registry:
        if not ctx.filesystem.exists(ctx.abspath(entry.local_path)):
            continue
        behind = inspector.commits_behind(entry.local_path)
        logger.debug("%s behind count: %s", entry.name, behind)
        if behind is not None and behind > 0:
            report.append(DiffEntry(name=entry.name, role=entry.role, behind_count=behind))
    return report

"""Generate derived skill trees from vendor submodules.

For each VENDOR entry the generatable sub-tree (`vendor/{name}/skills/`) is
mirrored into `skills/{name}/` and a GENERATION.md provenance stamp is
written next to it.

The output is a full mirror: files that disappeared from the source since the
previous run are pruned before copying. Running twice without upstream
changes produces identical bytes apart from the stamp's date.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from skillsync.core.context import SkillSyncContext
from skillsync.core.errors import (
    NoGeneratableContent,
    NotTracked,
    RevisionUnresolved,
    SkillSyncError,
)
from skillsync.core.provenance import (
    GENERATION_FILENAME,
    UNKNOWN_REVISION,
    ProvenanceStamp,
    render_provenance,
)
from skillsync.core.registry import RegistryEntry, Role

logger = logging.getLogger(__name__)


class GenerationStatus(Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileFailure:
    """A single output file that could not be written."""

    path: str
    reason: str


@dataclass(frozen=True)
class GenerationResult:
    """Per-entry outcome of a generation run.

    Fields:
        name: Registry entry name
        status: GENERATED, or SKIPPED when preconditions were not met
        output_root: Output directory relative to the repository root
        files: Relative paths copied, sorted
        pruned: Stale relative paths removed from the output before copying
        revision: Source revision recorded in the stamp (None if unresolved)
        warnings: NotTracked, NoGeneratableContent or RevisionUnresolved
        failures: Files that could not be copied, removed or written
    """

    name: str
    status: GenerationStatus
    output_root: str
    files: tuple[str, ...] = ()
    pruned: tuple[str, ...] = ()
    revision: str | None = None
    warnings: tuple[SkillSyncError, ...] = ()
    failures: tuple[FileFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


def _prune_stale(
    ctx: SkillSyncContext, output_root: Path, keep: set[str], failures: list[FileFailure]
) -> list[str]:
    """Remove output files that are no longer in the source sub-tree."""
    try:
        existing = ctx.filesystem.list_files_recursive(output_root)
    except OSError as e:
        failures.append(FileFailure(path=".", reason=f"could not list existing output: {e}"))
        return []

    stale = [rel for rel in existing if rel not in keep and rel != GENERATION_FILENAME]
    pruned: list[str] = []
    for rel in stale:
        try:
            ctx.filesystem.remove_file(output_root / rel)
        except OSError as e:
            failures.append(FileFailure(path=rel, reason=f"could not remove stale file: {e}"))
            continue
        pruned.append(rel)

    if pruned:
        try:
            ctx.filesystem.remove_empty_dirs(output_root)
        except OSError as e:
            failures.append(
                FileFailure(path=".", reason=f"could not remove empty directories: {e}")
            )
    return pruned


def generate_entry(ctx: SkillSyncContext, entry: RegistryEntry) -> GenerationResult:
    """Regenerate the output tree of one vendor entry.

    Missing preconditions are reported as a SKIPPED result with a warning, not
    raised. A source that cannot be listed is SKIPPED with a failure. Per-file
    and pruning failures are collected; remaining files are still copied.

    Raises:
        ValueError: If `entry` is not a VENDOR entry
    """
    if entry.role is not Role.VENDOR:
        raise ValueError(
            f"{entry.name} is a {entry.role.value} entry; only vendor entries generate"
        )

    layout = ctx.registry.layout
    output_rel = layout.output_root(entry.name)
    inspector = ctx.inspector

    if not inspector.is_tracked(entry.local_path):
        return GenerationResult(
            name=entry.name,
            status=GenerationStatus.SKIPPED,
            output_root=output_rel,
            warnings=(NotTracked(entry.name, entry.local_path),),
        )

    source_rel = f"{entry.local_path}/{layout.generatable_dir}"
    source_root = ctx.abspath(source_rel)
    if not ctx.filesystem.is_dir(source_root):
        return GenerationResult(
            name=entry.name,
            status=GenerationStatus.SKIPPED,
            output_root=output_rel,
            warnings=(NoGeneratableContent(entry.name, source_rel),),
        )

    output_root = ctx.abspath(output_rel)
    try:
        listed = ctx.filesystem.list_files_recursive(source_root)
    except OSError as e:
        return GenerationResult(
            name=entry.name,
            status=GenerationStatus.SKIPPED,
            output_root=output_rel,
            failures=(FileFailure(path=source_rel, reason=f"could not list source: {e}"),),
        )
    # A top-level GENERATION.md in the source would be overwritten by the stamp
    files = [rel for rel in listed if rel != GENERATION_FILENAME]
    logger.debug("Generating %s: %d files from %s", entry.name, len(files), source_rel)

    failures: list[FileFailure] = []
    pruned = _prune_stale(ctx, output_root, set(files), failures)

    copied: list[str] = []
    for rel in files:
        destination = output_root / rel
        try:
            ctx.filesystem.make_dirs(destination.parent)
            ctx.filesystem.copy_file(source_root / rel, destination)
        except OSError as e:
            logger.debug("Copying %s/%s failed", entry.name, rel, exc_info=True)
            failures.append(FileFailure(path=rel, reason=str(e)))
            continue
        copied.append(rel)

    warnings: list[SkillSyncError] = []
    revision = inspector.current_revision(entry.local_path)
    if revision is None:
        warnings.append(RevisionUnresolved(entry.name))

    stamp = ProvenanceStamp(
        source=entry.local_path,
        revision=revision if revision is not None else UNKNOWN_REVISION,
        synced=ctx.time.today(),
    )
    try:
        ctx.filesystem.make_dirs(output_root)
        ctx.filesystem.write_text(output_root / GENERATION_FILENAME, render_provenance(stamp))
    except OSError as e:
        failures.append(FileFailure(path=GENERATION_FILENAME, reason=str(e)))

    return GenerationResult(
        name=entry.name,
        status=GenerationStatus.GENERATED,
        output_root=output_rel,
        files=tuple(copied),
        pruned=tuple(pruned),
        revision=revision,
        warnings=tuple(warnings),
        failures=tuple(failures),
    )


def generate_all(ctx: SkillSyncContext) -> list[GenerationResult]:
    """Regenerate every vendor entry in declaration order."""
    return [generate_entry(ctx, entry) for entry in ctx.registry.of_role(Role.VENDOR)]

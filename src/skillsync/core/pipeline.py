"""The sync pipeline: advance all submodules, then regenerate vendor output."""

from dataclasses import dataclass

from skillsync.core.context import SkillSyncContext
from skillsync.core.errors import ExternalCallFailed
from skillsync.core.generator import GenerationResult, generate_all
from skillsync.core.reconciler import advance


@dataclass(frozen=True)
class SyncReport:
    """Outcome of a sync run.

    When `advance_error` is set no generation was attempted and
    `generations` is empty.
    """

    advance_error: ExternalCallFailed | None
    generations: list[GenerationResult]

    @property
    def ok(self) -> bool:
        return self.advance_error is None and all(result.ok for result in self.generations)


def run_sync(ctx: SkillSyncContext) -> SyncReport:
    """Advance every submodule and regenerate vendor output from the merged state."""
    try:
        advance(ctx)
    except ExternalCallFailed as e:
        return SyncReport(advance_error=e, generations=[])

    return SyncReport(advance_error=None, generations=generate_all(ctx))

import click

from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.cli.output import user_output
from skillsync.core.context import SkillSyncContext
from skillsync.core.generator import GenerationResult, GenerationStatus
from skillsync.core.pipeline import run_sync


def _report_generation(result: GenerationResult) -> None:
    for warning in result.warnings:
        user_output(click.style("Warning: ", fg="yellow") + str(warning))

    if result.status is GenerationStatus.SKIPPED:
        if not result.ok:
            user_output(click.style("✗ ", fg="red") + f"Not synced: {result.name}")
            for failure in result.failures:
                user_output(f"    {failure.path}: {failure.reason}")
        return

    summary = f"{len(result.files)} files"
    if result.pruned:
        summary += f", {len(result.pruned)} removed"
    if result.ok:
        user_output(click.style("✓ ", fg="green") + f"Synced: {result.name} ({summary})")
        return

    user_output(click.style("✗ ", fg="red") + f"Synced with errors: {result.name} ({summary})")
    for failure in result.failures:
        user_output(f"    {failure.path}: {failure.reason}")


@click.command("sync")
@click.pass_obj
@cli_error_boundary
def sync_cmd(ctx: SkillSyncContext) -> None:
    """Update all submodules and regenerate vendor skills.

    Runs `git submodule update --remote --merge`, then mirrors each vendor's
    skills/ directory into skills/<name>/ with a GENERATION.md stamp. Nothing
    is regenerated if the update fails.
    """
    user_output("Updating submodules...")
    report = run_sync(ctx)

    if report.advance_error is not None:
        user_output(
            click.style("Error: ", fg="red")
            + f"Failed to update submodules: {report.advance_error.reason}"
        )
        raise SystemExit(1)

    user_output(click.style("✓ ", fg="green") + "Submodules updated")

    for result in report.generations:
        _report_generation(result)

    if not report.ok:
        raise SystemExit(1)

    user_output(click.style("All skills synced", fg="green"))

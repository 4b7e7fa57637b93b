import click

from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.cli.output import user_output
from skillsync.core.context import SkillSyncContext
from skillsync.core.reconciler import diff


@click.command("check")
@click.pass_obj
@cli_error_boundary
def check_cmd(ctx: SkillSyncContext) -> None:
    """Fetch upstream and list submodules with commits to pull."""
    user_output("Fetching remote changes...")
    updates = diff(ctx)

    if not updates:
        user_output(click.style("All submodules are up to date", fg="green"))
        return

    user_output("Updates available:")
    for update in updates:
        name = click.style(update.name, fg="cyan", bold=True)
        user_output(f"  {name} ({update.role.value}): {update.behind_count} commits behind")

import click

from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.cli.output import user_output
from skillsync.cli.selection import prompt_selection
from skillsync.core.context import SkillSyncContext
from skillsync.core.errors import RegistryError
from skillsync.core.reconciler import materialize, partition_registry


@click.command("init")
@click.argument("names", nargs=-1)
@click.option("--all", "select_all", is_flag=True, help="Add every missing entry without asking.")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: SkillSyncContext, names: tuple[str, ...], select_all: bool) -> None:
    """Add missing registry entries as git submodules.

    With NAMES, adds only those entries. With neither NAMES nor --all, lists the
    missing entries and asks which to add.
    """
    unknown = sorted({name for name in names if ctx.registry.get(name) is None})
    if unknown:
        raise RegistryError(f"Not in skills.toml: {', '.join(unknown)}")

    partition = partition_registry(ctx)
    existing = ", ".join(entry.name for entry in partition.existing)

    selected: list[str] | None
    if names:
        tracked = {entry.name for entry in partition.existing}
        selected = [name for name in names if name not in tracked]
        if not selected:
            user_output(f"Already initialized: {existing}")
            return
    elif not partition.missing:
        user_output("All submodules already initialized")
        return
    elif select_all:
        selected = None
    else:
        selected = prompt_selection("Select projects to initialize:", partition.missing)

    results = materialize(ctx, partition.missing, selected)

    failed = 0
    for result in results:
        if result.added:
            user_output(click.style("✓ ", fg="green") + f"Added: {result.entry.name}")
        else:
            failed += 1
            user_output(
                click.style("✗ ", fg="red") + f"Failed to add {result.entry.name}: {result.error}"
            )

    if existing:
        user_output(f"Already initialized: {existing}")

    if failed:
        raise SystemExit(1)

    user_output(click.style("Submodules initialized", fg="green"))

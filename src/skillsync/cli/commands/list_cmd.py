import click
from rich.console import Console
from rich.table import Table

from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.core.context import SkillSyncContext


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SkillSyncContext) -> None:
    """Show every registry entry and whether it is checked out."""
    inspector = ctx.inspector

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("role", no_wrap=True)
    table.add_column("path", no_wrap=True)
    table.add_column("status", no_wrap=True)
    table.add_column("revision", style="bright_black", no_wrap=True)

    for entry in ctx.registry:
        state = inspector.inspect(entry, with_behind=False)
        if state.exists:
            status = "[green]tracked[/green]"
        else:
            status = "[yellow]missing[/yellow]"
        revision = state.revision[:7] if state.revision is not None else "-"
        table.add_row(entry.name, entry.role.value, entry.local_path, status, revision)

    Console().print(table)

import click

from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.cli.output import user_output
from skillsync.core.config import add_registry_entry, registry_path
from skillsync.core.registry import Role


@click.command("add")
@click.argument("name")
@click.argument("url")
@click.option(
    "--vendor",
    "role",
    flag_value=Role.VENDOR.value,
    help="Register as a vendor entry whose skills/ directory is generated.",
)
@click.option(
    "--source",
    "role",
    flag_value=Role.SOURCE.value,
    default=True,
    help="Register as a source entry (default).",
)
@click.pass_context
@cli_error_boundary
def add_cmd(click_ctx: click.Context, name: str, url: str, role: str) -> None:
    """Register NAME at URL in skills.toml."""
    repo_root = click_ctx.meta["skillsync.repo_root"]
    if click_ctx.meta.get("skillsync.dry_run", False):
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would register {role} '{name}' -> {url} in {registry_path(repo_root).name}"
        )
        return

    add_registry_entry(repo_root, name, url, Role(role))
    user_output(
        click.style("✓ ", fg="green")
        + f"Registered {role} '{name}' in {registry_path(repo_root).name}"
    )
    user_output(f"Run 'skillsync init {name}' to add the submodule.")

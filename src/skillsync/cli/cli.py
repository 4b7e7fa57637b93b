import logging
import os
from pathlib import Path

import click

from skillsync import __version__
from skillsync.cli.commands.add import add_cmd
from skillsync.cli.commands.check import check_cmd
from skillsync.cli.commands.init import init_cmd
from skillsync.cli.commands.list_cmd import list_cmd
from skillsync.cli.commands.sync import sync_cmd
from skillsync.cli.ensure import Ensure
from skillsync.cli.error_boundary import cli_error_boundary
from skillsync.cli.output import user_output
from skillsync.core.context import create_context
from skillsync.core.repo_discovery import discover_repo_root

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "SKILLSYNC_DEBUG"

# Interactive menu: action -> (command, hint)
MENU: dict[str, tuple[click.Command, str]] = {
    "sync": (sync_cmd, "Pull latest and regenerate vendor skills"),
    "init": (init_cmd, "Add new submodules"),
    "check": (check_cmd, "See available updates"),
}


def _configure_logging(debug: bool) -> None:
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def _run_menu(ctx: click.Context) -> None:
    user_output(click.style("Skills Manager", bold=True))
    for action, (_command, hint) in MENU.items():
        user_output(f"  {click.style(action, fg='cyan')}  {click.style(hint, fg='bright_black')}")
    action = click.prompt(
        "What would you like to do?",
        type=click.Choice(list(MENU)),
        default="sync",
        err=True,
    )
    ctx.invoke(MENU[action][0])


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root holding skills.toml (default: enclosing git repository).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print git and file changes instead of making them.",
)
@click.option("--debug", is_flag=True, help=f"Enable debug logging (or set {DEBUG_ENV_VAR}=1).")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, root: Path | None, dry_run: bool, debug: bool) -> None:
    """Manage source and vendor submodules and the skills generated from them."""
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        if root is not None:
            repo_root = root.resolve()
        else:
            repo_root = Ensure.not_none(
                discover_repo_root(Path.cwd()),
                "Not inside a git repository. Run from the project or pass --root.",
            )
        ctx.meta["skillsync.repo_root"] = repo_root
        ctx.meta["skillsync.dry_run"] = dry_run
        # `add` may create skills.toml, so it must not require one to exist
        if ctx.invoked_subcommand != "add":
            ctx.obj = create_context(repo_root=repo_root, dry_run=dry_run)
    else:
        ctx.meta["skillsync.repo_root"] = ctx.obj.repo_root
        ctx.meta["skillsync.dry_run"] = ctx.obj.dry_run

    if ctx.invoked_subcommand is None:
        _run_menu(ctx)


cli.add_command(add_cmd)
cli.add_command(check_cmd)
cli.add_command(init_cmd)
cli.add_command(list_cmd)
cli.add_command(sync_cmd)


def main() -> None:
    """CLI entry point used by the `skillsync` console script."""
    cli()

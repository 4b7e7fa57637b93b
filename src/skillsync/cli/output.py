"""Output utilities for CLI commands.

Human-facing progress and diagnostics go to stderr so stdout stays free for
tables and other data meant for pipes.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True)

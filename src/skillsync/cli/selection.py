"""Interactive selection prompts.

The core only accepts a list of names; this module is the adapter that turns
terminal input into that list. `parse_selection` is pure so the parsing rules
can be tested without simulating a terminal.
"""

from collections.abc import Sequence

import click

from skillsync.cli.output import user_output
from skillsync.core.registry import RegistryEntry

ALL_KEYWORD = "all"


def parse_selection(answer: str, candidates: Sequence[RegistryEntry]) -> list[str]:
    """Parse a selection answer into entry names.

    Accepts `all`, or a comma/space separated list of 1-based indexes and/or
    entry names. Duplicates collapse; result follows candidate order.

    Raises:
        click.BadParameter: On an out-of-range index or unknown name
    """
    tokens = [token for token in answer.replace(",", " ").split() if token]
    if not tokens or tokens == [ALL_KEYWORD]:
        return [entry.name for entry in candidates]

    by_name = {entry.name: entry for entry in candidates}
    chosen: set[str] = set()
    for token in tokens:
        if token in by_name:
            chosen.add(token)
            continue
        if token.isdigit():
            index = int(token)
            if 1 <= index <= len(candidates):
                chosen.add(candidates[index - 1].name)
                continue
            raise click.BadParameter(f"{index} is not between 1 and {len(candidates)}")
        raise click.BadParameter(f"unknown project '{token}'")

    return [entry.name for entry in candidates if entry.name in chosen]


def prompt_selection(message: str, candidates: Sequence[RegistryEntry]) -> list[str]:
    """Show numbered candidates and ask which to use (all preselected)."""
    user_output(message)
    for index, entry in enumerate(candidates, start=1):
        label = click.style(entry.label, fg="cyan", bold=True)
        hint = click.style(entry.location, fg="bright_black")
        user_output(f"  {index}. {label} {hint}")

    answer = click.prompt(
        "Numbers or names (comma-separated)",
        default=ALL_KEYWORD,
        err=True,
        value_proc=lambda value: parse_selection(value, candidates),
    )
    return list(answer)

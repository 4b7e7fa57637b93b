"""Provenance stamp written alongside generated output.

The stamp is a small markdown file with exactly three fields. It is kept
greppable so tooling can check staleness with plain text search:

    # Generation Info

    - **Source:** `vendor/slidev`
    - **Git SHA:** `0123abcd...`
    - **Synced:** 2024-05-01
"""

import re
from dataclasses import dataclass
from datetime import date

GENERATION_FILENAME = "GENERATION.md"
UNKNOWN_REVISION = "unknown"

_SOURCE_RE = re.compile(r"^- \*\*Source:\*\* `(?P<value>[^`]+)`$", re.MULTILINE)
_REVISION_RE = re.compile(r"^- \*\*Git SHA:\*\* `(?P<value>[^`]+)`$", re.MULTILINE)
_SYNCED_RE = re.compile(r"^- \*\*Synced:\*\* (?P<value>\d{4}-\d{2}-\d{2})$", re.MULTILINE)


@dataclass(frozen=True)
class ProvenanceStamp:
    """Where generated output came from and when it was produced."""

    source: str
    revision: str
    synced: date


def render_provenance(stamp: ProvenanceStamp) -> str:
    """Render a stamp as the contents of GENERATION.md.

    The date carries no time of day so regenerating on the same day produces
    identical bytes.
    """
    return (
        "# Generation Info\n"
        "\n"
        f"- **Source:** `{stamp.source}`\n"
        f"- **Git SHA:** `{stamp.revision}`\n"
        f"- **Synced:** {stamp.synced.isoformat()}\n"
    )


def parse_provenance(text: str) -> ProvenanceStamp | None:
    """Parse GENERATION.md contents back into a stamp.

    Returns:
        The stamp, or None if any of the three fields is missing or malformed
    """
    source = _SOURCE_RE.search(text)
    revision = _REVISION_RE.search(text)
    synced = _SYNCED_RE.search(text)
    if source is None or revision is None or synced is None:
        return None

    try:
        synced_date = date.fromisoformat(synced.group("value"))
    except ValueError:
        return None

    return ProvenanceStamp(
        source=source.group("value"),
        revision=revision.group("value"),
        synced=synced_date,
    )

"""Registry of external repositories and pure selection helpers.

The registry is the static list of submodule dependencies a project declares.
It is immutable once loaded; everything in this module is side-effect free.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from skillsync.core.errors import RegistryError


class Role(Enum):
    """How a registered repository is used."""

    SOURCE = "source"  # reference material, checked out only
    VENDOR = "vendor"  # provides a generatable sub-tree


@dataclass(frozen=True)
class Layout:
    """Directory layout of a skillsync-managed repository.

    All values are POSIX paths relative to the repository root.
    """

    sources_dir: str = "sources"
    vendor_dir: str = "vendor"
    output_dir: str = "skills"
    generatable_dir: str = "skills"

    def local_path(self, role: Role, name: str) -> str:
        """Submodule path for an entry: `sources/{name}` or `vendor/{name}`."""
        base = self.sources_dir if role is Role.SOURCE else self.vendor_dir
        return f"{base}/{name}"

    def output_root(self, name: str) -> str:
        """Generated output directory for a vendor entry: `skills/{name}`."""
        return f"{self.output_dir}/{name}"


@dataclass(frozen=True)
class RegistryEntry:
    """A named external repository declared in the registry."""

    name: str
    location: str
    role: Role
    local_path: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.role.value})"


@dataclass(frozen=True)
class Registry:
    """Ordered, validated collection of registry entries.

    Declaration order is SOURCE entries in file order followed by VENDOR
    entries in file order. Names and local paths are unique.
    """

    entries: tuple[RegistryEntry, ...]
    layout: Layout

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, name: str) -> RegistryEntry | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def of_role(self, role: Role) -> list[RegistryEntry]:
        return [entry for entry in self.entries if entry.role is role]


def _validate_name(name: str) -> None:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise RegistryError(f"Invalid registry entry name: {name!r}")


def build_registry(
    declared: Iterable[tuple[str, str, Role]],
    layout: Layout | None = None,
) -> Registry:
    """Build a Registry from (name, location, role) triples.

    Entries are ordered SOURCE first, then VENDOR, each in the order given.

    Raises:
        RegistryError: On an invalid name, a duplicate name, or two entries
            mapping to the same local path
    """
    layout = layout if layout is not None else Layout()
    declared = list(declared)
    ordered = [d for d in declared if d[2] is Role.SOURCE] + [
        d for d in declared if d[2] is Role.VENDOR
    ]

    entries: list[RegistryEntry] = []
    seen_names: set[str] = set()
    seen_paths: dict[str, str] = {}
    for name, location, role in ordered:
        _validate_name(name)
        local_path = layout.local_path(role, name)
        if local_path in seen_paths:
            raise RegistryError(
                f"Registry entries '{seen_paths[local_path]}' and '{name}' both map to {local_path}"
            )
        if name in seen_names:
            raise RegistryError(f"Duplicate registry entry name: {name}")
        seen_names.add(name)
        seen_paths[local_path] = name
        entries.append(
            RegistryEntry(name=name, location=location, role=role, local_path=local_path)
        )

    return Registry(entries=tuple(entries), layout=layout)


@dataclass(frozen=True)
class Partition:
    """Registry entries split by whether a tracked copy already exists."""

    existing: list[RegistryEntry]
    missing: list[RegistryEntry]


def partition_entries(
    entries: Iterable[RegistryEntry],
    is_tracked: Callable[[str], bool],
) -> Partition:
    """Split entries into already-tracked and missing, keeping declaration order.

    Args:
        entries: Registry entries in declaration order
        is_tracked: Predicate answering whether a local path is a tracked submodule

    Returns:
        Partition whose halves are a disjoint cover of `entries`
    """
    existing: list[RegistryEntry] = []
    missing: list[RegistryEntry] = []
    for entry in entries:
        if is_tracked(entry.local_path):
            existing.append(entry)
        else:
            missing.append(entry)
    return Partition(existing=existing, missing=missing)


def select_entries(
    candidates: Sequence[RegistryEntry],
    names: Iterable[str],
) -> list[RegistryEntry]:
    """Pick the candidates named in `names`.

    The result follows candidate order regardless of the order of `names`,
    so a selection is reproducible however it was collected.

    Raises:
        RegistryError: If a name does not match any candidate
    """
    wanted = set(names)
    known = {entry.name for entry in candidates}
    unknown = sorted(wanted - known)
    if unknown:
        raise RegistryError(f"Not available for selection: {', '.join(unknown)}")
    return [entry for entry in candidates if entry.name in wanted]

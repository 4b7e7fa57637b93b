"""Loading and editing the `skills.toml` registry file.

Example file:

    [sources]
    vue = "https://github.com/vuejs/docs"

    [vendor]
    slidev = "https://github.com/slidevjs/slidev"

    [settings]
    output_dir = "skills"
    git_timeout = 120
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit

from skillsync.core.errors import RegistryError
from skillsync.core.registry import Layout, Registry, Role, build_registry
from skillsync.core.subprocess import DEFAULT_TIMEOUT_SECONDS

REGISTRY_FILENAME = "skills.toml"

_ROLE_TABLES = {Role.SOURCE: "sources", Role.VENDOR: "vendor"}
_LAYOUT_KEYS = ("sources_dir", "vendor_dir", "output_dir", "generatable_dir")


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `skills.toml`."""

    registry: Registry
    git_timeout: float


def registry_path(repo_root: Path) -> Path:
    return repo_root / REGISTRY_FILENAME


def _read_table(data: dict[str, Any], key: str, cfg_path: Path) -> dict[str, Any]:
    table = data.get(key, {})
    if not isinstance(table, dict):
        raise RegistryError(f"[{key}] in {cfg_path} must be a table")
    return table


def _parse_layout(settings: dict[str, Any], cfg_path: Path) -> Layout:
    values: dict[str, str] = {}
    for key in _LAYOUT_KEYS:
        if key not in settings:
            continue
        value = settings[key]
        if not isinstance(value, str) or not value.strip("/"):
            raise RegistryError(f"settings.{key} in {cfg_path} must be a non-empty path")
        values[key] = value.strip("/")
    return Layout(**values)


def _parse_timeout(settings: dict[str, Any], cfg_path: Path) -> float:
    value = settings.get("git_timeout", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise RegistryError(f"settings.git_timeout in {cfg_path} must be a positive number")
    return float(value)


def load_config(repo_root: Path) -> LoadedConfig:
    """Load and validate `skills.toml` from the repository root.

    Raises:
        RegistryError: If the file is missing, is not valid TOML, or declares
            invalid entries or settings
    """
    cfg_path = registry_path(repo_root)
    if not cfg_path.exists():
        raise RegistryError(f"Registry file not found: {cfg_path}")

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise RegistryError(f"Invalid TOML in {cfg_path}: {e}") from e

    declared: list[tuple[str, str, Role]] = []
    for role, table_name in _ROLE_TABLES.items():
        for name, url in _read_table(data, table_name, cfg_path).items():
            if not isinstance(url, str) or not url:
                raise RegistryError(f"{table_name}.{name} in {cfg_path} must be a URL string")
            declared.append((str(name), url, role))

    settings = _read_table(data, "settings", cfg_path)
    return LoadedConfig(
        registry=build_registry(declared, _parse_layout(settings, cfg_path)),
        git_timeout=_parse_timeout(settings, cfg_path),
    )


def add_registry_entry(repo_root: Path, name: str, url: str, role: Role) -> None:
    """Append an entry to `skills.toml`, preserving formatting and comments.

    Creates the file if it does not exist yet.

    Raises:
        RegistryError: If the name is already registered under either role
    """
    cfg_path = registry_path(repo_root)

    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()

    for table_name in _ROLE_TABLES.values():
        if table_name in doc and name in doc[table_name]:  # type: ignore[operator]
            raise RegistryError(f"'{name}' is already registered under [{table_name}]")

    table_name = _ROLE_TABLES[role]
    if table_name not in doc:
        doc[table_name] = tomlkit.table()
    doc[table_name][name] = url  # type: ignore[index]

    # Validate the edited document before touching disk
    declared = [
        (str(entry_name), str(entry_url), entry_role)
        for entry_role, entry_table in _ROLE_TABLES.items()
        for entry_name, entry_url in doc.get(entry_table, {}).items()
    ]
    build_registry(declared, _parse_layout(doc.get("settings", {}), cfg_path))

    with cfg_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)

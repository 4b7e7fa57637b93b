"""Tests for vendor skill generation."""

from datetime import date
from pathlib import Path

import pytest

from skillsync.core.context import SkillSyncContext
from skillsync.core.errors import NoGeneratableContent, NotTracked, RevisionUnresolved
from skillsync.core.filesystem.real import RealFilesystem
from skillsync.core.generator import GenerationStatus, generate_all, generate_entry
from skillsync.core.provenance import GENERATION_FILENAME, UNKNOWN_REVISION, parse_provenance
from tests.fakes.git import FakeGit
from tests.fakes.time import FakeTime
from tests.test_utils.builders import make_context, make_registry, read_tree, write_tree

SHA = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4e5f6a1b2"


def _registry():
    return make_registry(
        sources={"alpha": "https://example.com/alpha"},
        vendor={"beta": "https://example.com/beta"},
    )


def _tracked_beta(tmp_path: Path, revision: str | None = SHA) -> FakeGit:
    revisions = {tmp_path / "vendor/beta": revision} if revision is not None else {}
    return FakeGit(submodules=["sources/alpha", "vendor/beta"], revisions=revisions)


def test_generate_mirrors_skills_and_writes_stamp(tmp_path: Path) -> None:
    """Output is the source sub-tree plus exactly one provenance stamp."""
    write_tree(
        tmp_path / "vendor/beta",
        {
            "README.md": "not generatable",
            "skills/beta/SKILL.md": "# Beta\n",
            "skills/beta/references/api.md": "api",
            "skills/logo.png": b"\x89PNG\r\n",
        },
    )
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path), today=date(2024, 5, 1))

    results = generate_all(ctx)

    assert [r.name for r in results] == ["beta"]
    result = results[0]
    assert result.status is GenerationStatus.GENERATED
    assert result.ok
    assert result.warnings == ()
    assert result.files == ("beta/SKILL.md", "beta/references/api.md", "logo.png")
    output = read_tree(tmp_path / "skills/beta")
    assert output == {
        "GENERATION.md": (
            "# Generation Info\n"
            "\n"
            "- **Source:** `vendor/beta`\n"
            f"- **Git SHA:** `{SHA}`\n"
            "- **Synced:** 2024-05-01\n"
        ).encode(),
        "beta/SKILL.md": b"# Beta\n",
        "beta/references/api.md": b"api",
        "logo.png": b"\x89PNG\r\n",
    }


def test_source_entries_never_generate(tmp_path: Path) -> None:
    write_tree(tmp_path / "sources/alpha", {"skills/x.md": "x"})
    registry = _registry()
    ctx = make_context(tmp_path, registry, _tracked_beta(tmp_path))

    with pytest.raises(ValueError, match="only vendor entries generate"):
        generate_entry(ctx, registry.entries[0])

    assert not (tmp_path / "skills/alpha").exists()


def test_generate_is_idempotent(tmp_path: Path) -> None:
    """A second run without upstream changes produces identical bytes."""
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "a", "skills/sub/b.md": "b"})
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path))

    generate_all(ctx)
    first = read_tree(tmp_path / "skills")
    second_results = generate_all(ctx)
    second = read_tree(tmp_path / "skills")

    assert first == second
    assert second_results[0].pruned == ()


def test_generate_prunes_stale_files(tmp_path: Path) -> None:
    """Files removed upstream disappear from the output on the next run."""
    write_tree(tmp_path / "vendor/beta", {"skills/keep.md": "k", "skills/old/gone.md": "g"})
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path))
    generate_all(ctx)

    (tmp_path / "vendor/beta/skills/old/gone.md").unlink()
    results = generate_all(ctx)

    assert results[0].pruned == ("old/gone.md",)
    assert sorted(read_tree(tmp_path / "skills/beta")) == [GENERATION_FILENAME, "keep.md"]
    assert not (tmp_path / "skills/beta/old").exists()


def test_generate_overwrites_changed_files(tmp_path: Path) -> None:
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "v1"})
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path))
    generate_all(ctx)

    (tmp_path / "vendor/beta/skills/a.md").write_text("v2", encoding="utf-8")
    generate_all(ctx)

    assert (tmp_path / "skills/beta/a.md").read_text(encoding="utf-8") == "v2"


def test_untracked_vendor_is_skipped(tmp_path: Path) -> None:
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "a"})
    ctx = make_context(tmp_path, _registry(), FakeGit())

    results = generate_all(ctx)

    assert results[0].status is GenerationStatus.SKIPPED
    assert isinstance(results[0].warnings[0], NotTracked)
    assert not (tmp_path / "skills").exists()


def test_vendor_without_skills_dir_is_skipped(tmp_path: Path) -> None:
    """No generatable sub-tree means a warning and no output directory."""
    write_tree(tmp_path / "vendor/beta", {"README.md": "docs only"})
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path))

    results = generate_all(ctx)

    result = results[0]
    assert result.status is GenerationStatus.SKIPPED
    assert result.ok
    assert len(result.warnings) == 1
    warning = result.warnings[0]
    assert isinstance(warning, NoGeneratableContent)
    assert warning.path == "vendor/beta/skills"
    assert not (tmp_path / "skills/beta").exists()


def test_unresolved_revision_is_recorded_as_unknown(tmp_path: Path) -> None:
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "a"})
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path, revision=None))

    results = generate_all(ctx)

    result = results[0]
    assert result.status is GenerationStatus.GENERATED
    assert result.revision is None
    assert isinstance(result.warnings[0], RevisionUnresolved)
    stamp_text = (tmp_path / "skills/beta" / GENERATION_FILENAME).read_text(encoding="utf-8")
    stamp = parse_provenance(stamp_text)
    assert stamp is not None
    assert stamp.revision == "unknown"


def test_source_generation_file_is_replaced_by_stamp(tmp_path: Path) -> None:
    """A GENERATION.md shipped in the source is not copied over the stamp."""
    write_tree(
        tmp_path / "vendor/beta",
        {"skills/GENERATION.md": "upstream stamp", "skills/a.md": "a"},
    )
    ctx = make_context(tmp_path, _registry(), _tracked_beta(tmp_path))

    results = generate_all(ctx)

    assert results[0].files == ("a.md",)
    stamp_text = (tmp_path / "skills/beta" / GENERATION_FILENAME).read_text(encoding="utf-8")
    assert stamp_text.startswith("# Generation Info")


class _FailingCopyFilesystem(RealFilesystem):
    """Real filesystem whose copy fails for chosen file names."""

    def __init__(self, failing_names: set[str]) -> None:
        self._failing_names = failing_names

    def copy_file(self, src: Path, dst: Path) -> None:
        if src.name in self._failing_names:
            raise PermissionError(f"Permission denied: '{dst}'")
        super().copy_file(src, dst)


def test_copy_failure_does_not_stop_other_files(tmp_path: Path) -> None:
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "a", "skills/b.md": "b"})
    ctx = make_context(
        tmp_path,
        _registry(),
        _tracked_beta(tmp_path),
        filesystem=_FailingCopyFilesystem({"a.md"}),
    )

    results = generate_all(ctx)

    result = results[0]
    assert not result.ok
    assert [f.path for f in result.failures] == ["a.md"]
    assert "Permission denied" in result.failures[0].reason
    assert result.files == ("b.md",)
    assert (tmp_path / "skills/beta/b.md").exists()
    assert (tmp_path / "skills/beta" / GENERATION_FILENAME).exists()


def test_generation_order_follows_declaration(tmp_path: Path) -> None:
    registry = make_registry(vendor={"zeta": "https://z", "beta": "https://b"})
    git = FakeGit(submodules=["vendor/zeta", "vendor/beta"])
    write_tree(tmp_path / "vendor", {"zeta/skills/z.md": "z", "beta/skills/b.md": "b"})
    ctx = make_context(tmp_path, registry, git)

    results = generate_all(ctx)

    assert [r.name for r in results] == ["zeta", "beta"]


def test_regenerating_on_a_later_day_only_changes_the_date(tmp_path: Path) -> None:
    write_tree(tmp_path / "vendor/beta", {"skills/a.md": "a"})
    git = _tracked_beta(tmp_path)
    time = FakeTime(date(2024, 5, 1))
    ctx = SkillSyncContext.for_test(git=git, registry=_registry(), repo_root=tmp_path, time=time)
    generate_all(ctx)
    first = read_tree(tmp_path / "skills/beta")

    time.advance_to(date(2024, 5, 2))
    generate_all(ctx)
    second = read_tree(tmp_path / "skills/beta")

    assert first["a.md"] == second["a.md"]
    assert b"2024-05-01" in first[GENERATION_FILENAME]
    assert b"2024-05-02" in second[GENERATION_FILENAME]


class _FailingEmptyDirRemovalFilesystem(RealFilesystem):
    """Real filesystem whose empty-directory cleanup fails under one output root."""

    def __init__(self, failing_root: str) -> None:
        self._failing_root = failing_root

    def remove_empty_dirs(self, root: Path) -> None:
        if root.as_posix().endswith(self._failing_root):
            raise OSError(39, "Directory not empty", str(root))
        super().remove_empty_dirs(root)


def test_prune_failure_is_isolated_to_its_entry(tmp_path: Path) -> None:
    """A failed cleanup on one vendor is recorded and later vendors still generate."""
    registry = make_registry(vendor={"alpha": "https://a", "beta": "https://b"})
    git = FakeGit(submodules=["vendor/alpha", "vendor/beta"])
    write_tree(tmp_path / "vendor", {"alpha/skills/a.md": "a", "beta/skills/b.md": "b"})
    write_tree(tmp_path / "skills/alpha", {"old/stale.md": "stale"})
    ctx = make_context(
        tmp_path,
        registry,
        git,
        filesystem=_FailingEmptyDirRemovalFilesystem("skills/alpha"),
    )

    results = generate_all(ctx)

    alpha, beta = results
    assert alpha.status is GenerationStatus.GENERATED
    assert not alpha.ok
    assert alpha.pruned == ("old/stale.md",)
    assert "could not remove empty directories" in alpha.failures[0].reason
    assert (tmp_path / "skills/alpha/a.md").exists()
    assert beta.ok
    assert beta.files == ("b.md",)
    assert (tmp_path / "skills/beta/b.md").exists()


class _UnlistableSourceFilesystem(RealFilesystem):
    """Real filesystem that cannot list one directory."""

    def __init__(self, unlistable: Path) -> None:
        self._unlistable = unlistable

    def list_files_recursive(self, root: Path) -> list[str]:
        if root == self._unlistable:
            raise PermissionError(13, "Permission denied", str(root))
        return super().list_files_recursive(root)


def test_unlistable_source_is_skipped_with_failure(tmp_path: Path) -> None:
    registry = make_registry(vendor={"alpha": "https://a", "beta": "https://b"})
    git = FakeGit(submodules=["vendor/alpha", "vendor/beta"])
    write_tree(tmp_path / "vendor", {"alpha/skills/a.md": "a", "beta/skills/b.md": "b"})
    ctx = make_context(
        tmp_path,
        registry,
        git,
        filesystem=_UnlistableSourceFilesystem(tmp_path / "vendor/alpha/skills"),
    )

    alpha, beta = generate_all(ctx)

    assert alpha.status is GenerationStatus.SKIPPED
    assert [f.path for f in alpha.failures] == ["vendor/alpha/skills"]
    assert not (tmp_path / "skills/alpha").exists()
    assert beta.ok
    assert (tmp_path / "skills/beta/b.md").exists()

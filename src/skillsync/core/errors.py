"""Error taxonomy for reconciliation and generation.

Hard errors (RegistryError, NotTracked, ExternalCallFailed) are raised.
NoGeneratableContent and RevisionUnresolved are warning-class: the generator
records them on its per-entry result instead of raising them out of a run.
"""


class SkillSyncError(Exception):
    """Base class for all skillsync errors."""


class RegistryError(SkillSyncError):
    """Registry file is missing or malformed, or a selection names unknown entries."""


class NotTracked(SkillSyncError):
    """Operation requested on an entry that has no tracked local copy."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"{name}: no tracked submodule at {path}. Run init first.")


class ExternalCallFailed(SkillSyncError):
    """A git or filesystem capability returned a failure.

    `step` names the batch step ("advance", "materialize", "generate") and
    `name` the registry entry when the failure is per-entry.
    """

    def __init__(self, step: str, reason: str, name: str | None = None) -> None:
        self.step = step
        self.reason = reason
        self.name = name
        subject = f"{step} ({name})" if name is not None else step
        super().__init__(f"{subject} failed: {reason}")


class NoGeneratableContent(SkillSyncError):
    """Vendor entry has no generatable sub-tree. Reported as a warning."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"{name}: no generatable content at {path}")


class RevisionUnresolved(SkillSyncError):
    """Source revision could not be resolved; provenance records it as unknown."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name}: could not resolve source revision")

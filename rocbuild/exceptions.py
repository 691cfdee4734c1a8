"""Build error hierarchy."""

from __future__ import annotations


class RocBuildError(Exception):
    """Base class for every error raised by the build."""


class OptimizeError(RocBuildError):
    """A single icon could not be optimized. Recovered by skipping the icon."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DuplicateIconError(RocBuildError, ValueError):
    """The same (style, name) pair was added to a manifest twice."""

    def __init__(self, style: str, name: str) -> None:
        super().__init__(f"duplicate icon {style}/{name}")
        self.style = style
        self.name = name


class OntologyError(RocBuildError):
    """The ontology file exists but cannot be parsed."""


class StageError(RocBuildError):
    """A stage hit a fatal I/O error. Aborts the run."""

    def __init__(self, stage_id: str, message: str, path: str | None = None) -> None:
        detail = f"{stage_id}: {message}"
        if path:
            detail += f" ({path})"
        super().__init__(detail)
        self.stage_id = stage_id
        self.path = path

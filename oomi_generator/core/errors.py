"""Exception hierarchy for the project generator.

Validation errors are raised before anything touches the filesystem.
Pipeline errors abort a run that is already in progress; the orchestrator
rolls back the project directory before letting them propagate.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all errors reported to the user as a single line."""


class ValidationError(GeneratorError):
    """Invalid user input (project name, theme name, settings file)."""


class DestinationExistsError(ValidationError):
    """The target project directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Folder already exists: {path}")
        self.path = path


class LicenseError(GeneratorError):
    """Missing or rejected license key."""


class PipelineError(GeneratorError):
    """A fatal failure while materializing the project."""


class DownloadError(PipelineError):
    """The WordPress archive could not be downloaded."""


class ExtractionError(PipelineError):
    """The downloaded archive could not be extracted."""


class ArchiveFormatError(PipelineError):
    """The archive does not wrap its content in a top-level directory."""


class FilesystemError(PipelineError):
    """Creating, copying or writing project files failed."""

    def __init__(self, exc: OSError) -> None:
        super().__init__(f"Filesystem error: {exc}")
        self.errno = exc.errno


class CloneError(PipelineError):
    """A theme or plugin repository could not be cloned."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to clone {url}: {reason}")
        self.url = url
        self.reason = reason

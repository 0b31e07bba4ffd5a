"""Data structures passed between the CLI and the materialization pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class ThemeSelection:
    """A theme repository to clone into ``wp-content/themes``.

    Attributes:
        source_url: Git URL of the theme repository.
        folder_name: Folder slug under ``wp-content/themes``.
        display_name: Name written into ``style.css``; None keeps the
            theme's own header untouched.
    """

    source_url: str
    folder_name: str
    display_name: str | None = None


@dataclass(frozen=True)
class PluginSelection:
    """A plugin repository to clone into ``wp-content/plugins``."""

    source_url: str
    folder_name: str


@dataclass(frozen=True)
class ProjectRequest:
    """Everything the orchestrator needs to build one project.

    Attributes:
        project_name: Folder name of the new project.
        include_gitignore: Whether to write a tailored ``.gitignore``.
        theme_selections: Themes in clone order, unique folder names.
        plugin_selections: Plugins in clone order, unique source URLs.
    """

    project_name: str
    include_gitignore: bool = True
    theme_selections: tuple[ThemeSelection, ...] = ()
    plugin_selections: tuple[PluginSelection, ...] = ()


@dataclass(frozen=True)
class ReleaseInfo:
    """Subset of the GitHub "latest release" payload that we use."""

    zipball_url: str | None = None
    tag_name: str | None = None


@dataclass(frozen=True)
class FetchedArchive:
    """A downloaded and extracted source archive inside the workspace.

    Attributes:
        archive_path: The downloaded ZIP file.
        extract_dir: Directory the ZIP was extracted into.
        root_dir: The single top-level directory holding the sources.
        source_url: URL the archive was downloaded from.
    """

    archive_path: Path
    extract_dir: Path
    root_dir: Path
    source_url: str


@dataclass
class InstallReport:
    """Folder names present under wp-content after installation."""

    themes: list[str] = field(default_factory=list[str])
    plugins: list[str] = field(default_factory=list[str])
    skipped: list[Path] = field(default_factory=list[Path])


class PipelineState(Enum):
    """Progress of a single orchestrator run."""

    START = "start"
    DIR_CREATED = "dir_created"
    ARCHIVE_FETCHED = "archive_fetched"
    MATERIALIZED = "materialized"
    REPOS_INSTALLED = "repos_installed"
    IGNORE_WRITTEN = "ignore_written"
    DONE = "done"
    FAILED = "failed"

"""Materialize a WordPress project directory.

Steps run strictly in order against a private temporary workspace:

1. create the project directory (must not exist yet)
2. download and extract the WordPress archive into the workspace
3. copy the archive's top-level directory into the project
4. clone selected themes and plugins into ``wp-content``
5. write ``.gitignore`` (optional)

The workspace is always removed. The project directory is removed when
any step fails, including on Ctrl-C, so a run either produces a complete
project or leaves nothing behind.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

from oomi_generator.core.archive_fetcher import ArchiveFetcher
from oomi_generator.core.errors import DestinationExistsError, FilesystemError
from oomi_generator.core.gitignore_generator import generate_wordpress_gitignore
from oomi_generator.core.models import InstallReport, PipelineState, ProjectRequest
from oomi_generator.core.repo_installer import GitCloner, RepositoryInstaller
from oomi_generator.core.tree_materializer import copy_dir_contents
from oomi_generator.helpers.helpers_logging import print_info, print_success
from oomi_generator.helpers.settings import GeneratorSettings
from oomi_generator.helpers.slug_utils import validate_project_name

WORKSPACE_PREFIX = "oomi-"
GITIGNORE_FILE_NAME = ".gitignore"


def _remove_tree(path: Path | None) -> None:
    """Recursively delete ``path``, ignoring errors."""
    if path is not None and path.exists():
        shutil.rmtree(path, ignore_errors=True)


class ProjectOrchestrator:
    """Run the materialization pipeline for one ``ProjectRequest``.

    Args:
        settings: Resolved generator settings.
        fetcher: Archive fetcher (default: built from ``settings``).
        installer: Repository installer (default: git with the configured
            clone timeout).
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        fetcher: ArchiveFetcher | None = None,
        installer: RepositoryInstaller | None = None,
    ) -> None:
        self.settings = settings
        self.fetcher = fetcher or ArchiveFetcher(settings)
        self.installer = installer or RepositoryInstaller(
            GitCloner(timeout=settings.clone_timeout),
        )
        self.state = PipelineState.START

    def _advance(self, state: PipelineState) -> None:
        self.state = state

    def run(self, request: ProjectRequest, base_dir: Path | None = None) -> Path:
        """Build the project and return its absolute path.

        Raises:
            ValidationError: Invalid name or existing destination; nothing
                is written in that case.
            PipelineError: A step failed; the project directory has been
                removed. Filesystem failures surface as ``FilesystemError``.
        """
        self.state = PipelineState.START
        name = validate_project_name(request.project_name)
        project_dir = (base_dir or Path.cwd()).resolve() / name
        if project_dir.exists():
            self._advance(PipelineState.FAILED)
            raise DestinationExistsError(project_dir)

        workspace: Path | None = None
        try:
            try:
                print_info(f"Creating project folder: {project_dir}")
                project_dir.mkdir()
                self._advance(PipelineState.DIR_CREATED)

                workspace = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX))
                archive = self.fetcher.fetch(workspace)
                self._advance(PipelineState.ARCHIVE_FETCHED)

                print_info("Copying files into project folder ...")
                copy_dir_contents(archive.root_dir, project_dir)
                self._advance(PipelineState.MATERIALIZED)

                report = self.installer.install(
                    project_dir,
                    themes=request.theme_selections,
                    plugins=request.plugin_selections,
                )
                self._advance(PipelineState.REPOS_INSTALLED)

                if request.include_gitignore:
                    self._write_gitignore(project_dir, report)
                self._advance(PipelineState.IGNORE_WRITTEN)
            except OSError as exc:
                raise FilesystemError(exc) from exc
        except BaseException:
            if self.state is not PipelineState.START:
                _remove_tree(project_dir)
            self._advance(PipelineState.FAILED)
            raise
        finally:
            _remove_tree(workspace)

        self._advance(PipelineState.DONE)
        print_success("WordPress project created.")
        print_info(f"Location: {project_dir}")
        return project_dir

    def _write_gitignore(self, project_dir: Path, report: InstallReport) -> None:
        content = generate_wordpress_gitignore(report.themes, report.plugins)
        (project_dir / GITIGNORE_FILE_NAME).write_text(content, encoding="utf-8")
        print_success("Created .gitignore tailored to selected themes/plugins.")

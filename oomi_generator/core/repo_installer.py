"""Clone selected themes and plugins into ``wp-content``."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable
from pathlib import Path

from oomi_generator.core.errors import CloneError
from oomi_generator.core.models import (
    InstallReport,
    PluginSelection,
    ThemeSelection,
)
from oomi_generator.core.theme_metadata import apply_theme_metadata
from oomi_generator.helpers.helpers_logging import print_info, print_warning

THEMES_SUBDIR = Path("wp-content") / "themes"
PLUGINS_SUBDIR = Path("wp-content") / "plugins"


class GitCloner:
    """Shallow-clone repositories with the ``git`` binary.

    Output is inherited from the terminal so users see git progress and
    credential prompts.
    """

    def __init__(self, timeout: float | None = 300.0, git_binary: str = "git") -> None:
        self.timeout = timeout
        self.git_binary = git_binary

    def clone(self, url: str, dest: Path) -> None:
        """Clone ``url`` into ``dest`` with depth 1.

        Raises:
            CloneError: If git is missing, exits non-zero or times out.
        """
        cmd = [self.git_binary, "clone", "--depth", "1", url, str(dest)]
        try:
            subprocess.run(cmd, check=True, timeout=self.timeout)
        except FileNotFoundError as exc:
            raise CloneError(url, f"'{self.git_binary}' command not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise CloneError(url, f"timed out after {exc.timeout:g}s") from exc
        except subprocess.CalledProcessError as exc:
            raise CloneError(url, f"git exited with code {exc.returncode}") from exc


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


class RepositoryInstaller:
    """Populate ``wp-content/themes`` and ``wp-content/plugins``.

    Clone failures propagate as ``CloneError``; existing destinations are
    skipped with a warning.
    """

    def __init__(self, cloner: GitCloner) -> None:
        self.cloner = cloner

    def _clone_unless_exists(self, url: str, dest: Path, kind: str) -> bool:
        """Return True if cloned, False if skipped because ``dest`` exists."""
        if dest.exists():
            print_warning(f"Skipping {kind} (already exists): {dest}")
            return False
        dest.parent.mkdir(parents=True, exist_ok=True)
        print_info(f"Cloning {kind} into {_display_path(dest)} ...")
        self.cloner.clone(url, dest)
        return True

    def install_themes(
        self,
        project_dir: Path,
        selections: Iterable[ThemeSelection],
        report: InstallReport,
    ) -> None:
        themes_dir = project_dir / THEMES_SUBDIR
        for theme in selections:
            dest = themes_dir / theme.folder_name
            if not self._clone_unless_exists(theme.source_url, dest, "theme"):
                report.skipped.append(dest)
            # Existing folders still get the chosen identity
            if theme.display_name:
                apply_theme_metadata(dest, theme.display_name, theme.folder_name)
            report.themes.append(theme.folder_name)

    def install_plugins(
        self,
        project_dir: Path,
        selections: Iterable[PluginSelection],
        report: InstallReport,
    ) -> None:
        plugins_dir = project_dir / PLUGINS_SUBDIR
        for plugin in selections:
            dest = plugins_dir / plugin.folder_name
            if not self._clone_unless_exists(plugin.source_url, dest, "plugin"):
                report.skipped.append(dest)
            report.plugins.append(plugin.folder_name)

    def install(
        self,
        project_dir: Path,
        themes: Iterable[ThemeSelection] = (),
        plugins: Iterable[PluginSelection] = (),
    ) -> InstallReport:
        """Install all selections and report the folder names now present."""
        report = InstallReport()
        self.install_themes(project_dir, themes, report)
        self.install_plugins(project_dir, plugins, report)
        return report

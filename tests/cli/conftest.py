"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary directory to work in,
so tests never pollute each other or the real workspace.

``run_oomi`` invokes the real ``oomi`` entry point in a subprocess, exactly
as a user would type it. Tests that use it are skipped when the entry point
is not installed.

``invoke_oomi`` drives the click group in-process through ``CliRunner`` and
routes the pipeline to a mock GitHub API and a fake git, so the whole
create-project flow runs without network access.
"""

import os
import shutil
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner, Result

from oomi_generator.core.archive_fetcher import ArchiveFetcher
from oomi_generator.core.project_orchestrator import ProjectOrchestrator
from oomi_generator.core.repo_installer import RepositoryInstaller
from oomi_generator.helpers.settings import GeneratorSettings

RunOomi = Callable[..., subprocess.CompletedProcess[str]]
InvokeOomi = Callable[..., Result]

_OOMI_AVAILABLE = shutil.which("oomi") is not None
_SKIP_REASON_OOMI = "oomi entry point is not installed (run: pip install -e .)"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty working directory and cd into it.

    After the test, the working directory is restored.
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_oomi(isolated_project: Path) -> RunOomi:
    """Return a helper that runs ``oomi <args>`` in a subprocess.

    Usage in tests::

        def test_help(run_oomi: RunOomi) -> None:
            result = run_oomi("help")
            assert result.returncode == 0

    Keyword args:
        env: Extra environment variables for the child process.
    """
    if not _OOMI_AVAILABLE:
        pytest.skip(_SKIP_REASON_OOMI)

    def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
        child_env = {k: v for k, v in os.environ.items() if k != "OOMI_KEY"}
        child_env.update(env or {})
        return subprocess.run(
            ["oomi", *args],
            cwd=isolated_project,
            capture_output=True,
            text=True,
            check=False,
            env=child_env,
        )

    return _run


@pytest.fixture()
def invoke_oomi(
    isolated_project: Path,
    github_transport: Callable[..., httpx.MockTransport],
    fake_cloner: Any,
) -> Iterator[InvokeOomi]:
    """Return a helper that invokes the click group with offline I/O.

    The helper accepts ``*args`` and an optional ``input`` string for
    prompts, and returns click's ``Result``; the command's exit code is in
    ``result.return_value``.
    """
    from oomi_generator.cli.commands import _click_cli

    transport = github_transport()

    def _offline_orchestrator(settings: GeneratorSettings) -> ProjectOrchestrator:
        return ProjectOrchestrator(
            settings,
            fetcher=ArchiveFetcher(settings, transport=transport),
            installer=RepositoryInstaller(fake_cloner),
        )

    def _invoke(*args: str, input: str | None = None) -> Result:
        return CliRunner().invoke(
            _click_cli,
            list(args),
            input=input,
            standalone_mode=False,
            catch_exceptions=False,
        )

    with patch(
        "oomi_generator.cli.create_project.ProjectOrchestrator",
        side_effect=_offline_orchestrator,
    ):
        yield _invoke

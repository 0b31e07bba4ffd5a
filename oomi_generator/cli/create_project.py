#!/usr/bin/env python3
"""
Create a WordPress project from the official GitHub repository.

Usage:
    # Interactive: prompts for name, themes, plugins and .gitignore
    oomi create-project

    # Minimal, with one extra theme repository
    oomi create-project --name demo --theme https://github.com/acme/starter-theme

    # Scripted
    oomi create-project --name demo --plugin git@github.com:acme/sso.git \\
        --no-gitignore --no-input
"""

from __future__ import annotations

from pathlib import Path

import click

from oomi_generator.cli.prompts import collect_project_request
from oomi_generator.core.errors import GeneratorError
from oomi_generator.core.project_orchestrator import ProjectOrchestrator
from oomi_generator.helpers.helpers_logging import print_error, print_header
from oomi_generator.helpers.license import validate_license
from oomi_generator.helpers.settings import load_settings


def run_create_project(
    *,
    project_name: str | None,
    theme_urls: tuple[str, ...] = (),
    plugin_urls: tuple[str, ...] = (),
    include_gitignore: bool | None = None,
    interactive: bool = True,
    cwd: Path | None = None,
) -> int:
    """Validate the license, collect the request and build the project.

    Returns:
        0 on success, 1 on any license, validation or pipeline failure.
    """
    base_dir = cwd or Path.cwd()

    license_result = validate_license(cwd=base_dir)
    if not license_result.valid:
        print_error(license_result.message)
        return 1

    print_header("🚀 oomi: create WordPress project")

    try:
        settings = load_settings(base_dir)
        request = collect_project_request(
            settings,
            project_name=project_name,
            theme_urls=theme_urls,
            plugin_urls=plugin_urls,
            include_gitignore=include_gitignore,
            interactive=interactive,
        )
        ProjectOrchestrator(settings).run(request, base_dir=base_dir)
    except GeneratorError as exc:
        print_error(str(exc))
        return 1
    return 0


@click.command(
    name="create-project",
    help="Create a WordPress project from the official GitHub repository",
)
@click.option("--name", "project_name",
              help="Project name (if omitted, you will be prompted)")
@click.option("--theme", "theme_urls", multiple=True, metavar="GIT_REPO_URL",
              help="Theme git repository URL (repeatable)")
@click.option("--plugin", "plugin_urls", multiple=True, metavar="GIT_REPO_URL",
              help="Plugin git repository URL (repeatable)")
@click.option("--gitignore/--no-gitignore", "include_gitignore", default=None,
              help="Write a .gitignore that keeps only the selected themes/plugins")
@click.option("--no-input", is_flag=True,
              help="Do not prompt; use flags and defaults only")
def create_project_cmd(
    project_name: str | None,
    theme_urls: tuple[str, ...],
    plugin_urls: tuple[str, ...],
    include_gitignore: bool | None,
    no_input: bool,
) -> int:
    return run_create_project(
        project_name=project_name,
        theme_urls=theme_urls,
        plugin_urls=plugin_urls,
        include_gitignore=include_gitignore,
        interactive=not no_input,
    )

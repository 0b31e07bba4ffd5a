"""Collect a ``ProjectRequest`` from CLI flags and interactive prompts.

Interactive mode asks for anything the flags did not answer: the project
name, which catalog themes and plugins to include, a display name per
theme, and whether to write ``.gitignore``. With ``--no-input`` the flags
are used as-is and themes keep their repository folder names.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import click

from oomi_generator.core.errors import ValidationError
from oomi_generator.core.models import PluginSelection, ProjectRequest, ThemeSelection
from oomi_generator.helpers.settings import CatalogEntry, GeneratorSettings
from oomi_generator.helpers.slug_utils import (
    derive_repo_name,
    slugify,
    title_from_slug,
    validate_display_name,
    validate_project_name,
)


def _unique(urls: Iterable[str]) -> list[str]:
    """Strip, drop blanks and de-duplicate while keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for url in urls:
        cleaned = str(url).strip()
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result


def _as_click_validator(check: Callable[[str], str]) -> Callable[[str], str]:
    """Turn a ``ValidationError`` into ``click.BadParameter`` so click re-prompts."""

    def _validate(value: str) -> str:
        try:
            return check(value)
        except ValidationError as exc:
            raise click.BadParameter(str(exc)) from exc

    return _validate


def _select_from_catalog(
    entries: Iterable[CatalogEntry],
    kind: str,
    default: bool,
) -> list[str]:
    selected: list[str] = []
    for entry in entries:
        if click.confirm(f"Include {kind} '{entry.name}'?", default=default):
            selected.append(entry.url)
    return selected


def _default_display_name(url: str, used_slugs: set[str]) -> str:
    """Title-cased repo name, suffixed with a counter if its slug is taken."""
    base_title = title_from_slug(derive_repo_name(url))
    candidate = base_title
    suffix = 1
    while slugify(candidate) in used_slugs:
        candidate = f"{base_title} {suffix}"
        suffix += 1
    return candidate


def prompt_theme_selections(urls: Iterable[str]) -> tuple[ThemeSelection, ...]:
    """Ask for a display name per theme; folder names come from the names."""
    used_slugs: set[str] = set()
    selections: list[ThemeSelection] = []

    for url in urls:
        def _check(value: str) -> str:
            name = validate_display_name(value)
            if slugify(name) in used_slugs:
                raise ValidationError(
                    "Each theme must have a unique name (slug would collide)"
                )
            return name

        display_name = click.prompt(
            f"Set theme name (shown in WordPress) for ({derive_repo_name(url)})",
            default=_default_display_name(url, used_slugs),
            value_proc=_as_click_validator(_check),
        )
        folder_name = slugify(display_name)
        used_slugs.add(folder_name)
        selections.append(ThemeSelection(url, folder_name, display_name))

    return tuple(selections)


def theme_selections_from_urls(urls: Iterable[str]) -> tuple[ThemeSelection, ...]:
    """Themes named after their repositories, without a display-name rewrite.

    Raises:
        ValidationError: If two URLs resolve to the same folder name.
    """
    selections: list[ThemeSelection] = []
    used: set[str] = set()
    for url in urls:
        folder_name = derive_repo_name(url)
        if folder_name in used:
            raise ValidationError(
                f"Two themes resolve to the same folder name '{folder_name}'"
            )
        used.add(folder_name)
        selections.append(ThemeSelection(url, folder_name))
    return tuple(selections)


def plugin_selections_from_urls(urls: Iterable[str]) -> tuple[PluginSelection, ...]:
    """Plugins in first-seen order; repeated URLs are dropped.

    Raises:
        ValidationError: If two different URLs resolve to the same folder name.
    """
    selections: list[PluginSelection] = []
    used: set[str] = set()
    for url in _unique(urls):
        folder_name = derive_repo_name(url)
        if folder_name in used:
            raise ValidationError(
                f"Two plugins resolve to the same folder name '{folder_name}'"
            )
        used.add(folder_name)
        selections.append(PluginSelection(url, folder_name))
    return tuple(selections)


def collect_project_request(
    settings: GeneratorSettings,
    *,
    project_name: str | None = None,
    theme_urls: Iterable[str] = (),
    plugin_urls: Iterable[str] = (),
    include_gitignore: bool | None = None,
    interactive: bool = True,
) -> ProjectRequest:
    """Build a validated request, prompting for missing answers if allowed.

    Raises:
        ValidationError: For colliding plugin folders, and in
            non-interactive mode for a missing or invalid name or colliding
            theme folders.
        click.Abort: When the user cancels a prompt.
    """
    if not interactive:
        if not project_name:
            raise ValidationError("Project name is required (use --name)")
        return ProjectRequest(
            project_name=validate_project_name(project_name),
            include_gitignore=True if include_gitignore is None else include_gitignore,
            theme_selections=theme_selections_from_urls(_unique(theme_urls)),
            plugin_selections=plugin_selections_from_urls(plugin_urls),
        )

    if project_name:
        name = validate_project_name(project_name)
    else:
        name = click.prompt(
            "Enter project name",
            value_proc=_as_click_validator(validate_project_name),
        )

    catalog_themes: list[str] = []
    if settings.themes and click.confirm("Do you want to inject the theme?", default=True):
        catalog_themes = _select_from_catalog(settings.themes, "theme", default=True)
    catalog_plugins = _select_from_catalog(settings.plugins, "plugin", default=False)

    if include_gitignore is None:
        include_gitignore = click.confirm(
            "Do you want to include .gitignore in WordPress installation?",
            default=True,
        )

    return ProjectRequest(
        project_name=name,
        include_gitignore=include_gitignore,
        theme_selections=prompt_theme_selections(_unique([*catalog_themes, *theme_urls])),
        plugin_selections=plugin_selections_from_urls([*catalog_plugins, *plugin_urls]),
    )

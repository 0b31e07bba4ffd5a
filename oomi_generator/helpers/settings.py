"""Static configuration for the project generator.

Defaults cover the upstream WordPress repository, network/clone timeouts
and the built-in theme/plugin catalog. A ``.oomi.yaml`` file in the working
directory and a few environment variables can override them.

Example ``.oomi.yaml``::

    upstream_repo: WordPress/WordPress
    timeouts:
      release: 30
      download: 120
      clone: 300
    themes:
      - name: my-theme
        url: https://github.com/acme/my-theme
    plugins:
      - name: my-plugin
        url: https://github.com/acme/my-plugin
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, cast

from oomi_generator.core.errors import ValidationError
from oomi_generator.helpers.yaml_loader import ConfigDict, load_yaml_file

SETTINGS_FILE_NAME = ".oomi.yaml"

# Environment overrides
ENV_CLONE_TIMEOUT = "OOMI_CLONE_TIMEOUT"
ENV_DOWNLOAD_TIMEOUT = "OOMI_DOWNLOAD_TIMEOUT"
ENV_GITHUB_TOKENS = ("GH_TOKEN", "GITHUB_TOKEN")


@dataclass(frozen=True)
class CatalogEntry:
    """A theme or plugin offered in the interactive selection."""

    name: str
    url: str


DEFAULT_THEMES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "oomi-boilerplate-theme",
        "https://github.com/shehrozasmat-star/oomi-boilerplate-theme",
    ),
)

DEFAULT_PLUGINS: tuple[CatalogEntry, ...] = (
    CatalogEntry("oomi-sso", "https://github.com/shehrozasmat-star/oomi-sso"),
    CatalogEntry("oomi-listing", "https://github.com/shehrozasmat-star/oomi-listing"),
)


@dataclass(frozen=True)
class GeneratorSettings:
    """Resolved settings for one invocation.

    Attributes:
        upstream_repo: ``owner/repo`` of the WordPress source on GitHub.
        user_agent: User-Agent header sent to GitHub.
        release_timeout: Seconds allowed for the release metadata call.
        download_timeout: Seconds allowed for the archive download.
        clone_timeout: Seconds allowed for each ``git clone``.
        max_redirects: Redirect hops followed while downloading.
        github_token: Optional token for authenticated API calls.
        themes: Theme catalog shown in the interactive prompt.
        plugins: Plugin catalog shown in the interactive prompt.
    """

    upstream_repo: str = "WordPress/WordPress"
    user_agent: str = "oomi-cli"
    release_timeout: float = 30.0
    download_timeout: float = 120.0
    clone_timeout: float = 300.0
    max_redirects: int = 5
    github_token: str | None = None
    themes: tuple[CatalogEntry, ...] = field(default=DEFAULT_THEMES)
    plugins: tuple[CatalogEntry, ...] = field(default=DEFAULT_PLUGINS)

    @property
    def release_api_url(self) -> str:
        return f"https://api.github.com/repos/{self.upstream_repo}/releases/latest"

    @property
    def fallback_zipball_url(self) -> str:
        return f"https://api.github.com/repos/{self.upstream_repo}/zipball"


def _positive_number(value: object, label: str) -> float:
    try:
        number = float(cast(Any, value))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must be a number, got {value!r}") from exc
    if number <= 0:
        raise ValidationError(f"{label} must be greater than zero")
    return number


def _parse_catalog(raw: object, label: str) -> tuple[CatalogEntry, ...]:
    if not isinstance(raw, list):
        raise ValidationError(f"'{label}' must be a list of {{name, url}} entries")
    entries: list[CatalogEntry] = []
    for item in cast(list[object], raw):
        if not isinstance(item, dict):
            raise ValidationError(f"Each '{label}' entry must be a mapping")
        item_dict = cast(dict[str, object], item)
        url = str(item_dict.get("url") or "").strip()
        if not url:
            raise ValidationError(f"'{label}' entry is missing 'url'")
        name = str(item_dict.get("name") or "").strip() or url
        entries.append(CatalogEntry(name, url))
    return tuple(entries)


def _apply_file(settings: GeneratorSettings, data: ConfigDict) -> GeneratorSettings:
    updates: dict[str, Any] = {}

    if "upstream_repo" in data:
        repo = str(data["upstream_repo"] or "").strip().strip("/")
        if repo.count("/") != 1:
            raise ValidationError("'upstream_repo' must look like 'owner/repo'")
        updates["upstream_repo"] = repo
    if "user_agent" in data:
        updates["user_agent"] = str(data["user_agent"])
    if "max_redirects" in data:
        updates["max_redirects"] = int(_positive_number(data["max_redirects"], "max_redirects"))

    timeouts = data.get("timeouts")
    if timeouts is not None:
        if not isinstance(timeouts, dict):
            raise ValidationError("'timeouts' must be a mapping")
        for key in ("release", "download", "clone"):
            if key in timeouts:
                updates[f"{key}_timeout"] = _positive_number(timeouts[key], f"timeouts.{key}")

    if "themes" in data:
        updates["themes"] = _parse_catalog(data["themes"], "themes")
    if "plugins" in data:
        updates["plugins"] = _parse_catalog(data["plugins"], "plugins")

    return replace(settings, **updates)


def _apply_env(settings: GeneratorSettings, environ: dict[str, str]) -> GeneratorSettings:
    updates: dict[str, Any] = {}
    if environ.get(ENV_CLONE_TIMEOUT):
        updates["clone_timeout"] = _positive_number(environ[ENV_CLONE_TIMEOUT], ENV_CLONE_TIMEOUT)
    if environ.get(ENV_DOWNLOAD_TIMEOUT):
        updates["download_timeout"] = _positive_number(
            environ[ENV_DOWNLOAD_TIMEOUT], ENV_DOWNLOAD_TIMEOUT,
        )
    for var in ENV_GITHUB_TOKENS:
        token = environ.get(var, "").strip()
        if token:
            updates["github_token"] = token
            break
    return replace(settings, **updates)


def load_settings(
    cwd: Path | None = None,
    environ: dict[str, str] | None = None,
) -> GeneratorSettings:
    """Build settings from defaults, ``.oomi.yaml`` and the environment.

    Args:
        cwd: Directory searched for ``.oomi.yaml`` (default: current dir).
        environ: Environment mapping (default: ``os.environ``).

    Raises:
        ValidationError: If the settings file or an override is malformed.
    """
    base_dir = cwd or Path.cwd()
    env = dict(os.environ) if environ is None else environ

    settings = GeneratorSettings()
    settings_file = base_dir / SETTINGS_FILE_NAME
    if settings_file.is_file():
        settings = _apply_file(settings, load_yaml_file(settings_file))
    return _apply_env(settings, env)

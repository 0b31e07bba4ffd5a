"""Name helpers for project, theme and plugin folders.

Usage:
    >>> derive_repo_name("git@github.com:acme/starter-theme.git")
    'starter-theme'
    >>> slugify("My Théme!! 2")
    'my-theme-2'
    >>> title_from_slug("starter-theme")
    'Starter Theme'
"""

from __future__ import annotations

import re
import unicodedata

from oomi_generator.core.errors import ValidationError

DEFAULT_REPO_NAME = "theme"

# Characters that cannot appear in a folder name on any supported platform
RESERVED_NAME_CHARS = '\\/:*?"<>|'

_RESERVED_RE = re.compile(f"[{re.escape(RESERVED_NAME_CHARS)}]")
_GIT_SUFFIX_RE = re.compile(r"([^/:]+)\.git$")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_SEPARATORS_RE = re.compile(r"[-_]+")
_WHITESPACE_RE = re.compile(r"\s+")


def derive_repo_name(repo_url: str) -> str:
    """Return the repository name for an https, ssh or git URL.

    Never fails: anything that does not yield a name falls back to
    ``"theme"``.
    """
    name = repo_url.strip().rstrip("/")
    match = _GIT_SUFFIX_RE.search(name)
    if match:
        return match.group(1)
    last = name.split("/")[-1]
    return last.removesuffix(".git") or DEFAULT_REPO_NAME


def slugify(text: str) -> str:
    """Convert a display name into a lowercase, hyphenated folder slug.

    Can return an empty string (e.g. for ``"!!!"``); callers must reject it.
    """
    normalized = unicodedata.normalize("NFKD", str(text))
    stripped = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = _NON_SLUG_RE.sub("-", stripped.lower().strip())
    return slug.strip("-")


def title_from_slug(slug: str) -> str:
    """Turn ``my-cool_theme`` into ``My Cool Theme``."""
    spaced = _SEPARATORS_RE.sub(" ", str(slug))
    spaced = _WHITESPACE_RE.sub(" ", spaced).strip()
    words = [word for word in spaced.split(" ") if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def validate_project_name(name: str) -> str:
    """Return the stripped project name or raise ``ValidationError``."""
    cleaned = str(name or "").strip()
    if not cleaned:
        raise ValidationError("Project name is required")
    if _RESERVED_RE.search(cleaned):
        raise ValidationError(
            "Project name cannot contain path separators or special characters"
        )
    return cleaned


def validate_display_name(name: str) -> str:
    """Return the stripped theme display name or raise ``ValidationError``."""
    cleaned = str(name or "").strip()
    if not cleaned:
        raise ValidationError("Theme name is required")
    if _RESERVED_RE.search(cleaned):
        raise ValidationError(
            "Name cannot contain path separators or special characters"
        )
    if not slugify(cleaned):
        raise ValidationError(
            "Resulting folder name is empty; choose another name"
        )
    return cleaned

"""Rewrite the ``style.css`` header of a cloned theme.

WordPress reads a theme's identity from the comment block at the top of
``style.css``::

    /*
    Theme Name: Starter
    Text Domain: starter
    */

After cloning, the header is updated so that WordPress shows the display
name chosen by the user and uses the folder slug as text domain. Problems
here only produce warnings.
"""

from __future__ import annotations

import re
from pathlib import Path

from oomi_generator.helpers.helpers_logging import print_warning

STYLESHEET_NAME = "style.css"

# The metadata header is expected within the first lines of the stylesheet
HEADER_SCAN_LIMIT = 200

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_THEME_NAME_RE = re.compile(r"^(\s*\*?\s*)Theme\s*Name\s*:\s*(.*)$", re.IGNORECASE)
_TEXT_DOMAIN_RE = re.compile(r"^(\s*\*?\s*)Text\s*Domain\s*:\s*(.*)$", re.IGNORECASE)
_HEADER_END_RE = re.compile(r"^\s*\*/\s*$")


def _find_header_field(
    lines: list[str],
    pattern: re.Pattern[str],
) -> tuple[int, re.Match[str]] | None:
    """Scan the first HEADER_SCAN_LIMIT lines or up to the ``*/`` terminator."""
    for index, line in enumerate(lines[:HEADER_SCAN_LIMIT]):
        match = pattern.match(line)
        if match:
            return index, match
        if _HEADER_END_RE.match(line):
            break
    return None


def rewrite_style_header(raw: str, display_name: str, slug: str | None) -> str:
    """Return ``raw`` with Theme Name and Text Domain set.

    Args:
        raw: Current stylesheet content.
        display_name: Value for ``Theme Name``.
        slug: Value for ``Text Domain``; None leaves the text domain alone.
    """
    lines = _LINE_SPLIT_RE.split(raw)
    changed = False

    name_index: int | None = None
    name_prefix = ""
    name_found = _find_header_field(lines, _THEME_NAME_RE)
    if name_found is not None:
        name_index, name_match = name_found
        name_prefix = name_match.group(1)
        lines[name_index] = f"{name_prefix}Theme Name: {display_name}"
        changed = True

    if slug:
        domain_found = _find_header_field(lines, _TEXT_DOMAIN_RE)
        if domain_found is not None:
            domain_index, domain_match = domain_found
            lines[domain_index] = f"{domain_match.group(1)}Text Domain: {slug}"
            changed = True
        elif name_index is not None:
            lines.insert(name_index + 1, f"{name_prefix}Text Domain: {slug}")
            changed = True

    if changed:
        return "\n".join(lines)

    header = ["/*", f"Theme Name: {display_name}"]
    if slug:
        header.append(f"Text Domain: {slug}")
    header.extend(["*/", ""])
    return "\n".join(header) + raw


def apply_theme_metadata(theme_dir: Path, display_name: str, slug: str | None) -> bool:
    """Update ``style.css`` in ``theme_dir``.

    Returns:
        True if the stylesheet was rewritten, False if it was missing or
        could not be updated (a warning is printed in both cases).
    """
    style_path = theme_dir / STYLESHEET_NAME
    if not style_path.is_file():
        print_warning(
            f"{STYLESHEET_NAME} not found in {theme_dir.name}; cannot set Theme Name."
        )
        return False

    try:
        raw = style_path.read_text(encoding="utf-8")
        style_path.write_text(
            rewrite_style_header(raw, display_name, slug),
            encoding="utf-8",
            newline="",
        )
    except (OSError, UnicodeDecodeError) as exc:
        print_warning(f"Could not update theme metadata in {theme_dir.name}: {exc}")
        return False
    return True

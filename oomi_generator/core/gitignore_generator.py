"""Generate the project ``.gitignore``.

The generated file ignores the whole WordPress tree except the themes and
plugins that were installed for this project.
"""

from __future__ import annotations

from collections.abc import Iterable


def _clean_names(names: Iterable[str]) -> list[str]:
    cleaned: list[str] = []
    for name in names:
        stripped = str(name).strip()
        if stripped:
            cleaned.append(stripped)
    return cleaned


def generate_wordpress_gitignore(
    theme_names: Iterable[str] = (),
    plugin_names: Iterable[str] = (),
) -> str:
    """Return ``.gitignore`` content keeping only the given theme/plugin folders.

    Names keep their input order; blank names are skipped. The result
    always ends with exactly one newline.
    """
    lines = [
        "# WordPress project: ignore everything except selected themes/plugins",
        "/*",
        "!.gitignore",
        "!wp-content/",
        "",
        "# In wp-content, ignore all except themes and plugins",
        "wp-content/*",
        "!wp-content/themes/",
        "!wp-content/plugins/",
        "",
        "# Ignore all themes except the selected ones",
        "wp-content/themes/*",
    ]
    lines.extend(f"!wp-content/themes/{name}/**" for name in _clean_names(theme_names))
    lines.extend([
        "",
        "# Ignore all plugins except the selected ones",
        "wp-content/plugins/*",
    ])
    lines.extend(f"!wp-content/plugins/{name}/**" for name in _clean_names(plugin_names))
    return "\n".join(lines) + "\n"

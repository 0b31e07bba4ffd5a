"""Copy the extracted WordPress sources into the project directory."""

from __future__ import annotations

import shutil
from pathlib import Path


def copy_dir_contents(src_dir: Path, dest_dir: Path) -> None:
    """Recursively copy the contents of ``src_dir`` into ``dest_dir``.

    Symbolic links are recreated rather than followed. ``dest_dir`` may
    already exist (the orchestrator creates it empty); missing intermediate
    directories are created.

    Raises:
        OSError: On any filesystem failure (``shutil.Error`` included).
    """
    shutil.copytree(src_dir, dest_dir, symlinks=True, dirs_exist_ok=True)

"""License gate for the oomi CLI.

The key is read from ``OOMI_KEY`` or, failing that, from a ``.oomi-license``
file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LICENSE_ENV_VAR = "OOMI_KEY"
LICENSE_FILE_NAME = ".oomi-license"

VALID_KEYS: frozenset[str] = frozenset({
    "OOMI-2025-T@RG3T",
    "OOMI-2025-TG$YSt3M",
})


@dataclass(frozen=True)
class LicenseResult:
    """Outcome of a license check."""

    valid: bool
    key: str | None
    message: str = ""


def _read_license_file(cwd: Path) -> str | None:
    file_path = cwd / LICENSE_FILE_NAME
    try:
        if file_path.is_file():
            content = file_path.read_text(encoding="utf-8").strip()
            return content or None
    except (OSError, UnicodeDecodeError):
        # Unreadable file counts as missing key
        return None
    return None


def get_license_key(
    cwd: Path | None = None,
    environ: dict[str, str] | None = None,
) -> str | None:
    """Return the configured license key, env var first."""
    env = os.environ if environ is None else environ
    env_key = str(env.get(LICENSE_ENV_VAR, "")).strip()
    if env_key:
        return env_key
    return _read_license_file(cwd or Path.cwd())


def validate_license(
    cwd: Path | None = None,
    environ: dict[str, str] | None = None,
) -> LicenseResult:
    """Check the configured key against the issued keys."""
    key = get_license_key(cwd, environ)
    if not key:
        return LicenseResult(
            valid=False,
            key=None,
            message=(
                f"Missing license key. Set {LICENSE_ENV_VAR} env var or provide "
                f"a {LICENSE_FILE_NAME} file with a valid key."
            ),
        )
    if key not in VALID_KEYS:
        return LicenseResult(valid=False, key=key, message="Invalid license key. Access denied.")
    return LicenseResult(valid=True, key=key)

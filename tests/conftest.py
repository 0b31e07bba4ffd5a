"""Shared fixtures for the oomi test suite.

Provides:
- ``settings``: generator settings with short timeouts.
- ``wordpress_zip``: bytes of a small GitHub-style zipball.
- ``github_transport``: factory for an ``httpx.MockTransport`` that serves
  release metadata and the zipball.
- ``fake_cloner``: a ``GitCloner`` stand-in that creates folders instead of
  running git.
- ``isolated_cwd``: chdir into ``tmp_path`` for the duration of a test.
"""

from __future__ import annotations

import io
import os
import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

from oomi_generator.core.errors import CloneError
from oomi_generator.helpers.settings import GeneratorSettings

RELEASE_URL = "https://api.github.com/repos/WordPress/WordPress/releases/latest"
RELEASE_ZIPBALL_URL = "https://api.github.com/repos/WordPress/WordPress/zipball/6.6.2"
FALLBACK_ZIPBALL_URL = "https://api.github.com/repos/WordPress/WordPress/zipball"
ARCHIVE_ROOT = "WordPress-WordPress-1a2b3c4"

TransportFactory = Callable[..., httpx.MockTransport]


# ---------------------------------------------------------------------------
# Settings / cwd
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings() -> GeneratorSettings:
    return GeneratorSettings(release_timeout=1.0, download_timeout=1.0, clone_timeout=5.0)


@pytest.fixture()
def isolated_cwd(tmp_path: Path) -> Iterator[Path]:
    """Run the test from inside ``tmp_path`` and restore the cwd afterwards."""
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")


# ---------------------------------------------------------------------------
# Archive / HTTP
# ---------------------------------------------------------------------------


def build_zip(files: dict[str, str]) -> bytes:
    """Return ZIP bytes containing ``files`` (path -> text)."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture()
def wordpress_zip() -> bytes:
    return build_zip({
        f"{ARCHIVE_ROOT}/index.php": "<?php // WordPress\n",
        f"{ARCHIVE_ROOT}/wp-config-sample.php": "<?php // config\n",
        f"{ARCHIVE_ROOT}/wp-content/index.php": "<?php // Silence is golden.\n",
        f"{ARCHIVE_ROOT}/wp-content/themes/twentytwentyfour/style.css": (
            "/*\nTheme Name: Twenty Twenty-Four\n*/\n"
        ),
        f"{ARCHIVE_ROOT}/wp-content/plugins/hello.php": "<?php // Hello Dolly\n",
    })


@pytest.fixture()
def github_transport(wordpress_zip: bytes) -> TransportFactory:
    """Build a mock GitHub API.

    Keyword args:
        release_status: HTTP status for the release endpoint (default 200).
        zip_status: HTTP status for zipball downloads (default 200).
        zip_body: Body served for zipball downloads.
        requests: Optional list that receives every requested URL.
    """

    def _factory(
        *,
        release_status: int = 200,
        zip_status: int = 200,
        zip_body: bytes | None = None,
        requests: list[str] | None = None,
    ) -> httpx.MockTransport:
        body = wordpress_zip if zip_body is None else zip_body

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            if requests is not None:
                requests.append(url)
            if url == RELEASE_URL:
                if release_status != 200:
                    return httpx.Response(release_status, json={"message": "rate limited"})
                return httpx.Response(
                    200,
                    json={"tag_name": "6.6.2", "zipball_url": RELEASE_ZIPBALL_URL},
                )
            if url in (RELEASE_ZIPBALL_URL, FALLBACK_ZIPBALL_URL):
                return httpx.Response(zip_status, content=body)
            return httpx.Response(404)

        return httpx.MockTransport(handler)

    return _factory


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------


class FakeCloner:
    """Records clones and creates a minimal repository folder."""

    def __init__(
        self,
        style_css: str | None = "/*\nTheme Name: Old Name\nAuthor: Acme\n*/\nbody {}\n",
        fail_urls: tuple[str, ...] = (),
    ) -> None:
        self.style_css = style_css
        self.fail_urls = fail_urls
        self.calls: list[tuple[str, Path]] = []

    def clone(self, url: str, dest: Path) -> None:
        self.calls.append((url, dest))
        if url in self.fail_urls:
            raise CloneError(url, "git exited with code 128")
        dest.mkdir(parents=True)
        if self.style_css is not None:
            (dest / "style.css").write_text(self.style_css, encoding="utf-8")


@pytest.fixture()
def fake_cloner() -> FakeCloner:
    return FakeCloner()


@pytest.fixture()
def make_cloner() -> Callable[..., FakeCloner]:
    """Factory for ``FakeCloner`` with custom stylesheet or failing URLs."""
    return FakeCloner

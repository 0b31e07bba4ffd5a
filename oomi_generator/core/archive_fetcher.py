"""Download and unpack the latest WordPress source archive from GitHub.

Usage:
    >>> fetcher = ArchiveFetcher(load_settings())
    >>> archive = fetcher.fetch(workspace)
    >>> archive.root_dir  # e.g. workspace/extracted/WordPress-WordPress-1a2b3c4
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import cast

import httpx

from oomi_generator.core.errors import (
    ArchiveFormatError,
    DownloadError,
    ExtractionError,
)
from oomi_generator.core.models import FetchedArchive, ReleaseInfo
from oomi_generator.helpers.helpers_logging import print_info, print_warning
from oomi_generator.helpers.settings import GeneratorSettings

ARCHIVE_FILE_NAME = "wordpress.zip"
EXTRACT_DIR_NAME = "extracted"
CHUNK_SIZE = 64 * 1024


def _github_headers(settings: GeneratorSettings) -> dict[str, str]:
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github+json",
    }
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    return headers


def extract_archive(zip_path: Path, target_dir: Path) -> None:
    """Extract ``zip_path`` into ``target_dir``.

    Raises:
        ExtractionError: If the archive is corrupt, truncated or unreadable.
    """
    target_dir.mkdir(parents=True, exist_ok=True)
    try:
        with zipfile.ZipFile(zip_path) as archive:
            archive.extractall(target_dir)
    except (zipfile.BadZipFile, EOFError, OSError) as exc:
        raise ExtractionError(f"Failed to extract {zip_path.name}: {exc}") from exc


def find_top_level_dir(extract_dir: Path) -> Path:
    """Return the directory that GitHub wraps around zipball contents.

    Raises:
        ArchiveFormatError: If the extraction has no top-level directory.
    """
    directories = sorted(entry for entry in extract_dir.iterdir() if entry.is_dir())
    if not directories:
        raise ArchiveFormatError(
            "Unexpected archive structure: no top-level directory found inside the ZIP."
        )
    return directories[0]


class ArchiveFetcher:
    """Resolve, download and extract the WordPress archive.

    Args:
        settings: Upstream repository, timeouts and redirect bound.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    def _build_client(self) -> httpx.Client:
        return httpx.Client(
            transport=self._transport,
            headers=_github_headers(self.settings),
            follow_redirects=True,
            max_redirects=self.settings.max_redirects,
        )

    def fetch_latest_release(self, client: httpx.Client) -> ReleaseInfo | None:
        """Return latest release metadata, or None when GitHub is unavailable.

        Failure here is not fatal: the caller falls back to the default
        branch zipball.
        """
        url = self.settings.release_api_url
        try:
            response = client.get(url, timeout=self.settings.release_timeout)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            print_warning(
                "Failed to fetch latest release info, falling back to default zipball. "
                f"({exc})"
            )
            return None

        if not isinstance(payload, dict):
            print_warning("Unexpected release payload, falling back to default zipball.")
            return None
        data = cast(dict[str, object], payload)
        zipball = data.get("zipball_url")
        tag = data.get("tag_name")
        return ReleaseInfo(
            zipball_url=str(zipball) if zipball else None,
            tag_name=str(tag) if tag else None,
        )

    def resolve_download_url(self, release: ReleaseInfo | None) -> str:
        """Pick the release zipball or the default-branch fallback."""
        if release is not None and release.zipball_url:
            return release.zipball_url
        return self.settings.fallback_zipball_url

    def download_to_file(self, client: httpx.Client, url: str, dest_path: Path) -> None:
        """Stream ``url`` into ``dest_path``.

        The file handle is closed on every path; a partial file is removed.

        Raises:
            DownloadError: On network, HTTP status, redirect or disk errors.
        """
        try:
            with client.stream("GET", url, timeout=self.settings.download_timeout) as response:
                response.raise_for_status()
                with dest_path.open("wb") as fh:
                    for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                        fh.write(chunk)
        except (httpx.HTTPError, OSError) as exc:
            dest_path.unlink(missing_ok=True)
            raise DownloadError(f"Failed to download {url}: {exc}") from exc

    def fetch(self, workspace: Path) -> FetchedArchive:
        """Download and extract the latest archive into ``workspace``."""
        archive_path = workspace / ARCHIVE_FILE_NAME
        extract_dir = workspace / EXTRACT_DIR_NAME

        with self._build_client() as client:
            print_info("Fetching latest WordPress release info from GitHub ...")
            release = self.fetch_latest_release(client)
            url = self.resolve_download_url(release)
            if release is not None and release.tag_name:
                print_info(f"Latest release: {release.tag_name}")

            print_info("Downloading WordPress source ...")
            self.download_to_file(client, url, archive_path)

        print_info("Extracting archive ...")
        extract_archive(archive_path, extract_dir)
        root_dir = find_top_level_dir(extract_dir)

        return FetchedArchive(
            archive_path=archive_path,
            extract_dir=extract_dir,
            root_dir=root_dir,
            source_url=url,
        )

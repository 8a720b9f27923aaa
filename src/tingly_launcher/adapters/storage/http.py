"""HTTP storage adapter using requests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests

from tingly_launcher.core.exceptions import DownloadError, ReleaseNotFoundError


if TYPE_CHECKING:
    from tingly_launcher.config import LauncherConfig
    from tingly_launcher.core.ports import ProgressCallback


_LOGGER = logging.getLogger(__name__)

# Chunk size for streaming downloads (64KB)
_CHUNK_SIZE = 64 * 1024


class HttpStorage:
    """Archive source that downloads release assets over HTTP(S).

    Implements ArchiveSourcePort. Redirects are followed. When a proxy is
    configured every request goes through it; proxy settings from the
    ambient environment are otherwise ignored.
    """

    def __init__(
        self,
        proxy_url: str | None = None,
        user_agent: str = "tingly-box-pypi",
        session: requests.Session | None = None,
    ) -> None:
        """Initialize HTTP storage.

        Args:
            proxy_url: Optional proxy endpoint for both http and https URLs.
            user_agent: User-Agent header value.
            session: Optional requests session. If not provided, creates one.
        """
        self._session = session or requests.Session()
        self._session.trust_env = False
        self._session.headers["User-Agent"] = user_agent
        if proxy_url:
            self._session.proxies.update({"http": proxy_url, "https": proxy_url})
        self.proxy_url = proxy_url

    @classmethod
    def from_config(cls, config: LauncherConfig) -> HttpStorage:
        """Create storage with the proxy and User-Agent from config."""
        return cls(proxy_url=config.proxy_url, user_agent=config.user_agent)

    def fetch(self, url: str, progress: ProgressCallback) -> bytes:
        """Download a whole archive into memory with progress reporting.

        Args:
            url: Archive URL.
            progress: Callback function(bytes_downloaded, total_bytes).
                total_bytes is 0 when the server sends no Content-Length.

        Returns:
            The response body.

        Raises:
            ReleaseNotFoundError: If the server answers 404.
            DownloadError: For other non-success statuses or transport errors.
        """
        _LOGGER.info("Downloading %s", url)
        if self.proxy_url:
            _LOGGER.debug("Using proxy %s", self.proxy_url)

        chunks: list[bytes] = []
        try:
            with self._session.get(url, stream=True, allow_redirects=True) as response:
                if not response.ok:
                    raise self._translate_status(url, response)

                total_size = _content_length(response)
                bytes_downloaded = 0
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    if not chunk:
                        continue
                    chunks.append(chunk)
                    bytes_downloaded += len(chunk)
                    progress(bytes_downloaded, total_size)
        except requests.RequestException as e:
            raise DownloadError(url, cause=e) from e

        _LOGGER.debug("Downloaded %d bytes from %s", bytes_downloaded, url)
        return b"".join(chunks)

    @staticmethod
    def _translate_status(url: str, response: requests.Response) -> DownloadError:
        """Convert a non-success response to a domain exception."""
        if response.status_code == 404:
            return ReleaseNotFoundError(
                url, status_code=response.status_code, reason=response.reason or ""
            )
        return DownloadError(
            url, status_code=response.status_code, reason=response.reason or ""
        )


def _content_length(response: requests.Response) -> int:
    """Return the Content-Length header as an int, 0 if absent or invalid."""
    value = response.headers.get("content-length")
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0

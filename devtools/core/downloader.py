"""
HTTPS downloads for vendor install scripts and installer packages.
"""

import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from .. import __version__
from ..errors import DownloadError


class Downloader:
    """Fetches vendor artifacts; any HTTP or network error is fatal."""

    def __init__(self, timeout: float = 300.0):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout
        self.user_agent = f"devtools-installer/{__version__}"

    def _open(self, url: str):
        request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        try:
            return urllib.request.urlopen(request, timeout=self.timeout)
        except urllib.error.HTTPError as e:
            raise DownloadError(url, f"HTTP {e.code} {e.reason}") from e
        except (urllib.error.URLError, OSError) as e:
            raise DownloadError(url, str(getattr(e, "reason", e))) from e

    def fetch_text(self, url: str) -> str:
        """Download a text resource such as an install script."""
        self.logger.debug(f"Fetching {url}")
        try:
            with self._open(url) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                return response.read().decode(charset)
        except OSError as e:
            raise DownloadError(url, str(e)) from e

    def fetch_file(self, url: str, destination: Path) -> Path:
        """Stream a download to ``destination``, following redirects."""
        self.logger.debug(f"Downloading {url} -> {destination}")
        try:
            with self._open(url) as response, open(destination, "wb") as f:
                shutil.copyfileobj(response, f)
        except OSError as e:
            raise DownloadError(url, str(e)) from e
        return destination

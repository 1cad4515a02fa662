"""Base class for torrent sources."""

from abc import ABC, abstractmethod
from urllib.parse import quote

import requests

from ..models import TorrentResult

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
HEADERS = {"User-Agent": USER_AGENT}
TIMEOUT = 15
MAX_RESULTS = 20

TRACKERS = [
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://open.stealth.si:80/announce",
    "udp://tracker.torrent.eu.org:451/announce",
    "udp://tracker.dler.org:6969/announce",
    "udp://open.demonii.com:1337/announce",
    "udp://open.dstud.io:6969/announce",
    "udp://tracker.srv00.com:6969/announce",
    "https://tracker.moeblog.cn:443/announce",
]


class ProviderError(Exception):
    """A provider could not complete a search."""


class UnsupportedSearchError(ProviderError):
    """A provider was asked for a media kind it does not index."""


def to_int(value) -> int:
    """Coerce an API field to int, 0 when missing or malformed."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def to_str(value) -> str:
    return value if isinstance(value, str) else ""


def movie_query(title: str, year: int) -> str:
    """Build the query for a movie, e.g. 'Heat 1995'."""
    if year <= 0:
        return title
    return f"{title} {year}"


def series_query(title: str, season: int, episode: int) -> str:
    """Build the query for an episode, e.g. 'Foo S02E05'."""
    return f"{title} S{season:02d}E{episode:02d}"


def build_magnet(info_hash: str, name: str) -> str:
    """Build a magnet link with a display name and public trackers."""
    parts = [f"magnet:?xt=urn:btih:{info_hash}", f"&dn={quote(name, safe='')}"]
    parts.extend(f"&tr={quote(t, safe='')}" for t in TRACKERS)
    return "".join(parts)


class Source(ABC):
    """Abstract base class for torrent sources."""

    name: str = "Unknown"
    default_base_url: str = ""

    def __init__(
        self,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = TIMEOUT,
    ):
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.headers = dict(headers or HEADERS)
        self.timeout = timeout

    @abstractmethod
    def search_movie(self, title: str, year: int) -> list[TorrentResult]:
        """Search for torrents of a movie."""
        ...

    @abstractmethod
    def search_series(
        self, title: str, season: int, episode: int
    ) -> list[TorrentResult]:
        """Search for torrents of a single episode."""
        ...

    def _get(
        self, url: str, check_status: bool = True, **kwargs
    ) -> requests.Response:
        """Make a GET request, raising ProviderError when it cannot be made.

        With check_status=False an error status still returns the response.
        """
        try:
            resp = requests.get(
                url, headers=self.headers, timeout=self.timeout, **kwargs
            )
            if check_status:
                resp.raise_for_status()
        except requests.RequestException as e:
            raise ProviderError(f"{self.name} request failed: {e}") from e
        return resp

    def _get_json(self, url: str, **kwargs):
        """GET a JSON document, raising ProviderError on any failure."""
        resp = self._get(url, **kwargs)
        try:
            return resp.json()
        except ValueError as e:
            raise ProviderError(f"{self.name} decode failed: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

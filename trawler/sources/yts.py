"""YTS movie source."""

import logging

from ..classify import detect_type, parse_size
from ..models import TorrentResult
from .base import (
    MAX_RESULTS,
    ProviderError,
    Source,
    UnsupportedSearchError,
    build_magnet,
    to_int,
    to_str,
)

logger = logging.getLogger(__name__)


class YTSSource(Source):
    """yts.mx torrent source via its JSON API. Movies only."""

    name = "YTS"
    default_base_url = "https://yts.mx/api/v2"

    def search_movie(self, title: str, year: int) -> list[TorrentResult]:
        """Search YTS by title, narrowed by year when known."""
        params = {"query_term": title, "limit": 10}
        if year > 0:
            params["year"] = year

        data = self._get_json(f"{self.base_url}/list_movies.json", params=params)
        if not isinstance(data, dict) or data.get("status") != "ok":
            message = data.get("status_message") if isinstance(data, dict) else data
            raise ProviderError(f"YTS error: {message}")

        payload = data.get("data")
        movies = payload.get("movies") if isinstance(payload, dict) else None
        if not isinstance(movies, list):
            movies = []

        results = []
        for movie in movies:
            if not isinstance(movie, dict):
                continue
            movie_title = to_str(movie.get("title"))
            movie_year = to_int(movie.get("year"))
            torrents = movie.get("torrents")
            if not isinstance(torrents, list):
                continue
            for t in torrents:
                if not isinstance(t, dict):
                    continue
                info_hash = to_str(t.get("hash")).upper()
                if not info_hash:
                    continue

                quality = to_str(t.get("quality"))
                size = to_str(t.get("size"))
                results.append(
                    TorrentResult(
                        title=f"{movie_title} ({movie_year}) - {quality}",
                        hash=info_hash,
                        magnet_url=build_magnet(
                            info_hash,
                            f"{movie_title} ({movie_year}) [{quality}] [YTS.MX]",
                        ),
                        quality=quality,
                        type=to_str(t.get("type")) or detect_type(movie_title),
                        seeds=to_int(t.get("seeds")),
                        peers=to_int(t.get("peers")),
                        size=size,
                        size_bytes=to_int(t.get("size_bytes")) or parse_size(size),
                        source=self.name,
                    )
                )

        logger.info("YTS: %d results for '%s'", len(results), title)
        return results[:MAX_RESULTS]

    def search_series(
        self, title: str, season: int, episode: int
    ) -> list[TorrentResult]:
        raise UnsupportedSearchError("YTS does not support series")

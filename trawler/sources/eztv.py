"""EZTV series source."""

import logging

from ..classify import detect_quality, format_size, parse_season_episode
from ..models import SeriesTorrentResult, TorrentResult
from .base import MAX_RESULTS, Source, UnsupportedSearchError, to_int, to_str

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
MAX_PAGES = 5


def _episode_tag(season: int, episode: int) -> str:
    return f"S{season:02d}E{episode:02d}"


class EZTVSource(Source):
    """eztvx.to torrent source via its JSON API. Series only."""

    name = "EZTV"
    default_base_url = "https://eztvx.to/api"

    def search_movie(self, title: str, year: int) -> list[TorrentResult]:
        raise UnsupportedSearchError("EZTV does not support movies")

    def search_series(
        self, title: str, season: int, episode: int
    ) -> list[TorrentResult]:
        """Search the latest EZTV torrents for one episode of a show."""
        tag = _episode_tag(season, episode)
        title_lower = title.lower()

        results = []
        for item in self._get_torrents({"limit": PAGE_SIZE}):
            if title_lower not in to_str(item.get("title")).lower():
                continue
            if tag not in to_str(item.get("filename")).upper():
                continue
            result = self._to_result(item)
            if result:
                results.append(result)

        logger.info("EZTV: %d results for '%s %s'", len(results), title, tag)
        return results[:MAX_RESULTS]

    def search_by_imdb(
        self, imdb_id: str, season: int, episode: int
    ) -> list[TorrentResult]:
        """Search EZTV by IMDB id, e.g. 'tt0903747'.

        The episode filter only applies when both season and episode are set.
        """
        params = {"imdb_id": imdb_id.removeprefix("tt"), "limit": PAGE_SIZE}
        tag = _episode_tag(season, episode)

        results = []
        for item in self._get_torrents(params):
            if season > 0 and episode > 0:
                if tag not in to_str(item.get("filename")).upper():
                    continue
            result = self._to_result(item)
            if result:
                results.append(result)
        return results[:MAX_RESULTS]

    def fetch_series_torrents(self, imdb_id: str) -> list[SeriesTorrentResult]:
        """Fetch every torrent EZTV lists for a show, across several pages."""
        params = {"imdb_id": imdb_id.removeprefix("tt"), "limit": PAGE_SIZE}

        all_results = []
        for page in range(1, MAX_PAGES + 1):
            items = self._get_torrents({**params, "page": page})
            if not items:
                break

            for item in items:
                season, episode = parse_season_episode(to_str(item.get("filename")))
                if season == 0:
                    season = to_int(item.get("season"))
                if episode == 0:
                    episode = to_int(item.get("episode"))

                result = self._to_result(item, season=season, episode=episode)
                if result:
                    all_results.append(result)

            if len(items) < PAGE_SIZE:
                break

        logger.info("EZTV: fetched %d torrents for %s", len(all_results), imdb_id)
        return all_results

    def _get_torrents(self, params: dict) -> list[dict]:
        data = self._get_json(f"{self.base_url}/get-torrents", params=params)
        torrents = data.get("torrents") if isinstance(data, dict) else None
        if not isinstance(torrents, list):
            return []
        return [item for item in torrents if isinstance(item, dict)]

    def _to_result(self, item: dict, **episode_fields):
        """Map an API torrent to a result, None when it has no hash."""
        info_hash = to_str(item.get("hash")).upper()
        if not info_hash:
            return None

        size_bytes = to_int(item.get("size_bytes"))
        fields = dict(
            title=to_str(item.get("title")),
            hash=info_hash,
            magnet_url=(
                to_str(item.get("magnet_url")) or f"magnet:?xt=urn:btih:{info_hash}"
            ),
            quality=detect_quality(to_str(item.get("filename"))),
            type="hdtv",
            seeds=to_int(item.get("seeds")),
            peers=to_int(item.get("peers")),
            size=format_size(size_bytes),
            size_bytes=size_bytes,
            source=self.name,
        )
        if episode_fields:
            return SeriesTorrentResult(**fields, **episode_fields)
        return TorrentResult(**fields)

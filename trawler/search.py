"""Search orchestration for Trawler."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .config import Settings
from .models import TorrentResult
from .sources import SOURCE_CLASSES, ProviderError, Source, UnsupportedSearchError
from .sources.base import movie_query, series_query

logger = logging.getLogger(__name__)


@dataclass
class SourceStatus:
    """Status of a source search."""

    name: str
    status: str  # "done", "error", "unsupported"
    count: int = 0
    error: str | None = None


def build_sources(settings: Settings) -> list[Source]:
    """Instantiate every enabled provider from settings."""
    sources = []
    for key, provider in settings.enabled_providers().items():
        source_cls = SOURCE_CLASSES.get(key)
        if source_cls is None:
            logger.warning("Unknown provider '%s' in config, skipping", key)
            continue
        sources.append(
            source_cls(
                base_url=provider.base_url,
                headers=settings.headers,
                timeout=settings.timeout,
            )
        )
    return sources


class SearchOrchestrator:
    """Fans a query out to several sources and merges their results.

    Results are concatenated in source order and are not deduplicated.
    """

    def __init__(self, sources: list[Source] | None = None):
        self.sources: list[Source] = (
            sources if sources is not None else build_sources(Settings())
        )
        self.statuses: list[SourceStatus] = []

    def search_movie(
        self,
        title: str,
        year: int = 0,
        limit: int | None = None,
        sort_by: str | None = None,
    ) -> list[TorrentResult]:
        """Search every source for a movie."""
        return self._search(
            lambda s: s.search_movie(title, year),
            movie_query(title, year),
            limit,
            sort_by,
        )

    def search_series(
        self,
        title: str,
        season: int,
        episode: int,
        limit: int | None = None,
        sort_by: str | None = None,
    ) -> list[TorrentResult]:
        """Search every source for one episode."""
        return self._search(
            lambda s: s.search_series(title, season, episode),
            series_query(title, season, episode),
            limit,
            sort_by,
        )

    def _search(
        self,
        call: Callable[[Source], list[TorrentResult]],
        label: str,
        limit: int | None,
        sort_by: str | None,
    ) -> list[TorrentResult]:
        self.statuses = []
        if not self.sources:
            return []

        all_results: list[TorrentResult] = []
        with ThreadPoolExecutor(max_workers=len(self.sources)) as executor:
            futures = [(s, executor.submit(call, s)) for s in self.sources]

            for source, future in futures:
                try:
                    results = future.result()
                except UnsupportedSearchError as e:
                    logger.debug("%s skipped for %s: %s", source.name, label, e)
                    self.statuses.append(SourceStatus(source.name, "unsupported"))
                    continue
                except ProviderError as e:
                    logger.warning("Failed to search %s for %s: %s", source.name, label, e)
                    self.statuses.append(
                        SourceStatus(source.name, "error", error=str(e))
                    )
                    continue
                except Exception as e:
                    logger.exception("Unexpected error searching %s for %s", source.name, label)
                    self.statuses.append(
                        SourceStatus(source.name, "error", error=str(e))
                    )
                    continue

                all_results.extend(results)
                self.statuses.append(SourceStatus(source.name, "done", len(results)))

        if sort_by:
            all_results = self._sort_results(all_results, sort_by)
        if limit is not None:
            all_results = all_results[:limit]
        return all_results

    @staticmethod
    def _sort_results(
        results: list[TorrentResult], sort_by: str
    ) -> list[TorrentResult]:
        """Sort results by the specified field."""
        if sort_by == "size":
            return sorted(results, key=lambda x: x.size_bytes, reverse=True)
        elif sort_by == "name":
            return sorted(results, key=lambda x: x.title.lower())
        else:  # seeds
            return sorted(results, key=lambda x: x.seeds, reverse=True)

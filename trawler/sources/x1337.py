"""1337x torrent source."""

import logging
from urllib.parse import quote

from bs4 import BeautifulSoup

from ..classify import detect_quality, detect_type, parse_size
from ..models import TorrentResult
from .base import MAX_RESULTS, Source, movie_query, series_query
from .magnet import resolve_magnet

logger = logging.getLogger(__name__)

MOVIES = "Movies"
TV = "TV"


def _cell_int(cell) -> int:
    text = cell.get_text(strip=True)
    return int(text) if text.isdigit() else 0


def _cell_size(cell) -> str:
    # The size cell also holds the uploader in a nested span.
    text = cell.find(string=True, recursive=False)
    return text.strip() if text else ""


class X1337Source(Source):
    """1337x.to torrent source.

    Listing pages are scanned for title links, seed cells, leech cells and
    size cells independently; the i-th of each belong to the same row. A
    row missing a cell shifts or zeroes the later values instead of failing
    the search. Each candidate then costs one detail page fetch to get its
    magnet link.
    """

    name = "1337x"
    default_base_url = "https://1337x.to"

    def search_movie(self, title: str, year: int) -> list[TorrentResult]:
        return self.search(movie_query(title, year), MOVIES)

    def search_series(
        self, title: str, season: int, episode: int
    ) -> list[TorrentResult]:
        return self.search(series_query(title, season, episode), TV)

    def search_url(self, query: str, category: str) -> str:
        return (
            f"{self.base_url}/category-search/{quote(query, safe='')}/{category}/1/"
        )

    def search(self, query: str, category: str) -> list[TorrentResult]:
        """Search one category of 1337x via scraping."""
        resp = self._get(self.search_url(query, category), check_status=False)
        if resp.status_code >= 400:
            logger.warning("1337x: listing returned HTTP %d", resp.status_code)
        results = self.parse_search_results(resp.text)
        logger.info("1337x: %d results for '%s'", len(results), query)
        return results

    def parse_search_results(self, html: str) -> list[TorrentResult]:
        """Extract up to MAX_RESULTS resolved torrents from a listing page."""
        soup = BeautifulSoup(html, "html.parser")

        links = [
            a
            for a in soup.select("a[href^='/torrent/']")
            if a.get_text(strip=True)
        ]
        seeds = [_cell_int(td) for td in soup.select("td.coll-2.seeds")]
        leeches = [_cell_int(td) for td in soup.select("td.coll-3.leeches")]
        sizes = [_cell_size(td) for td in soup.select("td.coll-4.size")]

        results = []
        for i, link in enumerate(links):
            title = link.get_text(strip=True)
            detail_url = self.base_url + link["href"]

            info_hash, magnet = resolve_magnet(
                detail_url, headers=self.headers, timeout=self.timeout
            )
            if not info_hash:
                logger.debug("1337x: no magnet for %s, skipping", detail_url)
                continue

            size = sizes[i] if i < len(sizes) else ""
            results.append(
                TorrentResult(
                    title=title,
                    hash=info_hash,
                    magnet_url=magnet,
                    quality=detect_quality(title),
                    type=detect_type(title),
                    seeds=seeds[i] if i < len(seeds) else 0,
                    peers=leeches[i] if i < len(leeches) else 0,
                    size=size,
                    size_bytes=parse_size(size),
                    source=self.name,
                )
            )
            if len(results) >= MAX_RESULTS:
                break

        return results

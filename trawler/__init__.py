"""Trawler: torrent metadata aggregation for movies and TV episodes."""

from .models import SeriesTorrentResult, TorrentResult
from .search import SearchOrchestrator, build_sources

__all__ = [
    "TorrentResult",
    "SeriesTorrentResult",
    "SearchOrchestrator",
    "build_sources",
]

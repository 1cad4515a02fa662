"""Data models for Trawler."""

from dataclasses import dataclass


@dataclass
class TorrentResult:
    """A single torrent found by a provider."""

    title: str
    hash: str  # upper-case hex info-hash
    magnet_url: str
    quality: str  # "2160p", "1080p", "720p", "480p"
    type: str  # "bluray", "webrip", "web", "hdtv", "dvdrip"
    seeds: int = 0
    peers: int = 0
    size: str = ""  # as scraped, e.g. "1.4 GB"
    size_bytes: int = 0
    source: str = ""  # "1337x", "YTS", "EZTV"

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for JSON output."""
        return {
            "title": self.title,
            "hash": self.hash,
            "magnet_url": self.magnet_url,
            "quality": self.quality,
            "type": self.type,
            "seeds": self.seeds,
            "peers": self.peers,
            "size": self.size,
            "size_bytes": self.size_bytes,
            "source": self.source,
        }


@dataclass
class SeriesTorrentResult(TorrentResult):
    """A torrent tagged with the episode it belongs to."""

    season: int = 0
    episode: int = 0

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["season"] = self.season
        data["episode"] = self.episode
        return data

"""Title and size heuristics shared by all sources."""

import re

SIZE_RE = re.compile(r"([\d.]+)\s*(TB|GB|MB|KB)")
SEASON_EPISODE_RE = re.compile(r"[Ss](\d{1,2})[Ee](\d{1,2})")

SIZE_MULTIPLIERS = {
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
    "TB": 1024**4,
}

# Ordered: the first matching rule wins.
TYPE_MARKERS = [
    (("bluray", "blu-ray"), "bluray"),
    (("webrip", "web-rip"), "webrip"),
    (("webdl", "web-dl"), "web"),
    (("hdtv",), "hdtv"),
    (("dvdrip",), "dvdrip"),
]
DEFAULT_TYPE = "web"

QUALITY_MARKERS = [
    (("2160p", "4k"), "2160p"),
    (("1080p",), "1080p"),
    (("720p",), "720p"),
    (("480p",), "480p"),
]
DEFAULT_QUALITY = "720p"


def _first_marker(title: str, markers, default: str) -> str:
    title = title.lower()
    for needles, label in markers:
        if any(needle in title for needle in needles):
            return label
    return default


def detect_type(title: str) -> str:
    """Classify the release source, e.g. 'Movie.2020.BluRay.x264' -> 'bluray'."""
    return _first_marker(title, TYPE_MARKERS, DEFAULT_TYPE)


def detect_quality(title: str) -> str:
    """Classify the release resolution."""
    return _first_marker(title, QUALITY_MARKERS, DEFAULT_QUALITY)


def parse_size(size_str: str) -> int:
    """Parse size string like '1.5 GB' or '1,5 GB' to bytes."""
    size_str = size_str.upper().strip().replace(",", ".")
    match = SIZE_RE.search(size_str)
    if not match:
        return 0
    try:
        value = float(match.group(1))
    except ValueError:
        return 0
    return int(value * SIZE_MULTIPLIERS[match.group(2)])


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable size."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    value = size_bytes / 1024
    unit_index = 0
    while value >= 1024 and unit_index < 5:
        value /= 1024
        unit_index += 1
    return f"{value:.1f} {'KMGTPE'[unit_index]}B"


def parse_season_episode(filename: str) -> tuple[int, int]:
    """Extract (season, episode) from a release name, (0, 0) if absent."""
    match = SEASON_EPISODE_RE.search(filename)
    if not match:
        return 0, 0
    return int(match.group(1)), int(match.group(2))

"""Torrent source implementations."""

from .base import ProviderError, Source, UnsupportedSearchError
from .eztv import EZTVSource
from .magnet import resolve_magnet
from .x1337 import X1337Source
from .yts import YTSSource

SOURCE_CLASSES = {
    "1337x": X1337Source,
    "yts": YTSSource,
    "eztv": EZTVSource,
}

__all__ = [
    "Source",
    "ProviderError",
    "UnsupportedSearchError",
    "X1337Source",
    "YTSSource",
    "EZTVSource",
    "SOURCE_CLASSES",
    "resolve_magnet",
]

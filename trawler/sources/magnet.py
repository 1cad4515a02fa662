"""Resolve the info-hash and magnet link from a torrent detail page."""

import logging
import re

import requests
from bs4 import BeautifulSoup

from .base import HEADERS, TIMEOUT

logger = logging.getLogger(__name__)

BTIH_RE = re.compile(
    r"^magnet:\?.*?btih:([a-fA-F0-9]{40})(?![A-Za-z0-9])", re.IGNORECASE
)

NOT_FOUND = ("", "")


def find_magnet(html: str) -> tuple[str, str]:
    """Return (HASH, magnet) for the first btih magnet anchor in html."""
    soup = BeautifulSoup(html, "html.parser")
    for anchor in soup.select("a[href^='magnet:']"):
        href = anchor.get("href", "")
        match = BTIH_RE.match(href)
        if match:
            return match.group(1).upper(), href
    return NOT_FOUND


def resolve_magnet(
    detail_url: str,
    headers: dict[str, str] | None = None,
    timeout: float = TIMEOUT,
) -> tuple[str, str]:
    """Fetch a detail page and extract its magnet link.

    Never raises: a failed request, an error status or a page without a
    magnet anchor all yield ("", "").
    """
    try:
        resp = requests.get(detail_url, headers=headers or HEADERS, timeout=timeout)
        resp.raise_for_status()
        html = resp.text
    except requests.RequestException as e:
        logger.debug("Magnet fetch failed for %s: %s", detail_url, e)
        return NOT_FOUND
    return find_magnet(html)

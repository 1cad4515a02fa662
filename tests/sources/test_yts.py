import pytest
import requests

from conftest import FakeResponse
from trawler.sources import ProviderError, UnsupportedSearchError, YTSSource

LIST_URL = "https://yts.mx/api/v2/list_movies.json"


def yts_payload(torrents, status="ok"):
    return {
        "status": status,
        "status_message": "Query was successful",
        "data": {
            "movie_count": 1,
            "movies": [
                {
                    "id": 1,
                    "title": "Heat",
                    "year": 1995,
                    "torrents": torrents,
                }
            ],
        },
    }


TORRENT_1080 = {
    "url": "https://yts.mx/torrent/download/ABC",
    "hash": "abcdef0123456789abcdef0123456789abcdef01",
    "quality": "1080p",
    "type": "bluray",
    "seeds": 120,
    "peers": 14,
    "size": "2.37 GB",
    "size_bytes": 2544768893,
}


def test_search_movie_maps_torrents(fake_get):
    mock_get = fake_get({LIST_URL: FakeResponse(data=yts_payload([TORRENT_1080]))})

    (result,) = YTSSource().search_movie("Heat", 1995)

    assert result.title == "Heat (1995) - 1080p"
    assert result.hash == TORRENT_1080["hash"].upper()
    assert result.magnet_url.startswith(
        f"magnet:?xt=urn:btih:{TORRENT_1080['hash'].upper()}&dn=Heat%20%281995%29"
    )
    assert "&tr=udp%3A%2F%2Ftracker.opentrackr.org%3A1337%2Fannounce" in result.magnet_url
    assert result.quality == "1080p"
    assert result.type == "bluray"
    assert (result.seeds, result.peers) == (120, 14)
    assert (result.size, result.size_bytes) == ("2.37 GB", 2544768893)
    assert result.source == "YTS"

    params = mock_get.call_args.kwargs["params"]
    assert params == {"query_term": "Heat", "limit": 10, "year": 1995}


def test_year_is_omitted_when_unknown(fake_get):
    mock_get = fake_get({LIST_URL: FakeResponse(data=yts_payload([]))})

    assert YTSSource().search_movie("Heat", 0) == []
    assert "year" not in mock_get.call_args.kwargs["params"]


def test_torrents_without_hash_are_dropped(fake_get):
    fake_get(
        {LIST_URL: FakeResponse(data=yts_payload([{**TORRENT_1080, "hash": ""}]))}
    )
    assert YTSSource().search_movie("Heat", 1995) == []


def test_missing_type_falls_back_to_classifier(fake_get):
    torrent = {**TORRENT_1080, "type": ""}
    fake_get({LIST_URL: FakeResponse(data=yts_payload([torrent]))})

    (result,) = YTSSource().search_movie("Heat", 1995)

    assert result.type == "web"


def test_results_are_capped(fake_get):
    torrents = [{**TORRENT_1080, "hash": f"{i:040x}"} for i in range(30)]
    fake_get({LIST_URL: FakeResponse(data=yts_payload(torrents))})

    assert len(YTSSource().search_movie("Heat", 1995)) == 20


def test_malformed_fields_are_coerced(fake_get):
    torrent = {**TORRENT_1080, "seeds": "N/A", "peers": None, "quality": 1080}
    fake_get({LIST_URL: FakeResponse(data=yts_payload([torrent]))})

    (result,) = YTSSource().search_movie("Heat", 1995)

    assert (result.seeds, result.peers) == (0, 0)
    assert result.quality == ""


def test_unexpected_payload_shapes_give_no_results(fake_get):
    payloads = [
        {"status": "ok", "data": []},
        {"status": "ok", "data": {"movies": None}},
        {"status": "ok", "data": {"movies": ["Heat", {"title": "Heat", "torrents": {}}]}},
        yts_payload(["not a torrent", None]),
    ]
    for payload in payloads:
        fake_get({LIST_URL: FakeResponse(data=payload)})
        assert YTSSource().search_movie("Heat", 1995) == []


def test_non_object_json_raises(fake_get):
    fake_get({LIST_URL: FakeResponse(data=["unexpected"])})

    with pytest.raises(ProviderError, match="YTS error"):
        YTSSource().search_movie("Heat", 1995)


def test_api_error_status_raises(fake_get):
    payload = yts_payload([], status="error")
    payload["status_message"] = "Bad query"
    fake_get({LIST_URL: FakeResponse(data=payload)})

    with pytest.raises(ProviderError, match="Bad query"):
        YTSSource().search_movie("Heat", 1995)


def test_invalid_json_raises(fake_get):
    fake_get({LIST_URL: FakeResponse("<html>maintenance</html>")})

    with pytest.raises(ProviderError, match="decode failed"):
        YTSSource().search_movie("Heat", 1995)


def test_transport_failure_raises(fake_get):
    fake_get({LIST_URL: requests.ConnectionError("boom")})

    with pytest.raises(ProviderError):
        YTSSource().search_movie("Heat", 1995)


def test_series_not_supported():
    with pytest.raises(UnsupportedSearchError):
        YTSSource().search_series("Show", 1, 1)

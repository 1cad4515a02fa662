from trawler.config import ProviderConfig, Settings
from trawler.models import TorrentResult
from trawler.search import SearchOrchestrator, build_sources
from trawler.sources import (
    EZTVSource,
    ProviderError,
    Source,
    UnsupportedSearchError,
    X1337Source,
    YTSSource,
)


def make_result(title: str, source: str, seeds: int = 0, size_bytes: int = 0):
    return TorrentResult(
        title=title,
        hash=title.upper(),
        magnet_url=f"magnet:?xt=urn:btih:{title.upper()}",
        quality="1080p",
        type="web",
        seeds=seeds,
        size_bytes=size_bytes,
        source=source,
    )


class StubSource(Source):
    def __init__(self, name, movies=None, series=None, error=None):
        super().__init__(base_url="https://example.invalid")
        self.name = name
        self.movies = movies or []
        self.series = series or []
        self.error = error
        self.calls = []

    def search_movie(self, title, year):
        self.calls.append(("movie", title, year))
        if self.error:
            raise self.error
        return self.movies

    def search_series(self, title, season, episode):
        self.calls.append(("series", title, season, episode))
        if self.error:
            raise self.error
        return self.series


def test_results_are_merged_in_source_order_without_dedup():
    a = StubSource("A", movies=[make_result("aaa", "A"), make_result("dup", "A")])
    b = StubSource("B", movies=[make_result("dup", "B")])

    results = SearchOrchestrator([a, b]).search_movie("Heat", 1995)

    assert [(r.title, r.source) for r in results] == [
        ("aaa", "A"),
        ("dup", "A"),
        ("dup", "B"),
    ]
    assert a.calls == [("movie", "Heat", 1995)]


def test_failing_source_is_skipped_and_reported():
    ok = StubSource("OK", series=[make_result("ep", "OK")])
    broken = StubSource("Broken", error=ProviderError("Broken request failed: boom"))
    movies_only = StubSource("MoviesOnly", error=UnsupportedSearchError("no series"))
    orchestrator = SearchOrchestrator([broken, ok, movies_only])

    results = orchestrator.search_series("Show", 1, 2)

    assert [r.title for r in results] == ["ep"]
    assert ok.calls == [("series", "Show", 1, 2)]
    statuses = {s.name: s for s in orchestrator.statuses}
    assert statuses["Broken"].status == "error"
    assert "boom" in statuses["Broken"].error
    assert statuses["OK"].status == "done"
    assert statuses["OK"].count == 1
    assert statuses["MoviesOnly"].status == "unsupported"


def test_unexpected_exception_does_not_abort_search():
    ok = StubSource("OK", movies=[make_result("heat", "OK")])
    buggy = StubSource("Buggy", error=ValueError("bad payload"))
    orchestrator = SearchOrchestrator([buggy, ok])

    results = orchestrator.search_movie("Heat", 1995)

    assert [r.title for r in results] == ["heat"]
    statuses = {s.name: s for s in orchestrator.statuses}
    assert statuses["Buggy"].status == "error"
    assert statuses["Buggy"].error == "bad payload"
    assert statuses["OK"].status == "done"


def test_sort_and_limit():
    source = StubSource(
        "A",
        movies=[
            make_result("b", "A", seeds=5, size_bytes=300),
            make_result("a", "A", seeds=50, size_bytes=100),
            make_result("c", "A", seeds=20, size_bytes=200),
        ],
    )
    orchestrator = SearchOrchestrator([source])

    by_seeds = orchestrator.search_movie("x", sort_by="seeds", limit=2)
    by_size = orchestrator.search_movie("x", sort_by="size")
    by_name = orchestrator.search_movie("x", sort_by="name")

    assert [r.title for r in by_seeds] == ["a", "c"]
    assert [r.title for r in by_size] == ["b", "c", "a"]
    assert [r.title for r in by_name] == ["a", "b", "c"]


def test_no_sources_returns_empty():
    assert SearchOrchestrator([]).search_movie("Heat", 1995) == []


def test_build_sources_honours_settings():
    settings = Settings(
        timeout=5,
        user_agent="TestAgent/1.0",
        providers={
            "1337x": ProviderConfig(name="1337x", base_url="https://mirror.example"),
            "yts": ProviderConfig(name="yts", enabled=False),
            "eztv": ProviderConfig(name="eztv"),
            "bogus": ProviderConfig(name="bogus"),
        },
    )

    sources = build_sources(settings)

    assert [type(s) for s in sources] == [X1337Source, EZTVSource]
    x1337 = sources[0]
    assert x1337.base_url == "https://mirror.example"
    assert x1337.timeout == 5
    assert x1337.headers == {"User-Agent": "TestAgent/1.0"}
    assert sources[1].base_url == EZTVSource.default_base_url


def test_default_orchestrator_uses_all_providers():
    orchestrator = SearchOrchestrator()
    assert [type(s) for s in orchestrator.sources] == [X1337Source, YTSSource, EZTVSource]

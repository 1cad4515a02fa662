#!/usr/bin/env python3
"""Trawler: search torrent indexers for movies and TV episodes."""

import argparse
import json
import logging
import sys

from trawler.classify import format_size
from trawler.config import ConfigManager
from trawler.models import TorrentResult
from trawler.search import SearchOrchestrator, build_sources
from trawler.sources import SOURCE_CLASSES

logger = logging.getLogger("trawler")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_results(results: list[TorrentResult]):
    """Display search results in a formatted list."""
    for i, r in enumerate(results, 1):
        size_str = r.size or format_size(r.size_bytes)
        print(
            f"[{i}] {r.title} ({size_str}, {r.quality} {r.type}) - "
            f"{r.seeds}↑ {r.peers}↓ [{r.source}]"
        )
        print(f"    {r.magnet_url}")


def make_orchestrator(args) -> SearchOrchestrator:
    settings = ConfigManager().load()
    sources = build_sources(settings)
    if args.source:
        wanted = args.source.lower()
        sources = [s for s in sources if s.name.lower() == wanted]
        if not sources:
            print(f"Provider '{args.source}' is not enabled")
            sys.exit(1)
    return SearchOrchestrator(sources)


def show(results: list[TorrentResult], label: str, as_json: bool):
    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return

    if not results:
        print(f"No results for '{label}'")
        return

    print()
    print_results(results)


def cmd_movie(args):
    """Handle the movie command."""
    title = " ".join(args.title)
    orchestrator = make_orchestrator(args)

    logger.info("Searching movies for '%s'...", title)
    results = orchestrator.search_movie(
        title, args.year, limit=args.number, sort_by=args.sort
    )
    show(results, title, args.json)


def cmd_series(args):
    """Handle the series command."""
    title = " ".join(args.title)
    orchestrator = make_orchestrator(args)

    logger.info(
        "Searching episodes for '%s' S%02dE%02d...", title, args.season, args.episode
    )
    results = orchestrator.search_series(
        title, args.season, args.episode, limit=args.number, sort_by=args.sort
    )
    show(results, title, args.json)


def cmd_providers(args):
    """Handle the providers command - list configured providers."""
    manager = ConfigManager()
    settings = manager.load()

    providers = settings.providers if args.all else settings.enabled_providers()
    if not providers:
        print("No enabled providers.")
        print("Use 'trawler enable <name>' to enable one.")
        return

    print("Configured providers:\n")
    for key, config in providers.items():
        status = "enabled" if config.enabled else "disabled"
        source_cls = SOURCE_CLASSES.get(key)
        base_url = config.base_url or (source_cls.default_base_url if source_cls else "?")
        print(f"  {key}: {base_url} [{status}]")


def cmd_enable(args):
    """Handle the enable command - enable a provider."""
    if ConfigManager().set_enabled(args.name, True):
        print(f"Enabled provider '{args.name}'")
    else:
        print(f"Provider '{args.name}' not found")
        sys.exit(1)


def cmd_disable(args):
    """Handle the disable command - disable a provider."""
    if ConfigManager().set_enabled(args.name, False):
        print(f"Disabled provider '{args.name}'")
    else:
        print(f"Provider '{args.name}' not found")
        sys.exit(1)


def cmd_mirror(args):
    """Handle the mirror command - point a provider at another domain."""
    if ConfigManager().set_base_url(args.name, args.url):
        print(f"Provider '{args.name}' now uses {args.url or 'its default URL'}")
    else:
        print(f"Provider '{args.name}' not found")
        sys.exit(1)


def add_search_options(parser: argparse.ArgumentParser):
    parser.add_argument(
        "-n", "--number", type=int, default=20, help="Number of results (default: 20)"
    )
    parser.add_argument(
        "--sort", choices=["seeds", "size", "name"], default=None,
        help="Sort merged results (default: provider order)"
    )
    parser.add_argument("--source", help="Only query this provider")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trawler: search torrent indexers for movies and TV episodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    movie_parser = subparsers.add_parser("movie", help="Search for a movie")
    movie_parser.add_argument("title", nargs="+", help="Movie title")
    movie_parser.add_argument("-y", "--year", type=int, default=0, help="Release year")
    add_search_options(movie_parser)
    movie_parser.set_defaults(func=cmd_movie)

    series_parser = subparsers.add_parser("series", help="Search for a TV episode")
    series_parser.add_argument("title", nargs="+", help="Show title")
    series_parser.add_argument("-s", "--season", type=int, required=True)
    series_parser.add_argument("-e", "--episode", type=int, required=True)
    add_search_options(series_parser)
    series_parser.set_defaults(func=cmd_series)

    providers_parser = subparsers.add_parser("providers", help="List providers")
    providers_parser.add_argument(
        "-a", "--all", action="store_true", help="Include disabled providers"
    )
    providers_parser.set_defaults(func=cmd_providers)

    enable_parser = subparsers.add_parser("enable", help="Enable a provider")
    enable_parser.add_argument("name", help="Provider key to enable")
    enable_parser.set_defaults(func=cmd_enable)

    disable_parser = subparsers.add_parser("disable", help="Disable a provider")
    disable_parser.add_argument("name", help="Provider key to disable")
    disable_parser.set_defaults(func=cmd_disable)

    mirror_parser = subparsers.add_parser("mirror", help="Set a provider's base URL")
    mirror_parser.add_argument("name", help="Provider key")
    mirror_parser.add_argument(
        "url", nargs="?", default=None, help="Base URL (omit to reset)"
    )
    mirror_parser.set_defaults(func=cmd_mirror)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()

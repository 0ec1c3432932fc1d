"""ghtriage entry point.

Fetches GitHub notifications, classifies each one and prints the triage
list. Usage: ghtriage [--config PATH] [--check] [--clear-cache] [--no-color].
"""

import argparse
import logging
import sys
from pathlib import Path

from ghtriage.adapters.github import GitHubClient
from ghtriage.cache import ResourceCache
from ghtriage.config import AppConfig, load_config
from ghtriage.errors import GitHubError
from ghtriage.logging import TriageLogging
from ghtriage.render import Renderer
from ghtriage.triage import build_triage

TOKEN_HELP = (
    "Could not find GITHUB_TOKEN environment variable.\n"
    "  Please generate a token with the `repo` scope and assign it to the GITHUB_TOKEN environment variable.\n"
    "  https://github.com/settings/tokens"
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="ghtriage",
        description="Triage GitHub notifications by how directly they concern you",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Delete cached API responses, then exit",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print without ANSI colors",
    )
    return parser.parse_args(argv)


def make_cache(config: AppConfig) -> ResourceCache:
    return ResourceCache(
        config.cache.path,
        api_prefix=config.github.api_url.rstrip("/") + "/",
        hashed_keys=config.cache.hashed_keys,
    )


def make_client(config: AppConfig, token: str) -> GitHubClient:
    return GitHubClient(
        token=token,
        cache=make_cache(config),
        api_url=config.github.api_url,
        user_agent=config.github.user_agent,
        timeout=config.github.timeout,
        user_ttl=config.cache.user_ttl_seconds,
        subject_ttl=config.cache.subject_ttl_seconds,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, fetch and print the triage list."""
    args = parse_args(argv)
    config = load_config(args.config)
    TriageLogging(config.logging).setup()
    log = logging.getLogger("ghtriage.main")

    if args.check:
        print("Config OK:", config.github.api_url, config.cache.path)
        return 0

    if args.clear_cache:
        try:
            removed = make_cache(config).clear()
        except GitHubError as e:
            log.error("%s", e)
            return 1
        print(f"Removed {removed} cached responses from {config.cache.path}")
        return 0

    token = config.github_token_resolved
    if not token:
        print(TOKEN_HELP, file=sys.stderr)
        return 1

    client = make_client(config, token)
    try:
        entries = build_triage(client)
    except GitHubError as e:
        log.error("%s", e)
        return 1

    renderer = Renderer(color=not args.no_color and sys.stdout.isatty())
    output = renderer.render(entries)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

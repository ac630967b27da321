"""CLI entry point for managing the global search index."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from nextsearch_elastic.config.settings import Settings
from nextsearch_elastic.observability.logging import setup_logging
from nextsearch_elastic.platform.base.exceptions import PlatformError
from nextsearch_elastic.platform.elastic import ElasticSearchPlatform

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nextsearch-elastic",
        description="NextSearch Elastic — Manage the global search index",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"nextsearch-elastic {_get_version()}",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("test", help="Check that the search cluster answers")
    sub.add_parser("init", help="Create the global index and ingest pipeline if missing")
    sub.add_parser("reset", help="Delete the global index and ingest pipeline")
    return parser


async def run(command: str, platform: ElasticSearchPlatform) -> int:
    """Run a single CLI command against a platform and return the exit code."""
    await platform.load_platform()
    try:
        if command == "test":
            ok = await platform.test_platform()
            print("ok" if ok else "unreachable")
            return 0 if ok else 1
        if command == "init":
            await platform.init_index()
        elif command == "reset":
            await platform.reset_index()
        return 0
    finally:
        await platform.shutdown()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    try:
        code = asyncio.run(run(args.command, ElasticSearchPlatform(settings)))
    except PlatformError as e:
        logger.error("Command %s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


def _get_version() -> str:
    """Get the package version."""
    try:
        from nextsearch_elastic import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()

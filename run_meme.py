# run_meme.py
import argparse
import asyncio
import json
import sys
from pathlib import Path

# Make the repo root importable when run as a plain script
repo_root = Path(__file__).resolve().parent
if str(repo_root) not in sys.path:
    sys.path.append(str(repo_root))

from core.logging import setup_logging
from services.memes.client import MemeClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up memes and print them as JSON.")
    parser.add_argument("--log-level", default=None, help="Override MEME_SCRAPER_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search the site")
    search.add_argument("query")
    search.add_argument("--max", type=int, default=10)

    meme = sub.add_parser("meme", help="Extract a single meme page")
    meme.add_argument("url")
    return parser


async def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    async with MemeClient() as client:
        if args.command == "search":
            hits = await client.search(args.query, args.max)
            print(json.dumps([h.to_dict() for h in hits], indent=2))
            return 0 if hits else 1

        details = await client.get_meme(args.url)
        if details is None:
            return 1
        print(json.dumps(details.to_dict(), indent=2))
        return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

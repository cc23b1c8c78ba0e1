import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from content_slugs.config import load_settings
from content_slugs.dates import published_date
from content_slugs.errors import SlugError
from content_slugs.logging_utils import configure_logging
from content_slugs.resolver import COLLECTIONS, SlugResolver
from content_slugs.tags import normalize_tag

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="content_slugs")
    parser.add_argument("--content-dir", default=None, help="Content root (default: ./content)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    slug_parser = subparsers.add_parser("slug", help="Print the slug of each content file")
    slug_parser.add_argument(
        "--collection",
        default="posts",
        choices=COLLECTIONS,
        help="Naming convention to apply (default: posts)",
    )
    slug_parser.add_argument("paths", nargs="+", help="Absolute content file paths")

    date_parser = subparsers.add_parser("date", help="Print the published date of each post")
    date_parser.add_argument("paths", nargs="+", help="Absolute content file paths")

    tag_parser = subparsers.add_parser("tag", help="Print the normalized form of each tag")
    tag_parser.add_argument("tags", nargs="+", help="Raw tag names")

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(content_dir=args.content_dir, log_level=args.log_level)
    configure_logging(settings.log_level, Path(args.log_file) if args.log_file else None)

    try:
        if args.command == "slug":
            resolver = SlugResolver(settings)
            for path, slug in resolver.resolve_many(args.collection, args.paths):
                print(f"{path}\t{slug}")
        elif args.command == "date":
            for path in args.paths:
                print(f"{path}\t{published_date(settings.posts_root, path).isoformat()}")
        elif args.command == "tag":
            for tag in args.tags:
                print(f"{tag}\t{normalize_tag(tag)}")
    except SlugError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

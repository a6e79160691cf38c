"""CLI entrypoint for Funda listings."""

import argparse
import json
import logging
import sys

from funda_listings.config import settings


def setup_logging():
    """Configure logging from settings."""
    log_level = getattr(logging, settings.log_level.upper())
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))

    # File handler (if log file is configured)
    handlers = [console_handler]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def cmd_search(args):
    """Search one page and print the completed listings."""
    from funda_listings.client import FundaClient, FundaError

    client = FundaClient.from_settings()
    try:
        listings = client.search(
            search_opts=args.options,
            page=args.page,
            page_size=args.page_size or settings.page_size,
        )
    except FundaError as e:
        print(f"✗ Search failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        client.close()

    if args.json:
        print(json.dumps([listing.to_dict() for listing in listings], ensure_ascii=False, indent=2))
        return

    for listing in listings:
        print(f"{listing.id}  {listing.address}")
        print(f"  Price: {listing.price or '-'}")
        print(f"  Surface area: {listing.surface_area or '-'}")
        print(f"  Rooms: {listing.rooms or '-'}")
        print(f"  URL: {listing.url or '-'}")
    print(f"\n✓ {len(listings)} listings")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Funda listings")
    sub = parser.add_subparsers(dest="command")

    # search
    p_search = sub.add_parser("search", help="Search listings on the Funda mobile API")
    p_search.add_argument(
        "--options",
        default="",
        help="Search path suffix, e.g. /amsterdam/+200km/",
    )
    p_search.add_argument("--page", type=int, default=0)
    p_search.add_argument("--page-size", type=int, default=None)
    p_search.add_argument("--json", action="store_true", help="Print listings as JSON")
    p_search.set_defaults(func=cmd_search)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging()
    args.func(args)


if __name__ == "__main__":
    main()

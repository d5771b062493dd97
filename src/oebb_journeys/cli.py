"""Command line interface for ÖBB journey searches."""

import asyncio
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from typing import Any

from oebb_journeys.domain.errors import InvalidOptionsError
from oebb_journeys.domain.models import Journey
from oebb_journeys.search import journeys


def _format_time(value: str) -> str:
    return datetime.fromisoformat(value).strftime("%d.%m. %H:%M")


def format_journey(journey: Journey) -> str:
    """Format a journey as a short multi-line text block."""
    first, last = journey.legs[0], journey.legs[-1]
    price = "no price"
    if journey.price:
        price = f"{journey.price.amount:.2f} {journey.price.currency}"
        if journey.price.is_first_class:
            price += " (1st class)"
    header = (
        f"{_format_time(first.departure)} {first.origin.name} -> "
        f"{_format_time(last.arrival)} {last.destination.name}  "
        f"[{journey.transfers} transfer(s), {price}]"
    )
    lines = [header]
    for leg in journey.legs:
        platform = f" (Bstg. {leg.departure_platform})" if leg.departure_platform else ""
        lines.append(
            f"    {leg.line.name or leg.mode:<12} {_format_time(leg.departure)} "
            f"{leg.origin.name}{platform} -> {_format_time(leg.arrival)} {leg.destination.name}"
        )
    return "\n".join(lines)


def journey_to_dict(journey: Journey) -> dict[str, Any]:
    """Convert a journey into JSON-serializable data."""
    return asdict(journey)


def _build_options(args: Any) -> dict[str, Any]:
    """Build search options from parsed arguments, leaving unset ones out."""
    options: dict[str, Any] = {"prices": not args.no_prices, "sort_type": args.sort_type}
    if args.when:
        options["when"] = args.when
    for name in ("results", "transfers", "interval"):
        value = getattr(args, name)
        if value is not None:
            options[name] = value
    return options


async def _handle_search_command(args: Any) -> None:
    """Handle the search command."""
    results = await journeys(args.origin, args.destination, _build_options(args))

    if args.json:
        print(json.dumps([journey_to_dict(j) for j in results], indent=2, ensure_ascii=False))
        return

    if not results:
        print("No journeys found.")
        return

    for journey in results:
        print(format_journey(journey))
        print()


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="ÖBB journey search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next journeys from Berlin Hbf to Hamburg Hbf
  oebb-journeys search 8011160 8002549

  # Three journeys to Wien Hbf at a given time, as JSON
  oebb-journeys search 8011160 1190100 --when 2026-11-02T05:00 --results 3 --json

Environment: OEBB_BASE_URL, OEBB_API_TIMEOUT, OEBB_LOG_REQUESTS
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search journeys between two stations")
    search_parser.add_argument("origin", help="Origin station id (e.g., 8011160)")
    search_parser.add_argument("destination", help="Destination station id (e.g., 8002549)")
    search_parser.add_argument("--when", help="Departure date/time (ISO 8601, Vienna time)")
    search_parser.add_argument("--results", type=int, help="Max. number of journeys")
    search_parser.add_argument("--transfers", type=int, help="Max. number of transfers")
    search_parser.add_argument("--interval", type=int, help="Departure window in minutes")
    search_parser.add_argument("--sort-type", default="DEPARTURE", help="Backend sort type")
    search_parser.add_argument("--no-prices", action="store_true", help="Skip price lookup")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.command != "search":
        parser.print_help()
        sys.exit(1)

    try:
        await _handle_search_command(args)
    except InvalidOptionsError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()

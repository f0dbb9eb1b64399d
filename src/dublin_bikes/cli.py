"""CLI helpers for exploring the station dataset offline."""

import argparse
import json
import sys
from typing import Any

from dublin_bikes.adapters.config import AppConfig
from dublin_bikes.adapters.dataset import JsonStationDatasetLoader
from dublin_bikes.adapters.memory import InMemoryStationRepository
from dublin_bikes.application.summary import summarize_stations
from dublin_bikes.domain.errors import DataError
from dublin_bikes.domain.models import DEFAULT_PAGE_SIZE, Station, StationQuery


def station_to_dict(station: Station) -> dict[str, Any]:
    """Flatten a station into JSON-friendly values."""
    return {
        "number": station.number,
        "name": station.name,
        "address": station.address,
        "latitude": station.position.lat,
        "longitude": station.position.lng,
        "bike_stands": station.bike_stands,
        "available_bikes": station.available_bikes,
        "available_bike_stands": station.available_bike_stands,
        "status": station.status,
        "occupancy": station.occupancy,
        "last_update": station.last_update.isoformat(),
    }


def _format_station_line(station: Station) -> str:
    return (
        f"  {station.number:>4}  {station.name:<32} {station.status:<7} "
        f"{station.available_bikes:>3}/{station.bike_stands:<3} bikes ({station.occupancy:.2f}%)"
    )


def load_repository(dataset_path: str) -> InMemoryStationRepository:
    """Load the dataset into a fresh repository."""
    repository = InMemoryStationRepository()
    repository.load(JsonStationDatasetLoader(dataset_path).load())
    return repository


def list_command(repository: InMemoryStationRepository, args: argparse.Namespace) -> int:
    """Print one page of stations."""
    result = repository.query(
        StationQuery(
            status=args.status,
            min_bikes=args.min_bikes,
            search=args.query,
            sort=args.sort,
            direction=args.dir,
            page=args.page,
            page_size=args.page_size,
        )
    )
    if args.json:
        payload = {
            "data": [station_to_dict(s) for s in result.items],
            "page": result.page,
            "page_size": result.page_size,
            "total_count": result.total_count,
            "total_pages": result.total_pages,
            "has_previous": result.has_previous,
            "has_next": result.has_next,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    if not result.items:
        print("No stations found", file=sys.stderr)
        return 1
    print(
        f"\nPage {result.page}/{max(result.total_pages, 1)} "
        f"({result.total_count} matching station(s)):\n"
    )
    for station in result.items:
        print(_format_station_line(station))
    print()
    return 0


def show_command(repository: InMemoryStationRepository, args: argparse.Namespace) -> int:
    """Print a single station."""
    station = repository.get(args.number)
    if station is None:
        print(f"Station {args.number} not found.", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(station_to_dict(station), indent=2, ensure_ascii=False))
    else:
        print(_format_station_line(station))
        print(f"        {station.address} ({station.position.lat}, {station.position.lng})")
    return 0


def summary_command(repository: InMemoryStationRepository, args: argparse.Namespace) -> int:
    """Print aggregate statistics."""
    summary = summarize_stations(repository.list_all())
    if args.json:
        print(
            json.dumps(
                {
                    "total_stations": summary.total_stations,
                    "total_bike_stands": summary.total_bike_stands,
                    "total_available_bikes": summary.total_available_bikes,
                    "total_available_bike_stands": summary.total_available_bike_stands,
                    "counts_by_status": summary.counts_by_status,
                    "average_occupancy": summary.average_occupancy,
                },
                indent=2,
            )
        )
        return 0

    print(f"Stations:            {summary.total_stations}")
    print(f"Bike stands:         {summary.total_bike_stands}")
    print(f"Available bikes:     {summary.total_available_bikes}")
    print(f"Available stands:    {summary.total_available_bike_stands}")
    print(f"Average occupancy:   {summary.average_occupancy:.2f}%")
    for status, count in sorted(summary.counts_by_status.items()):
        print(f"  {status}: {count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Dublin Bikes station dataset explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List open stations with at least 5 bikes, emptiest first
  dublin-bikes-cli list --status OPEN --min-bikes 5 --sort occupancy

  # Search by name or address
  dublin-bikes-cli list --query "street" --json

  # Show one station
  dublin-bikes-cli show 42

  # Show catalogue statistics
  dublin-bikes-cli summary
        """,
    )
    parser.add_argument("--dataset", help="Path to the station dataset JSON file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    list_parser = subparsers.add_parser("list", help="List stations")
    list_parser.add_argument("--status", help="Filter by status (OPEN/CLOSED)")
    list_parser.add_argument("--min-bikes", type=int, help="Minimum available bikes")
    list_parser.add_argument("--query", help="Search text for name and address")
    list_parser.add_argument("--sort", help="Sort by name, availableBikes or occupancy")
    list_parser.add_argument("--dir", choices=["asc", "desc"], help="Sort direction")
    list_parser.add_argument("--page", type=int, default=1, help="Page number")
    list_parser.add_argument(
        "--page-size", type=int, default=DEFAULT_PAGE_SIZE, help="Stations per page (max 100)"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    show_parser = subparsers.add_parser("show", help="Show a single station")
    show_parser.add_argument("number", type=int, help="Station number")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    summary_parser = subparsers.add_parser("summary", help="Show catalogue statistics")
    summary_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


_COMMANDS = {
    "list": list_command,
    "show": show_command,
    "summary": summary_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    dataset_path = args.dataset or AppConfig().dataset_path
    try:
        repository = load_repository(dataset_path)
    except DataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _COMMANDS[args.command](repository, args)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()

#!/usr/bin/env python3
"""
Unified CLI for the virtual garage.

Commands:
  list         - Show every garage slot
  show         - Show one vehicle with its maintenance
  create       - Create a vehicle in an empty (or replaced) slot
  modify       - Modify an existing vehicle, keeping its state
  action       - Turn on/off, accelerate, brake, honk, refuel, turbo, cargo, flight
  maintenance  - Record a service or schedule an appointment
  music        - Load, play or stop a vehicle's music
  details      - Show catalog details for a vehicle
  weather      - Daily forecast for a city (via the backend)
  tips         - Maintenance tips (via the backend)
  featured     - Featured vehicles (via the backend)
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import Iterable, List, Optional

from garage import (
    ActionResult,
    Garage,
    GarageSession,
    JsonFileStorage,
    Level,
    MaintenanceRecord,
    VehicleForm,
    VehicleKind,
)
from garage.backend import BackendClient, BackendError
from garage.catalog import Catalog, CatalogError, format_details
from garage.config import Settings
from garage.forecast import DailyForecast, summarize_forecast

# =============================================================================
# Formatting helpers
# =============================================================================


def format_speed(speed: Optional[float]) -> str:
    """Format speed for display."""
    return f"{speed:,.0f} km/h" if speed is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"${cost:,.2f}" if cost is not None else "-"


def format_percent(percent: Optional[int]) -> str:
    return f"{percent}%" if percent is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def format_notification(result: ActionResult) -> str:
    return f"[{result.level.value}] {result.message}"


def print_notifications(results: Iterable[ActionResult]) -> None:
    for result in results:
        out = sys.stderr if result.level is Level.ERROR else sys.stdout
        print(format_notification(result), file=out)


# =============================================================================
# Tables
# =============================================================================


def make_garage_table(garage: Garage) -> List[List[str]]:
    """One row per slot, empty slots included."""
    rows = []
    for kind, vehicle in garage.items():
        if vehicle is None:
            rows.append([kind.value, "(empty)", "-", "-", "-"])
            continue
        fuel = getattr(vehicle, "fuel_percent", None)
        rows.append(
            [
                kind.value,
                vehicle.identifier,
                vehicle.status_text,
                format_speed(vehicle.speed),
                format_percent(fuel),
            ]
        )
    return rows


def make_maintenance_table(records: List[MaintenanceRecord]) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    return [
        [
            record.date.isoformat(),
            record.service_type,
            format_cost(record.cost),
            truncate(record.description),
        ]
        for record in records
    ]


def make_forecast_table(days: List[DailyForecast]) -> List[List[str]]:
    return [
        [day.date, day.description, f"{day.temp_min:g}°C", f"{day.temp_max:g}°C"]
        for day in days
    ]


# =============================================================================
# Garage commands
# =============================================================================


def cmd_list(session: GarageSession, args) -> int:
    """Show every garage slot."""
    headers = ["Slot", "Vehicle", "Status", "Speed", "Fuel"]
    print(tabulate(make_garage_table(session.garage), headers=headers, tablefmt="simple"))
    return 0


def cmd_show(session: GarageSession, args) -> int:
    """Show one vehicle with its maintenance."""
    vehicle = session.select(args.kind)
    if vehicle is None:
        print(f"No {args.kind.label.lower()} in the garage. Create one with 'create {args.kind.value}'.")
        return 1

    view = session.view()
    print(f"{view['label']}: {view['identifier']}")
    print(tabulate(view["details"], tablefmt="plain"))
    print(f"Actions: {', '.join(view['actions'])}")
    print()

    today = session.today
    history = vehicle.history(today)
    upcoming = vehicle.upcoming(today)
    headers = ["Date", "Type", "Cost", "Description"]
    print("MAINTENANCE HISTORY:")
    if history:
        print(tabulate(make_maintenance_table(history), headers=headers, tablefmt="simple"))
    else:
        print("  No records.")
    print()
    print("UPCOMING APPOINTMENTS:")
    if upcoming:
        print(tabulate(make_maintenance_table(upcoming), headers=headers, tablefmt="simple"))
    else:
        print("  No records.")
    return 0


def _form_from_args(session: GarageSession, args) -> Optional[VehicleForm]:
    image = None
    if args.image:
        image = session.load_image(args.image)
        if image is None:
            return None
    return VehicleForm(
        model=args.model,
        color=args.color,
        nickname=args.nickname,
        image=image,
        cargo_capacity=args.capacity,
        wingspan=args.wingspan,
        bike_type=args.bike_type,
    )


def cmd_create(session: GarageSession, args) -> int:
    """Create a vehicle, replacing any current occupant of the slot."""
    session.select(args.kind)
    form = _form_from_args(session, args)
    if form is None:
        return 1
    return 0 if session.save_vehicle(form).accepted else 1


def cmd_modify(session: GarageSession, args) -> int:
    """Modify an existing vehicle; omitted fields keep their value."""
    vehicle = session.select(args.kind)
    if session.start_edit().rejected:
        return 1
    form = _form_from_args(session, args)
    if form is None:
        return 1
    form.model = form.model or vehicle.model
    form.color = form.color or vehicle.color
    if form.nickname is None:
        form.nickname = vehicle.nickname
    if form.cargo_capacity is None:
        form.cargo_capacity = getattr(vehicle, "cargo_capacity", None)
    if form.wingspan is None:
        form.wingspan = getattr(vehicle, "wingspan", None)
    if form.bike_type is None and hasattr(vehicle, "bike_type"):
        form.bike_type = vehicle.bike_type.value
    return 0 if session.save_vehicle(form).accepted else 1


def cmd_action(session: GarageSession, args) -> int:
    session.select(args.kind)
    action = args.name.replace("-", "_")
    return 0 if session.perform(action, args.amount).accepted else 1


def cmd_maintenance(session: GarageSession, args) -> int:
    """Record a service or schedule an appointment."""
    session.select(args.kind)
    result = session.add_maintenance(args.date, args.type, args.cost, args.description)
    return 0 if result.accepted else 1


def cmd_music(session: GarageSession, args) -> int:
    session.select(args.kind)
    if args.stop:
        result = session.stop_music()
    elif args.file:
        result = session.load_music(args.file)
        if result.accepted and args.play:
            result = session.play_music()
    elif args.play:
        result = session.play_music()
    else:
        print("Nothing to do: give a FILE, --play or --stop")
        return 1
    return 0 if result.accepted else 1


def cmd_details(session: GarageSession, args, settings: Settings) -> int:
    """Show catalog details for a vehicle."""
    vehicle = session.select(args.kind)
    if vehicle is None:
        print(f"No {args.kind.label.lower()} in the garage.")
        return 1
    if vehicle.catalog_id is None:
        print(f"{vehicle.identifier} has no catalog id.")
        return 1
    try:
        entry = Catalog.from_file(settings.catalog_file).lookup(vehicle.catalog_id)
    except CatalogError as e:
        print(f"Error: {e}")
        return 1
    if entry is None:
        print(f"No extra details found (catalog id: {vehicle.catalog_id}).")
        return 0
    print(f"{vehicle.identifier}:")
    print(tabulate(format_details(entry), tablefmt="plain"))
    return 0


# =============================================================================
# Backend commands
# =============================================================================


def cmd_weather(client: BackendClient, args) -> int:
    """Daily forecast for a city."""
    try:
        payload = client.forecast(args.city)
    except BackendError as e:
        print(f"Failed to fetch forecast for {args.city}: {e}")
        return 1
    days = summarize_forecast(payload)
    if not days:
        print(f"No forecast available for {args.city}.")
        return 1
    print(f"Forecast for {args.city}:")
    headers = ["Date", "Conditions", "Min", "Max"]
    print(tabulate(make_forecast_table(days), headers=headers, tablefmt="simple"))
    return 0


def cmd_tips(client: BackendClient, args) -> int:
    """Maintenance tips, general or for one vehicle kind."""
    try:
        tips = client.tips(args.kind.value if args.kind else None)
    except BackendError as e:
        print(f"Failed to load tips: {e}")
        return 1
    if not tips:
        print("No tips found.")
        return 0
    for tip in tips:
        print(f"  - {tip}")
    return 0


def cmd_featured(client: BackendClient, args) -> int:
    try:
        vehicles = client.featured()
    except BackendError as e:
        print(f"Failed to load featured vehicles: {e}")
        return 1
    rows = [[v.get("model"), v.get("year"), truncate(v.get("highlight"), 50)] for v in vehicles]
    print(tabulate(rows, headers=["Model", "Year", "Highlight"], tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================

GARAGE_COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "create": cmd_create,
    "modify": cmd_modify,
    "action": cmd_action,
    "maintenance": cmd_maintenance,
    "music": cmd_music,
}

BACKEND_COMMANDS = {
    "weather": cmd_weather,
    "tips": cmd_tips,
    "featured": cmd_featured,
}


def _add_vehicle_fields(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--model", required=required, help="Model name")
    parser.add_argument("--color", required=required, help="Color")
    parser.add_argument("--nickname", help="Optional nickname")
    parser.add_argument("--image", type=Path, help="Image file to attach")
    parser.add_argument("--capacity", help="Cargo capacity in kg (truck)")
    parser.add_argument("--wingspan", help="Wingspan in meters (plane)")
    parser.add_argument("--bike-type", choices=["urban", "mountain", "speed"], help="Bicycle type")


def build_parser() -> argparse.ArgumentParser:
    kinds = [k.value for k in VehicleKind]
    parser = argparse.ArgumentParser(
        description="Virtual garage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s create truck --model FH16 --color white --capacity 1000
  %(prog)s action truck turn-on
  %(prog)s action truck load-cargo 200
  %(prog)s maintenance truck --date 2025-01-15 --type "Oil change" --cost 450
  %(prog)s show truck
  %(prog)s weather "Sao Paulo"
""",
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding the saved garage")
    parser.add_argument("--backend-url", help="Backend base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")

    subparsers = parser.add_subparsers(dest="command", required=True)
    kind_arg = {"type": VehicleKind.parse, "help": f"Vehicle kind ({', '.join(kinds)})"}

    subparsers.add_parser("list", help="Show every garage slot")

    show_parser = subparsers.add_parser("show", help="Show one vehicle")
    show_parser.add_argument("kind", **kind_arg)

    create_parser = subparsers.add_parser("create", help="Create a vehicle")
    create_parser.add_argument("kind", **kind_arg)
    _add_vehicle_fields(create_parser, required=True)

    modify_parser = subparsers.add_parser("modify", help="Modify a vehicle")
    modify_parser.add_argument("kind", **kind_arg)
    _add_vehicle_fields(modify_parser, required=False)

    action_parser = subparsers.add_parser("action", help="Perform an action")
    action_parser.add_argument("kind", **kind_arg)
    action_parser.add_argument(
        "name",
        help="turn-on, turn-off, accelerate, brake, honk, refuel, activate-turbo, "
        "deactivate-turbo, load-cargo, unload-cargo, take-off, land",
    )
    action_parser.add_argument("amount", nargs="?", help="Quantity for speed, fuel or cargo actions")

    maint_parser = subparsers.add_parser("maintenance", help="Add a maintenance record")
    maint_parser.add_argument("kind", **kind_arg)
    maint_parser.add_argument("--date", required=True, help="Date in YYYY-MM-DD format")
    maint_parser.add_argument("--type", required=True, help="Service type (e.g., 'Oil change')")
    maint_parser.add_argument("--cost", required=True, help="Cost of service")
    maint_parser.add_argument("--description", help="Notes about the service")

    music_parser = subparsers.add_parser("music", help="Load, play or stop music")
    music_parser.add_argument("kind", **kind_arg)
    music_parser.add_argument("file", nargs="?", type=Path, help="Audio file to load")
    music_parser.add_argument("--play", action="store_true", help="Start playback")
    music_parser.add_argument("--stop", action="store_true", help="Stop playback")

    details_parser = subparsers.add_parser("details", help="Show catalog details")
    details_parser.add_argument("kind", **kind_arg)

    weather_parser = subparsers.add_parser("weather", help="Daily forecast for a city")
    weather_parser.add_argument("city", help="City name")

    tips_parser = subparsers.add_parser("tips", help="Maintenance tips")
    tips_parser.add_argument("kind", nargs="?", type=VehicleKind.parse, help="Vehicle kind")

    subparsers.add_parser("featured", help="Featured vehicles")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    if args.data_dir:
        settings.data_dir = args.data_dir
    if args.backend_url:
        settings.backend_url = args.backend_url

    if args.command in BACKEND_COMMANDS:
        client = BackendClient(settings.backend_url)
        return BACKEND_COMMANDS[args.command](client, args)

    session = GarageSession(JsonFileStorage(settings.data_dir))
    session.load()
    try:
        if args.command == "details":
            return cmd_details(session, args, settings)
        return GARAGE_COMMANDS[args.command](session, args)
    finally:
        print_notifications(session.drain_notifications())


if __name__ == "__main__":
    sys.exit(main() or 0)

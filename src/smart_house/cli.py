"""CLI entry point for Smart House."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from smart_house.errors import SmartHouseError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, keeping stdout for reports."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="smart-house",
        description="Smart House - rooms, devices and status reports",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # demo command
    subparsers.add_parser("demo", help="Print the sample house report twice")

    # report command
    report_parser = subparsers.add_parser("report", help="Print the house report")
    report_parser.add_argument(
        "--config-dir",
        type=str,
        help="Path to config directory",
    )
    report_parser.add_argument(
        "--times",
        type=int,
        default=1,
        help="How many times to print the report (default: 1)",
    )

    # rooms command
    rooms_parser = subparsers.add_parser("rooms", help="List the rooms of the house")
    rooms_parser.add_argument(
        "--config-dir",
        type=str,
        help="Path to config directory",
    )

    # devices command
    devices_parser = subparsers.add_parser("devices", help="List the devices of a room")
    devices_parser.add_argument("room", type=str, help="Room name")
    devices_parser.add_argument(
        "--config-dir",
        type=str,
        help="Path to config directory",
    )

    # config command
    config_parser = subparsers.add_parser("config", help="Configuration utilities")
    config_subparsers = config_parser.add_subparsers(dest="config_action", help="Config action")

    # config validate
    validate_parser = config_subparsers.add_parser("validate", help="Validate configuration")
    validate_parser.add_argument(
        "--config-dir",
        type=str,
        help="Path to config directory",
    )

    # config init
    init_parser = config_subparsers.add_parser("init", help="Create an example config file")
    init_parser.add_argument(
        "--config-dir",
        type=str,
        default="./config",
        help="Path to config directory (default: ./config)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    if args.command == "demo":
        from smart_house.main import run
        run()

    elif args.command == "config":
        if args.config_action is None:
            config_parser.print_help()
            sys.exit(1)
        run_config_command(args)

    else:
        try:
            run_house_command(args)
        except (SmartHouseError, ValidationError) as e:
            logger.debug(f"Command {args.command} failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


def run_house_command(args: argparse.Namespace) -> None:
    """Run commands that work on the configured house."""
    from smart_house.builder import build_house
    from smart_house.config import find_config_dir, load_config

    config_dir = Path(args.config_dir) if args.config_dir else find_config_dir()
    config = load_config(config_dir)
    logger.info(f"Loaded config for: {config.name}")
    house = build_house(config)

    if args.command == "report":
        for _ in range(args.times):
            print(house.create_report())

    elif args.command == "rooms":
        for name in house.get_room_names():
            print(name)

    elif args.command == "devices":
        for name in house.get_room_devices_names(args.room):
            print(name)


def run_config_command(args: argparse.Namespace) -> None:
    """Run config commands."""
    from smart_house.config_utils import init_config, validate_config

    if args.config_action == "validate":
        if not validate_config(args.config_dir):
            sys.exit(1)

    elif args.config_action == "init":
        init_config(args.config_dir)


if __name__ == "__main__":
    main()

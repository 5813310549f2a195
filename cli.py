#!/usr/bin/env python3
"""
Command-line interface for the DDD modules example.

Usage:
    uv run python cli.py [command] [options]

Commands:
    run         Wire the services and ship one example order
    test        Run the test suite

Examples:
    uv run python cli.py run
    uv run python cli.py run --order-id 7 --log-level DEBUG
    uv run python cli.py test -v
"""

import argparse
import subprocess
import sys
from typing import Optional


def run_app(order_id: int, log_level: str) -> int:
    """Run the example order. Returns the process exit status."""
    from mainapp.app import run_order_shipment_demo
    from mainapp.config import configure_logging
    from mainapp.registry import ConfigurationError, load_services

    configure_logging(log_level)

    try:
        services = load_services()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 2

    shipped = run_order_shipment_demo(order_id, services=services)
    return 0 if shipped else 1


def run_tests(args: list[str]) -> int:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    return subprocess.run(cmd).returncode


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DDD Modules Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run
  %(prog)s run --order-id 7
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Run command
    run_parser = subparsers.add_parser("run", help="Ship one example order")
    run_parser.add_argument("--order-id", type=int, default=1, help="Id of the order to place")
    run_parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    # Test command: everything after "test" goes to pytest unchanged, options included
    subparsers.add_parser(
        "test",
        help="Run the test suite",
        description="Run the test suite. Any further arguments are passed to pytest.",
    )

    args, extra_args = parser.parse_known_args(argv)
    if extra_args and args.command != "test":
        parser.error(f"unrecognized arguments: {' '.join(extra_args)}")

    if args.command == "run":
        sys.exit(run_app(args.order_id, args.log_level))
    elif args.command == "test":
        sys.exit(run_tests(extra_args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

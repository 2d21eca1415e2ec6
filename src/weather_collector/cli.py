"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from weather_collector import __version__
from weather_collector.collector import Collector
from weather_collector.config import get_settings
from weather_collector.flows.collect import collect_weather
from weather_collector.log import config_logger
from weather_collector.source import WeatherSource
from weather_collector.store import PointWriter

if TYPE_CHECKING:
    from weather_collector.config import Settings

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-collector",
        description="Sample current weather on an interval and write it to InfluxDB",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command - long-running collector
    subparsers.add_parser("run", help="Collect on an interval until interrupted")

    # 'collect' command - single cycle as a Prefect flow
    collect_parser = subparsers.add_parser("collect", help="Collect and write one reading")
    collect_parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="City to collect for (default: CITY from settings)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def print_banner(settings: Settings) -> None:
    """Print the startup banner."""
    print("Weather Collector Starting...")
    print(f"City: {settings.city}")
    print(f"Interval: {settings.interval_seconds:g} seconds")
    print(f"InfluxDB URL: {settings.influxdb_url}")


def install_signal_handlers(collector: Collector) -> None:
    """
    Route SIGINT and SIGTERM to ``collector.stop()``.

    The handler runs on the main thread, which may be interrupted inside the
    stop event's own ``wait()`` while holding its lock, so ``stop()`` is called
    from a short-lived thread instead of inline.
    """

    def _handle(signum: int, _frame: Any) -> None:
        print("\nShutting down...")
        logger.debug("Received signal %d", signum)
        threading.Thread(target=collector.stop, name="collector-stop", daemon=True).start()

    for sig in SHUTDOWN_SIGNALS:
        signal.signal(sig, _handle)


def load_settings() -> Settings | None:
    """Load settings, logging and returning None if they are invalid."""
    try:
        return get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return None


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command: warm up, then collect until signalled."""
    settings = load_settings()
    if settings is None:
        return 1

    if settings.debug and not args.debug:
        config_logger(debug=True)

    print_banner(settings)

    try:
        with PointWriter.from_settings(settings) as writer:
            source = WeatherSource.from_settings(settings)
            collector = Collector.from_settings(settings, source, writer)
            install_signal_handlers(collector)
            collector.run()
    except Exception:
        logger.exception("Fatal error")
        return 1

    return 0


def cmd_collect(args: argparse.Namespace) -> int:
    """Handle the 'collect' command: one fetch-then-write cycle."""
    if load_settings() is None:
        return 1

    summary = collect_weather(city=args.city)
    source = summary["source"]
    print(f"{summary['city']}: {summary['temperature']}°C, {summary['humidity']}% ({source})")
    return 0 if summary["written"] else 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = load_settings()
    if settings is None:
        return 1

    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"City: {settings.city}")
    print(f"Interval: {settings.interval_seconds:g} seconds")
    print(f"InfluxDB URL: {settings.influxdb_url}")
    key_status = "configured" if settings.has_api_key else "missing (mock data)"
    print(f"OpenWeather API key: {key_status}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    config_logger(debug=args.debug)

    commands = {
        "run": cmd_run,
        "collect": cmd_collect,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

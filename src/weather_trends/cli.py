"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path

import uvicorn

from weather_trends import __version__
from weather_trends.config import get_settings
from weather_trends.flows.report import build_report

# Default report range when --start/--end are omitted
DEFAULT_RANGE_DAYS = 30


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-trends",
        description="Historical weather summaries and trend insights by city and date range",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'report' command - fetch, analyze, and write a static dashboard
    today = date.today()
    report_parser = subparsers.add_parser("report", help="Build a static dashboard for a city")
    report_parser.add_argument("--city", type=str, required=True, help="City name")
    report_parser.add_argument(
        "--start",
        type=str,
        default=(today - timedelta(days=DEFAULT_RANGE_DAYS)).isoformat(),
        help=f"First day, yyyy-MM-dd (default: {DEFAULT_RANGE_DAYS} days ago)",
    )
    report_parser.add_argument(
        "--end",
        type=str,
        default=today.isoformat(),
        help="Last day, yyyy-MM-dd (default: today)",
    )
    report_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    # 'serve' command - run the JSON API
    serve_parser = subparsers.add_parser("serve", help="Serve the weather API")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind (default: api_host from settings)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command: run the report flow."""
    if args.debug:
        print(f"Debug mode enabled. Settings: {get_settings()}")

    result = build_report(args.city, args.start, args.end, site_dir=args.out)
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print(f"Report for {result['city']} ({result['days']} days): {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the API with uvicorn."""
    settings = get_settings()
    host = args.host if args.host is not None else settings.api_host
    port = args.port if args.port is not None else settings.api_port

    print(f"Serving API on http://{host}:{port}/ (Ctrl+C to stop)")
    uvicorn.run(
        "weather_trends.api.app:app",
        host=host,
        port=port,
        log_level="debug" if args.debug else "info",
    )
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "report": cmd_report,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

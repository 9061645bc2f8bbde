"""
Command line front end for the open-notify client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from open_notify.client import OpenNotifyClient
from open_notify.config import ENDPOINTS, Config
from open_notify.errors import OpenNotifyError, ValidationError

_LOG = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="open-notify", description="Query the open-notify.org API.")
    parser.add_argument("--config", help="path to a JSON configuration file")
    parser.add_argument("--base-url", help="API base URL")
    parser.add_argument("--timeout", type=float, help="request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("astros", help=ENDPOINTS["astros"]["description"])
    commands.add_parser("iss-now", help=ENDPOINTS["iss-now"]["description"])
    passes = commands.add_parser("passes", help=ENDPOINTS["iss-pass"]["description"])
    passes.add_argument("latitude", type=float)
    passes.add_argument("longitude", type=float)
    passes.add_argument("--altitude", type=float, help="metres above sea level")
    passes.add_argument("--passes", type=int, help="number of passes")
    passes.add_argument("--datetime", type=int, help="reference time as Unix timestamp")
    return parser


async def run_command(args: argparse.Namespace, client: OpenNotifyClient) -> List[str]:
    """Execute the selected command and return the lines to print."""
    if args.command == "astros":
        astros = await client.get_astros()
        lines = [f"People in space: {astros.number}"]
        lines.extend(f" - {person.name} ({person.craft})" for person in astros.people)
        return lines

    if args.command == "iss-now":
        now = await client.get_iss_now()
        return [
            f"ISS position: {now.latitude:.4f}, {now.longitude:.4f}",
            f"As of: {now.time.strftime(TIME_FORMAT)}",
        ]

    pass_times = await client.get_pass_times(
        args.latitude, args.longitude, args.altitude, args.passes, args.datetime
    )
    lines = ["ISS passes:"]
    lines.extend(
        f"- at {p.rise.strftime(TIME_FORMAT)} for {p.duration} seconds" for p in pass_times.passes
    )
    return lines


async def _main(args: argparse.Namespace) -> List[str]:
    config = Config(args.config, base_url=args.base_url, timeout=args.timeout)
    async with OpenNotifyClient(config) as client:
        return await run_command(args, client)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s"
    )
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    try:
        lines = asyncio.run(_main(args))
    except ValidationError as ex:
        _LOG.error("Invalid arguments: %s", ex)
        return 2
    except OpenNotifyError as ex:
        _LOG.error("Request failed: %s", ex)
        return 1

    for line in lines:
        print(line)
    return 0


def run() -> None:
    sys.exit(main())

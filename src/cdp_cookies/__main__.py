#!/usr/bin/env python3
"""
Command-line interface: view open tabs and extensions, and dump, clear or
load cookies through a Chromium-based browser's debug port.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from cdp_cookies.cdp.client import setup_logging
from cdp_cookies.config import ToolConfig
from cdp_cookies.core.errors import CDPCookiesError
from cdp_cookies.core.models import DumpKind, OutputFormat
from cdp_cookies.operations import CookieTool

logger = logging.getLogger("cdp_cookies")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cdp-cookies",
        description="Interact with Chromium-based browsers' debug port to view open tabs, "
                    "installed extensions, and cookies.",
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        required=True,
        help="Remote-debugging port of the browser.",
    )
    parser.add_argument(
        "-d", "--dump",
        choices=[kind.value for kind in DumpKind],
        help="Dump open tabs/extensions (pages) or cookies.",
    )
    parser.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.HUMAN.value,
        help="Format when dumping cookies (default: human).",
    )
    parser.add_argument(
        "-g", "--grep",
        help="Only dump pages whose title/url, or cookies whose name/domain, contain this text.",
    )
    parser.add_argument(
        "-l", "--load",
        metavar="FILE",
        help="JSON file of cookies to load into the browser.",
    )
    parser.add_argument(
        "-c", "--clear",
        action="store_true",
        help="Clear cookies (runs before --load).",
    )
    parser.add_argument(
        "--host",
        default="localhost",
        help="Debug host (default: localhost).",
    )
    parser.add_argument(
        "--read-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the browser's response (default: wait forever).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> None:
    """Run the selected actions in order: dump, clear, load."""
    config = ToolConfig(
        host=args.host,
        port=args.port,
        read_timeout=args.read_timeout,
    )
    tool = CookieTool(config)

    if args.dump == DumpKind.PAGES.value:
        output = await tool.list_targets(args.grep)
        if output:
            print(output)
    elif args.dump == DumpKind.COOKIES.value:
        output = await tool.dump_cookies(args.format, args.grep)
        if output:
            print(output)

    if args.clear:
        await tool.clear_cookies()

    if args.load:
        await tool.load_cookies(args.load)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(logging.WARNING, debug=args.debug)

    try:
        asyncio.run(run(args))
    except CDPCookiesError as e:
        logger.debug(f"{e.stage} stage failed", exc_info=True)
        print(f"error ({e.stage}): {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

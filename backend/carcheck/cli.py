#!/usr/bin/env python3
"""
CarCheck command line.

Usage:
    carcheck serve --port 3001
    carcheck lookup "AB12 CDE"
    carcheck lookup AB12CDE --full --pdf report.html
"""

import argparse
import asyncio
import sys
import webbrowser
from pathlib import Path

from carcheck.client.report_client import ReportClient
from carcheck.client.rendering import render_printable_html, render_text
from carcheck.config import get_settings


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    from carcheck.main import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


async def _lookup(args: argparse.Namespace) -> int:
    client = ReportClient(args.server)
    if args.full:
        state = await client.lookup_all(args.plate)
    else:
        await client.check(args.plate)
        state = client.state

    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
        if not (state.basic or state.full):
            return 1

    print(render_text(state.basic, state.full), end="")

    if args.pdf:
        path = Path(args.pdf)
        path.write_text(render_printable_html(state.plate, state.basic, state.full), encoding="utf-8")
        print(f"Printable report written to {path}")
        webbrowser.open(path.resolve().as_uri())
    return 0


def lookup(args: argparse.Namespace) -> int:
    return asyncio.run(_lookup(args))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carcheck", description="UK vehicle registration lookup")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the proxy server")
    serve_parser.add_argument("--host", help="Bind address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, help="Port (default: PORT setting)")
    serve_parser.set_defaults(func=serve)

    lookup_parser = subparsers.add_parser("lookup", help="Look up a plate through a running proxy")
    lookup_parser.add_argument("plate", help="Registration plate, e.g. AB12CDE")
    lookup_parser.add_argument("--full", action="store_true", help="Also fetch the full report")
    lookup_parser.add_argument("--server", default="http://localhost:3001", help="Proxy base URL")
    lookup_parser.add_argument("--pdf", metavar="FILE", help="Write a printable HTML report and open the print dialog")
    lookup_parser.set_defaults(func=lookup)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

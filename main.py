#!/usr/bin/env python3
"""
httphelper - command line front end

Sends a single GET or POST and prints the response body, or splits a URL
into its parts.
"""

import argparse
import sys
from pathlib import Path

from httphelper import cleanup, get, init, parse_url, post
from httphelper.exceptions import TransportInitError, UrlConstructionError, UrlParseError
from httphelper.logging_config import get_module_logger, setup_logging

logger = get_module_logger("main")

EXIT_USAGE = 2


def _write_body(body: bytes) -> None:
    sys.stdout.buffer.write(body + b"\n")
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send one blocking HTTP request or parse a URL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit status is the transport result code (0 on success).

Examples:
  # POST "Hello World" to localhost:5000/home
  python main.py post

  # POST a JSON document
  python main.py post api.example.com 8080 /items --data '{"name": "x"}'

  # GET a page
  python main.py get example.com 80 /

  # Split a URL into host, port, path and query
  python main.py parse "wikipedia.com/elo321?name=john"
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--log-file", type=Path, help="Also write debug logs to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Send a GET request")
    get_parser.add_argument("host", help="Host name, optionally with scheme")
    get_parser.add_argument("port", type=int, help="Port number")
    get_parser.add_argument("path", nargs="?", default="/", help="Request path (default: /)")

    post_parser = subparsers.add_parser("post", help="Send a JSON POST request")
    post_parser.add_argument("host", nargs="?", default="localhost", help="Host (default: localhost)")
    post_parser.add_argument("port", nargs="?", type=int, default=5000, help="Port (default: 5000)")
    post_parser.add_argument("path", nargs="?", default="/home", help="Request path (default: /home)")
    post_parser.add_argument(
        "--data", default="Hello World", help='Request body sent as-is (default: "Hello World")'
    )

    parse_parser = subparsers.add_parser("parse", help="Split a URL into its parts")
    parse_parser.add_argument("url", help="URL to parse; the scheme may be omitted")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, verbose=args.verbose)

    if args.command == "parse":
        try:
            parsed = parse_url(args.url)
        except UrlParseError as e:
            logger.error(str(e))
            return EXIT_USAGE
        print(f"host: {parsed.host}")
        print(f"port: {parsed.port}")
        print(f"path: {parsed.path}")
        print(f"query: {parsed.query}")
        return 0

    try:
        init()
    except TransportInitError as e:
        logger.error(f"Could not initialize transport: {e}")
        return EXIT_USAGE

    try:
        if args.command == "get":
            result = get(args.host, args.port, args.path)
        else:
            result = post(args.host, args.port, args.path, args.data)
    except UrlConstructionError as e:
        logger.error(str(e))
        return EXIT_USAGE
    finally:
        cleanup()

    if not result.ok:
        logger.error(f"Request failed: {result.status.describe()}")

    _write_body(result.body)
    return int(result.status)


if __name__ == "__main__":
    sys.exit(main())

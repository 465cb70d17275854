"""deeplink CLI — inspect a route table and try URLs against it.

Entry point registered as ``deeplink`` in ``pyproject.toml``::

    [project.scripts]
    deeplink = "deeplink.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``deeplink`` command."""
    parser = argparse.ArgumentParser(
        prog="deeplink",
        description="deeplink — match deep links against a route table.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log matcher decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- deeplink routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "table",
        help="Import string for the route table (e.g. myapp.links:routes)",
    )

    # -- deeplink match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show every route matching a URL")
    match_parser.add_argument(
        "table",
        help="Import string for the route table (e.g. myapp.links:routes)",
    )
    match_parser.add_argument("url", help="URL to match")
    match_parser.add_argument(
        "--first",
        action="store_true",
        help="Only show the first match",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from deeplink.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from deeplink.cli._match import run_match

        run_match(args)

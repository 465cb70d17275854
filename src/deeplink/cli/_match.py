"""``deeplink match`` — show every route matching a URL.

Prints each match in registration order with its value bag and
resolved source. Exits with status 1 when nothing matches.
"""

import argparse
import sys

from deeplink.cli._resolve import resolve_matcher
from deeplink.errors import ConfigurationError


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the route table ``args.table``."""
    try:
        matcher = resolve_matcher(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    matches = matcher.routes_matching(args.url)
    if not matches:
        print(f"No routes match {args.url}", file=sys.stderr)
        raise SystemExit(1)

    if args.first:
        matches = matches[:1]

    for index, match in enumerate(matches, start=1):
        label = f" ({match.route.name})" if match.route.name else ""
        print(f"[{index}] {match.route.path}{label}")
        print(f"    source: {match.source}")
        if match.section is not None:
            print(f"    section: {match.section.value}")
        for key, value in match.values.items():
            print(f"    {key} = {value}")

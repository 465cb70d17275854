"""``deeplink routes`` — list registered routes.

Resolves an import string to a route table and prints every route with
its template, section, default source, and tracking flag.
"""

import argparse
import sys

from deeplink.cli._resolve import resolve_matcher
from deeplink.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of ``args.table`` in registration order."""
    try:
        matcher = resolve_matcher(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not matcher.routes:
        print("No routes registered.")
        return

    # Build rows: (path, section, source, track)
    rows: list[tuple[str, str, str, str]] = []
    for route in matcher.routes:
        path = f"{route.path} ({route.name})" if route.name else route.path
        section = route.section.value if route.section else "-"
        track = "yes" if route.should_track else "no"
        rows.append((path, section, str(route.source), track))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_section = max(max(len(r[1]) for r in rows), 7)  # "SECTION" header
    max_source = max(max(len(r[2]) for r in rows), 6)  # "SOURCE" header

    fmt = f"{{:<{max_path}}}  {{:<{max_section}}}  {{:<{max_source}}}  {{}}"
    print(fmt.format("PATH", "SECTION", "SOURCE", "TRACK"))
    print("-" * min(max_path + max_section + max_source + 11, 80))
    for row in rows:
        print(fmt.format(*row))

"""Site loading shared by every ``roost`` command.

Loads the optional ``roost.toml`` and builds the route table from the
routes directory, turning expected failures into a clean exit.
"""

import argparse
import sys

from roost.config import SiteConfig, load_config
from roost.errors import ConfigurationError
from roost.routing.discovery import discover_routes
from roost.routing.table import RouteTable


def load_site(args: argparse.Namespace) -> RouteTable:
    """Build the route table for ``args.routes_dir`` / ``args.config``.

    Raises ``SystemExit(1)`` with a message on stderr when the config is
    invalid or the routes directory does not exist.
    """
    try:
        config = load_config(args.config) if args.config else SiteConfig()
        sources = discover_routes(args.routes_dir, prefix=config.routes_dir)
        return RouteTable.build(sources, config)
    except (ConfigurationError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

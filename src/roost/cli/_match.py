"""``roost match`` — resolve one URL path.

Redirects are checked first, then the route table.  Exits with code 1
when nothing matches.
"""

import argparse
import sys

from roost.cli._load import load_site
from roost.errors import ConfigurationError, MissingParameterError
from roost.routing.redirects import Redirects


def run_match(args: argparse.Namespace) -> None:
    """Print the redirect, or the route and params, matched by ``args.path``."""
    table = load_site(args)

    try:
        redirect = Redirects.from_config(table.config).resolve(args.path)
    except (ConfigurationError, MissingParameterError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    if redirect is not None:
        destination, status = redirect
        print(f"redirect: {status} -> {destination}")
        return

    match = table.get(args.path)
    if match is None:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    print(f"template: {route.template}")
    print(f"source:   {route.source_id}")
    print(f"locale:   {route.locale}{' (default)' if route.is_default_locale else ''}")
    print(f"handler:  {type(route.handler).__name__}")
    for name, value in sorted(match.params.items()):
        print(f"param:    {name}={value}")

"""``roost paths`` — expand every route into concrete static paths.

Runs the static path expander under ``anyio.run`` and prints one URL
path per line, or sitemap.xml with ``--sitemap`` or ``sitemap = true``
in the config.  Warnings for dropped paths go to stderr; a missing
param fails the command.
"""

import argparse
import sys

import anyio

from roost.cli._load import load_site
from roost.errors import ConfigurationError, MissingParameterError
from roost.static.expander import StaticPathExpander
from roost.static.sitemap import build_sitemap_entries, render_sitemap_xml


def run_paths(args: argparse.Namespace) -> None:
    """Print every static path, or the sitemap built from them."""
    table = load_site(args)
    expander = StaticPathExpander(table.config)
    try:
        result = anyio.run(expander.expand, table)
    except MissingParameterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.sitemap or table.config.sitemap:
        try:
            entries = build_sitemap_entries(result, table.config)
        except ConfigurationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        sys.stdout.write(render_sitemap_xml(entries))
        return

    for url_path in sorted(result.paths):
        print(url_path)

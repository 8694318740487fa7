"""Roost CLI — inspect the route table, match paths, expand static paths.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys


def _add_site_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("routes_dir", help="Path to the routes/ directory")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to roost.toml (default: no config, single-locale site)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — filesystem routing with locale negotiation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    _add_site_arguments(routes_parser)

    # -- roost match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URL path to a redirect or route")
    _add_site_arguments(match_parser)
    match_parser.add_argument("path", help="URL path to resolve (e.g. /fr/blog/hello)")

    # -- roost paths ------------------------------------------------------
    paths_parser = subparsers.add_parser("paths", help="Expand every static path")
    _add_site_arguments(paths_parser)
    paths_parser.add_argument(
        "--sitemap",
        action="store_true",
        help="Print sitemap.xml instead of the path list (requires domain; implied by sitemap = true)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from roost.cli._match import run_match

        run_match(args)
    elif args.command == "paths":
        from roost.cli._paths import run_paths

        run_paths(args)

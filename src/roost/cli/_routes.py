"""``roost routes`` — list registered routes.

Builds the route table and prints every registered template with its
locale and originating route file.
"""

import argparse

from roost.cli._load import load_site


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of TEMPLATE, LOCALE, and SOURCE."""
    table = load_site(args)

    # Build rows: (template, locale, source)
    rows: list[tuple[str, str, str]] = []
    for template, route in table.routes():
        locale = f"{route.locale} (default)" if route.is_default_locale else route.locale
        rows.append((template, locale, route.source_id))

    if not rows:
        print("No routes registered.")
        return

    # Column widths
    max_template = max(max(len(r[0]) for r in rows), 8)  # "TEMPLATE" header
    max_locale = max(max(len(r[1]) for r in rows), 6)  # "LOCALE" header

    fmt = f"{{:<{max_template}}}  {{:<{max_locale}}}  {{}}"
    print(fmt.format("TEMPLATE", "LOCALE", "SOURCE"))
    sep_len = max_template + max_locale + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for template, locale, source in rows:
        print(fmt.format(template, locale, source))

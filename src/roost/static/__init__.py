"""Static generation — concrete paths and sitemap.xml for pre-rendering.

StaticPathExpander -- expand route templates via get_static_paths hooks
build_sitemap_entries / render_sitemap_xml -- sitemap with hreflang alternates
"""

from roost.static.expander import (
    ExpandedRoute,
    ExpansionResult,
    StaticPath,
    StaticPathExpander,
    StaticPathsContext,
)
from roost.static.sitemap import SitemapEntry, build_sitemap_entries, render_sitemap_xml

__all__ = [
    "ExpandedRoute",
    "ExpansionResult",
    "SitemapEntry",
    "StaticPath",
    "StaticPathExpander",
    "StaticPathsContext",
    "build_sitemap_entries",
    "render_sitemap_xml",
]

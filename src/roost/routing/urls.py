"""URL template formatting and normalization.

Route files map to URL templates through two format strings from the
site config::

    url_format       "/[base]/[path]"             -> "/docs/blog/[slug]"
    i18n.url_format  "/[locale]/[base]/[path]"    -> "/[locale]/docs/blog/[slug]"

Every template is normalized the same way so the trie, the static
expander, and the sitemap agree on one spelling of each path.
"""

import re

_REPEATED_SLASHES_RE = re.compile(r"/{2,}")
_FORMAT_NAMES = ("locale", "base", "path")


def bracket_placeholders(url_format: str) -> str:
    """Rewrite ``{locale}``/``{base}``/``{path}`` to the bracket spelling."""
    for name in _FORMAT_NAMES:
        url_format = url_format.replace("{" + name + "}", "[" + name + "]")
    return url_format


def normalize_url_path(path: str, trailing_slash: bool | None = None) -> str:
    """Normalize a URL path or template.

    - repeated slashes collapse to one
    - a trailing ``/index`` segment maps to its directory
    - exactly one leading slash
    - ``trailing_slash=True`` forces a trailing slash, ``False`` strips
      it, ``None`` leaves it as-is

    The root is always ``"/"``.

    Examples::

        normalize_url_path("//blog//index")          -> "/blog/"
        normalize_url_path("blog/", False)           -> "/blog"
        normalize_url_path("/blog", True)            -> "/blog/"
    """
    path = _REPEATED_SLASHES_RE.sub("/", "/" + path)
    if path == "/index" or path.endswith("/index"):
        path = path[: -len("index")]

    if path == "/":
        return path
    if trailing_slash is True and not path.endswith("/"):
        path += "/"
    elif trailing_slash is False:
        path = path.rstrip("/") or "/"
    return path


def format_url_path(
    url_format: str,
    *,
    path: str,
    base: str = "/",
    locale: str | None = None,
    trailing_slash: bool | None = None,
) -> str:
    """Substitute a URL format string and normalize the result.

    ``[locale]`` is left live when *locale* is ``None`` so the result can
    be stored as a locale template and instantiated per locale later.
    """
    url = bracket_placeholders(url_format)
    url = url.replace("[base]", base.strip("/"))
    url = url.replace("[path]", path.strip("/"))
    if locale is not None:
        url = url.replace("[locale]", locale)
    return normalize_url_path(url, trailing_slash)

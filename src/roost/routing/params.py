"""Placeholder substitution for route templates.

Supported placeholders:

- ``[param]`` required, one segment
- ``[...param]`` required catch-all, may contain slashes
- ``[[...param]]`` optional catch-all, replaced with ``""`` when omitted
"""

import re
from collections.abc import Mapping

from roost.errors import MissingParameterError

_PLACEHOLDER_RE = re.compile(r"\[\[?(\.\.\.)?([a-zA-Z0-9_-]*)\]?\]")


def replace_params(template: str, params: Mapping[str, object]) -> str:
    """Replace route placeholders in *template* with values from *params*.

    Examples::

        replace_params("/products/[id]", {"id": "123"})      -> "/products/123"
        replace_params("/wiki/[[...slug]]", {"slug": "a/b"}) -> "/wiki/a/b"
        replace_params("/wiki/[[...slug]]", {})              -> "/wiki/"

    Raises ``MissingParameterError`` if a required placeholder has no
    value; ``None`` and ``""`` both count as missing.
    """

    def _substitute(match: re.Match[str]) -> str:
        placeholder = match.group(0)
        value = params.get(match.group(2))
        if value is None or value == "":
            if placeholder.startswith("[[") and placeholder.endswith("]]"):
                return ""
            raise MissingParameterError(placeholder, template)
        return str(value)

    return _PLACEHOLDER_RE.sub(_substitute, template)


def path_has_placeholders(path: str) -> bool:
    """Return True if any segment of *path* still looks like ``[param]``."""
    return any(segment.startswith("[") and "]" in segment for segment in path.split("/"))

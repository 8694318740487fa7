"""Server-side redirects matched with the route trie.

Redirect sources are route templates, so params and catch-alls carry
over into the destination::

    RedirectConfig(source="/blog/[slug]", destination="/posts/[slug]", type=301)
        /blog/hello  -> ("/posts/hello", 301)

    RedirectConfig(source="/docs/[...path]", destination="/guide/[...path]")
        /docs/a/b    -> ("/guide/a/b", 302)

Redirects are checked before the route table, so a redirect source
shadows any route registered at the same path.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from roost.config import RedirectConfig, SiteConfig
from roost.routing.params import replace_params
from roost.routing.trie import PathTrie

logger = logging.getLogger("roost.routing")


class Redirects:
    """Redirect configs keyed by source template.

    Usage::

        redirects = Redirects.from_config(config)
        hit = redirects.resolve("/blog/hello")
        if hit is not None:
            destination, status = hit
    """

    __slots__ = ("_trie",)

    def __init__(self, redirects: Iterable[RedirectConfig] = ()) -> None:
        self._trie: PathTrie[RedirectConfig] = PathTrie()
        for redirect in redirects:
            if not redirect.source or not redirect.destination:
                logger.warning("Ignoring invalid redirect config: %r", redirect)
                continue
            self._trie.add(redirect.source, redirect)

    @classmethod
    def from_config(cls, config: SiteConfig) -> Redirects:
        return cls(config.redirects)

    def resolve(self, url_path: str) -> tuple[str, int] | None:
        """Return ``(destination, status)`` for *url_path*, or ``None``.

        Raises ``MissingParameterError`` when the destination names a
        param the matched source does not bind.
        """
        redirect, params = self._trie.get(url_path)
        if redirect is None:
            return None
        destination = replace_params(redirect.destination, params)
        logger.debug("Redirect %s -> %s (%d)", url_path, destination, redirect.type)
        return destination, redirect.type

    def __len__(self) -> int:
        return len(self._trie)

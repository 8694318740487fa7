"""Accept-Language header parsing.

The parser is lenient: entries that don't look like a language range
are skipped, as are ``*`` and ``q=0`` entries.  A header that can't be
parsed at all yields an empty list, never an exception.
"""

import re
from dataclasses import dataclass

_ENTRY_RE = re.compile(
    r"^\s*(?P<code>[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*)\s*"
    r"(?:;\s*q\s*=\s*(?P<q>[0-9](?:\.[0-9]{0,3})?))?\s*$"
)


@dataclass(frozen=True, slots=True)
class LocaleCandidate:
    """One weighted entry from an Accept-Language header.

    ``code`` keeps the header's spelling with the language lower-cased
    and a two-letter region upper-cased, e.g. ``"en-US"``.
    """

    code: str
    quality: float = 1.0

    @property
    def language(self) -> str:
        return self.code.split("-", 1)[0]

    @property
    def region(self) -> str | None:
        parts = self.code.split("-", 1)
        return parts[1] if len(parts) > 1 else None


def _canonical_code(code: str) -> str:
    language, _, rest = code.partition("-")
    language = language.lower()
    if not rest:
        return language
    if len(rest) == 2 and rest.isalpha():
        rest = rest.upper()
    return f"{language}-{rest}"


def parse_accept_language(header: str | None) -> list[LocaleCandidate]:
    """Parse an Accept-Language header into candidates, best first.

    Ordering is by quality descending; ties keep header order.

    Examples::

        parse_accept_language("fr-CA,fr;q=0.8,en;q=0.5")
        -> [LocaleCandidate("fr-CA", 1.0), LocaleCandidate("fr", 0.8),
            LocaleCandidate("en", 0.5)]
    """
    if not header:
        return []

    candidates: list[LocaleCandidate] = []
    for raw in header.split(","):
        match = _ENTRY_RE.match(raw)
        if match is None:
            continue
        quality = float(match.group("q")) if match.group("q") is not None else 1.0
        if quality <= 0 or quality > 1:
            continue
        candidates.append(LocaleCandidate(_canonical_code(match.group("code")), quality))

    # sorted() is stable, so equal qualities keep header order
    return sorted(candidates, key=lambda c: -c.quality)

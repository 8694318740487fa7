"""Request signals consumed by locale negotiation.

Negotiation never sees a request object.  Callers pull the handful of
values it needs out of whatever request type they have::

    signals = RequestSignals.from_request(request.query, request.headers)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RequestSignals:
    """Locale-relevant values from one request.

    Attributes:
        hl: ``?hl=`` explicit locale override.
        gl: ``?gl=`` explicit country override.
        country_header: Geography header set by the edge
            (``x-country-code`` or ``x-appengine-country``).
        accept_language: Raw ``Accept-Language`` header.
        user_agent: Raw ``User-Agent`` header.
    """

    hl: str | None = None
    gl: str | None = None
    country_header: str | None = None
    accept_language: str = ""
    user_agent: str = ""

    @classmethod
    def from_request(
        cls,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RequestSignals:
        """Build signals from a query mapping and a header mapping.

        Query values may be strings or lists of strings (first value
        wins).  Header lookup is case-insensitive.
        """
        query = query or {}
        lowered = {k.lower(): v for k, v in (headers or {}).items()}
        return cls(
            hl=first_query_param(query, "hl"),
            gl=first_query_param(query, "gl"),
            country_header=lowered.get("x-country-code") or lowered.get("x-appengine-country") or None,
            accept_language=lowered.get("accept-language", ""),
            user_agent=lowered.get("user-agent", ""),
        )


def first_query_param(query: Mapping[str, Any], key: str) -> str | None:
    """Return the first value for *key*, or ``None`` if absent or empty.

    For ``?foo=bar&foo=baz`` parsed into ``{"foo": ["bar", "baz"]}``,
    returns ``"bar"``.
    """
    value = query.get(key)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    value = str(value)
    return value or None

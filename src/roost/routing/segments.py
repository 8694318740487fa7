"""Route template segments.

A template is a ``/``-delimited path where each segment is one of::

    "blog"           literal
    "[slug]"         param, matches exactly one segment
    "[...rest]"      catch-all, consumes the rest of the path
    "[[...rest]]"    optional catch-all, like ``[...rest]`` but also
                     matches when nothing is left
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"
    OPTIONAL_WILDCARD = "optional_wildcard"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route template.

    ``value`` is the literal text for literal segments and the parameter
    name for everything else.
    """

    kind: SegmentKind
    value: str

    @property
    def is_terminal(self) -> bool:
        """Catch-alls consume the remaining path; nothing may follow them."""
        return self.kind in (SegmentKind.WILDCARD, SegmentKind.OPTIONAL_WILDCARD)

    def placeholder(self) -> str:
        """Return the template spelling of this segment."""
        match self.kind:
            case SegmentKind.PARAM:
                return f"[{self.value}]"
            case SegmentKind.WILDCARD:
                return f"[...{self.value}]"
            case SegmentKind.OPTIONAL_WILDCARD:
                return f"[[...{self.value}]]"
            case _:
                return self.value


def parse_segment(token: str) -> PathSegment:
    """Parse one template token.

    Examples::

        "users"        -> PathSegment(LITERAL, "users")
        "[id]"         -> PathSegment(PARAM, "id")
        "[...path]"    -> PathSegment(WILDCARD, "path")
        "[[...path]]"  -> PathSegment(OPTIONAL_WILDCARD, "path")
    """
    if token.startswith("[[...") and token.endswith("]]"):
        return PathSegment(SegmentKind.OPTIONAL_WILDCARD, token[5:-2])
    if token.startswith("[...") and token.endswith("]"):
        return PathSegment(SegmentKind.WILDCARD, token[4:-1])
    if token.startswith("[") and token.endswith("]"):
        return PathSegment(SegmentKind.PARAM, token[1:-1])
    return PathSegment(SegmentKind.LITERAL, token)


def split_path(path: str) -> list[str]:
    """Split a path into non-empty segments.

    Leading, trailing, and repeated slashes never produce empty segments,
    so ``""``, ``"/"`` and ``"//"`` all address the root.
    """
    return [part for part in path.split("/") if part]


def parse_template(template: str) -> list[PathSegment]:
    """Parse a full route template into segments."""
    return [parse_segment(part) for part in split_path(template)]

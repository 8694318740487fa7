"""Path-segment trie with param and catch-all matching.

Each node holds literal children, one param child per distinct param
name, and at most one terminal catch-all (plus at most one optional
catch-all).  Lookups try, at every node::

    1. the literal child for the current segment
    2. every param child, in insertion order
    3. the ``[...name]`` catch-all (binds the whole remaining path)
    4. the ``[[...name]]`` optional catch-all

and backtrack when a branch fails deeper down.  A lookup is pure: it
never mutates the trie, so readers on many threads are safe as long as
nobody is calling ``add`` at the same time.
"""

from collections.abc import Callable, Iterator

from roost.errors import InvalidRouteError
from roost.routing.segments import SegmentKind, parse_template, split_path


class _CatchAll[T]:
    """A terminal catch-all edge: param name plus the stored value."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: T) -> None:
        self.name = name
        self.value = value


class _TrieNode[T]:
    """A node in the trie. Mutated only while routes are being added."""

    __slots__ = ("children", "has_value", "optional_wildcard", "param_children", "value", "wildcard")

    def __init__(self) -> None:
        # Literal children: "blog" -> node
        self.children: dict[str, _TrieNode[T]] = {}
        # Param children keyed by param name: "slug" -> node
        self.param_children: dict[str, _TrieNode[T]] = {}
        self.wildcard: _CatchAll[T] | None = None
        self.optional_wildcard: _CatchAll[T] | None = None
        # has_value distinguishes "no route" from a route whose value is falsy
        self.has_value = False
        self.value: T | None = None


class PathTrie[T]:
    """A trie keyed on ``/``-delimited path segments.

    Usage::

        trie = PathTrie[str]()
        trie.add("/blog", "index")
        trie.add("/blog/[slug]", "post")
        trie.add("/[...rest]", "fallback")

        trie.get("/blog/hello")   # ("post", {"slug": "hello"})
        trie.get("/a/b/c")        # ("fallback", {"rest": "a/b/c"})
        trie.get("/nope/")        # ("fallback", {"rest": "nope"})

    Re-adding a path replaces its value (last writer wins).
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: _TrieNode[T] = _TrieNode()

    def add(self, path: str, value: T) -> None:
        """Register *value* at *path*.

        Raises ``InvalidRouteError`` if a segment follows a catch-all.
        """
        segments = parse_template(path)
        node = self._root

        for i, seg in enumerate(segments):
            if seg.is_terminal:
                if i != len(segments) - 1:
                    raise InvalidRouteError(
                        path, f"{seg.placeholder()} must be the last segment"
                    )
                edge = _CatchAll(seg.value, value)
                if seg.kind is SegmentKind.WILDCARD:
                    node.wildcard = edge
                else:
                    node.optional_wildcard = edge
                return

            if seg.kind is SegmentKind.PARAM:
                children = node.param_children
            else:
                children = node.children
            child = children.get(seg.value)
            if child is None:
                child = _TrieNode()
                children[seg.value] = child
            node = child

        node.value = value
        node.has_value = True

    def get(self, path: str) -> tuple[T | None, dict[str, str]]:
        """Look up *path*.

        Returns ``(value, params)`` on a match and ``(None, {})`` when
        nothing matches.
        """
        parts = split_path(path)
        result = self._match(self._root, parts, 0, set())
        if result is None:
            return None, {}
        return result

    def _match(
        self,
        node: _TrieNode[T],
        parts: list[str],
        index: int,
        failed: set[tuple[int, int]],
    ) -> tuple[T, dict[str, str]] | None:
        """Recursively match ``parts[index:]`` below *node*.

        *failed* memoizes ``(node, index)`` pairs already known not to
        match, so backtracking never re-explores a subtree at the same
        depth.
        """
        key = (id(node), index)
        if key in failed:
            return None

        if index == len(parts):
            if node.has_value:
                return node.value, {}  # type: ignore[return-value]
            if node.optional_wildcard is not None:
                return node.optional_wildcard.value, {}
            failed.add(key)
            return None

        part = parts[index]

        # 1. Literal child
        child = node.children.get(part)
        if child is not None:
            result = self._match(child, parts, index + 1, failed)
            if result is not None:
                return result

        # 2. Param children
        for name, param_child in node.param_children.items():
            result = self._match(param_child, parts, index + 1, failed)
            if result is not None:
                value, params = result
                params[name] = part
                return value, params

        # 3. Catch-all, then optional catch-all
        for edge in (node.wildcard, node.optional_wildcard):
            if edge is not None:
                return edge.value, {edge.name: "/".join(parts[index:])}

        failed.add(key)
        return None

    def items(self) -> Iterator[tuple[str, T]]:
        """Yield ``(template, value)`` for every registered path, depth-first.

        Templates are rebuilt from the segments used to reach each node,
        e.g. ``"/blog/[slug]"`` or ``"/docs/[...path]"``.
        """
        yield from self._walk_node(self._root, "")

    def _walk_node(self, node: _TrieNode[T], prefix: str) -> Iterator[tuple[str, T]]:
        if node.has_value:
            yield prefix or "/", node.value  # type: ignore[misc]
        for segment, child in node.children.items():
            yield from self._walk_node(child, f"{prefix}/{segment}")
        for name, child in node.param_children.items():
            yield from self._walk_node(child, f"{prefix}/[{name}]")
        if node.wildcard is not None:
            yield f"{prefix}/[...{node.wildcard.name}]", node.wildcard.value
        if node.optional_wildcard is not None:
            yield f"{prefix}/[[...{node.optional_wildcard.name}]]", node.optional_wildcard.value

    def walk(self, callback: Callable[[str, T], object]) -> None:
        """Call ``callback(template, value)`` for every registered path."""
        for template, value in self.items():
            callback(template, value)

    def clear(self) -> None:
        """Remove every registered path."""
        self._root = _TrieNode()

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

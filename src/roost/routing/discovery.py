"""Filesystem route discovery for the routes/ directory.

Walks the routes directory tree and turns every ``.py`` file into a
:class:`RouteSource`.  Directory and file names keep their bracket
placeholders (``blog/[slug].py``, ``docs/[...path].py``) since the route
table parses them later.  Files and directories starting with ``_`` or
``.`` are private and skipped.

Each module is imported once here and its handler shape is classified
into a :data:`RouteHandler` variant, so request handling never probes
modules for optional functions.
"""

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

from roost.routing.route import PureComponentRoute, RouteHandler, RouteSource, SSRRoute, StaticRoute

logger = logging.getLogger("roost.routing")


def discover_routes(routes_dir: str | Path, *, prefix: str = "routes") -> list[RouteSource]:
    """Walk a routes directory and discover all route files.

    Args:
        routes_dir: Path to the ``routes/`` directory.
        prefix: Routes-root prefix put in front of each ``relative_path``;
            should match ``SiteConfig.routes_dir``.

    Returns:
        List of :class:`RouteSource` objects, in sorted path order, ready
        for :meth:`RouteTable.build`.
    """
    root = Path(routes_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Routes directory not found: {root}")

    sources: list[RouteSource] = []
    _walk_directory(root, root, prefix.strip("/"), sources)
    logger.debug("Discovered %d route files in %s", len(sources), root)
    return sources


def _walk_directory(directory: Path, root: Path, prefix: str, sources: list[RouteSource]) -> None:
    for item in sorted(directory.iterdir()):
        if item.name.startswith(("_", ".")):
            continue
        if item.is_dir():
            _walk_directory(item, root, prefix, sources)
            continue
        if item.suffix != ".py":
            continue

        relative = item.relative_to(root).as_posix()
        module = _load_module(item)
        sources.append(
            RouteSource(
                source_id=item.relative_to(root.parent).as_posix(),
                relative_path=f"{prefix}/{relative}" if prefix else relative,
                handler=classify_module(module) if module is not None else PureComponentRoute(),
            )
        )


def _load_module(file: Path) -> ModuleType | None:
    """Import a route file by path without touching ``sys.modules``."""
    module_name = f"_route_{file.stem}_{id(file)}"
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        return None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def classify_module(module: object) -> RouteHandler:
    """Classify a route module's handler shape.

    - ``handle`` callable -> :class:`SSRRoute`
    - ``get_static_props`` or ``get_static_paths`` -> :class:`StaticRoute`
    - otherwise -> :class:`PureComponentRoute`
    """
    handle = getattr(module, "handle", None)
    if callable(handle):
        return SSRRoute(handler=handle)

    props_fn = getattr(module, "get_static_props", None)
    paths_fn = getattr(module, "get_static_paths", None)
    props_fn = props_fn if callable(props_fn) else None
    paths_fn = paths_fn if callable(paths_fn) else None
    if props_fn is not None or paths_fn is not None:
        return StaticRoute(props_fn=props_fn, paths_fn=paths_fn)

    return PureComponentRoute()

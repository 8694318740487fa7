"""Invoke helpers — call sync or async route hooks uniformly.

Route modules may define ``get_static_paths`` as ``def`` or
``async def``, with or without a context argument.  Any code that calls
a user-provided hook must handle every combination, so the checks live
here in one place.

Usage::

    from roost._internal.invoke import invoke, invoke_with_optional_context

    result = await invoke(hook, ctx)
    result = await invoke_with_optional_context(hook, ctx)
"""

import inspect
from typing import Any


async def invoke(hook: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a hook and await the result if it's awaitable."""
    result = hook(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def accepts_positional(hook: Any) -> bool:
    """Return True if *hook* can take one positional argument."""
    try:
        sig = inspect.signature(hook)
    except (TypeError, ValueError):
        return False
    for param in sig.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD, param.VAR_POSITIONAL):
            return True
    return False


async def invoke_with_optional_context(hook: Any, context: Any) -> Any:
    """Call ``hook(context)`` if it takes an argument, else ``hook()``."""
    if accepts_positional(hook):
        return await invoke(hook, context)
    return await invoke(hook)

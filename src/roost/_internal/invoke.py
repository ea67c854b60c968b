"""Invoke helpers: call sync or async handlers uniformly.

Roost handlers can be ``def`` or ``async def``. Anything that calls a
handler goes through ``invoke`` so the sync/async check lives in one place.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def accepted_kwargs(handler: Any, available: dict[str, Any]) -> dict[str, Any]:
    """Filter *available* down to the keyword arguments *handler* accepts.

    A handler with ``**kwargs`` receives everything.
    """
    try:
        params = inspect.signature(handler).parameters
    except (TypeError, ValueError):
        return {}
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
        return dict(available)
    return {name: value for name, value in available.items() if name in params}

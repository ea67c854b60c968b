"""Roost: compose independently-authored route groups into one API.

Feature modules declare route groups; roost mounts them into a single
ASGI dispatch surface and, from the same inputs, publishes one OpenAPI
document with a two-level tag taxonomy.

Basic usage::

    from roost import App, RouteGroup, get

    async def ping():
        return "pong"

    app = App()
    app.mount(RouteGroup("/", (get("/ping", ping, "Ping"),)))
    app.run()

The bundled Revolt API surface::

    from roost.api import create_app
    app = create_app()
"""

__version__ = "0.1.0"
__all__ = [
    "ApiInfo",
    "App",
    "AppConfig",
    "CollisionError",
    "ConfigurationError",
    "DocumentMeta",
    "DuplicatePathError",
    "HTTPError",
    "InvalidPrefixError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "RoostError",
    "RouteGroup",
    "TagDescriptor",
    "TagGroup",
    "UnknownTagError",
    "delete",
    "get",
    "patch",
    "post",
    "put",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from roost.app import App

        return App

    if name == "AppConfig":
        from roost.config import AppConfig

        return AppConfig

    if name == "Request":
        from roost.http.request import Request

        return Request

    if name == "Response":
        from roost.http.response import Response

        return Response

    if name in ("RouteGroup", "delete", "get", "patch", "post", "put"):
        from roost.routing import route as _route

        return getattr(_route, name)

    if name in ("ApiInfo", "DocumentMeta", "TagDescriptor", "TagGroup"):
        from roost.openapi import metadata as _metadata

        return getattr(_metadata, name)

    if name in (
        "CollisionError",
        "ConfigurationError",
        "DuplicatePathError",
        "HTTPError",
        "InvalidPrefixError",
        "MethodNotAllowed",
        "NotFound",
        "RoostError",
        "UnknownTagError",
    ):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

"""Mount registry: turns prefixed route groups into one dispatch table.

The registry is filled single-threaded at startup, then compiled. After
``compile()`` it is read-only, so ``dispatch`` needs no locking.
"""

import logging
import re

from roost.errors import CollisionError, InvalidPrefixError
from roost.routing.route import Route, RouteGroup, RouteMatch, join_path
from roost.routing.router import Router, path_shape

logger = logging.getLogger("roost.mount")

# RFC 3986 pchar, minus percent-encoding
_SEGMENT_RE = re.compile(r"^[A-Za-z0-9\-._~!$&'()*+,;=:@]+$")


def validate_prefix(prefix: str) -> None:
    """Raise ``InvalidPrefixError`` unless *prefix* is a literal mount path.

    ``"/"`` is the root prefix. Any other prefix starts with ``/``, has
    no trailing slash, and is made of literal path segments.
    """
    if not prefix:
        raise InvalidPrefixError(prefix, "prefix must not be empty")
    if not prefix.startswith("/"):
        raise InvalidPrefixError(prefix, "prefix must start with '/'")
    if prefix == "/":
        return
    if prefix.endswith("/"):
        raise InvalidPrefixError(prefix, "prefix must not end with '/'")
    for segment in prefix[1:].split("/"):
        if not segment:
            raise InvalidPrefixError(prefix, "prefix contains an empty segment")
        if segment in (".", ".."):
            raise InvalidPrefixError(prefix, "prefix cannot contain dot segments")
        if "{" in segment or "}" in segment:
            raise InvalidPrefixError(prefix, "prefix cannot contain path parameters")
        if not _SEGMENT_RE.match(segment):
            raise InvalidPrefixError(prefix, f"segment {segment!r} has invalid characters")


class MountRegistry:
    """Accepts ``(prefix, RouteGroup)`` pairs and builds the dispatch table.

    Usage::

        registry = MountRegistry()
        registry.register("/", root.routes())
        registry.register("/users", users.routes())
        registry.compile()
        match = registry.dispatch("GET", "/users/@me")

    Registration order is dispatch priority among equally-specific
    patterns, so groups must be registered in their documented order.
    """

    __slots__ = ("_groups", "_router", "_shapes")

    def __init__(self) -> None:
        self._router = Router()
        self._groups: list[tuple[str, RouteGroup]] = []
        # (method, shape) -> qualified path of the route that claimed it
        self._shapes: dict[tuple[str, str], str] = {}

    def register(self, prefix: str, group: RouteGroup) -> None:
        """Mount *group* under *prefix*.

        The whole group is validated before any route is added, so a
        failed registration leaves the table untouched.

        Raises:
            InvalidPrefixError: *prefix* is empty or not a literal path.
            CollisionError: a (method, path) pair is already registered,
                by an earlier group or earlier in this one.
            RuntimeError: the registry is already compiled.
        """
        if self._router.compiled:
            msg = "Cannot register route groups after compilation."
            raise RuntimeError(msg)
        validate_prefix(prefix)

        claimed: dict[tuple[str, str], str] = {}
        routes: list[Route] = []
        order = len(self._router.routes)
        for op in group.operations:
            full_path = join_path(prefix, op.path)
            key = (op.method, path_shape(full_path))
            existing = self._shapes.get(key) or claimed.get(key)
            if existing is not None:
                raise CollisionError(op.method, full_path, existing, prefix)
            claimed[key] = full_path
            routes.append(Route(path=full_path, operation=op, prefix=prefix, order=order))
            order += 1

        for route in routes:
            self._router.add(route)
        self._shapes.update(claimed)
        self._groups.append((prefix, group))
        logger.debug(
            "Mounted %s at %r (%d operations)", group.name or "group", prefix, len(routes)
        )

    def compile(self) -> None:
        """Freeze the dispatch table."""
        self._router.compile()
        logger.debug("Dispatch table compiled with %d routes", len(self._router.routes))

    def dispatch(self, method: str, path: str) -> RouteMatch:
        """Resolve a request to its route.

        Raises ``NotFound`` or ``MethodNotAllowed`` (see ``Router.match``).
        """
        return self._router.match(method, path)

    @property
    def compiled(self) -> bool:
        return self._router.compiled

    @property
    def routes(self) -> list[Route]:
        """Mounted routes in registration order."""
        return self._router.routes

    @property
    def groups(self) -> tuple[tuple[str, RouteGroup], ...]:
        """Mounted ``(prefix, group)`` pairs in registration order."""
        return tuple(self._groups)

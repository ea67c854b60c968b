"""Roost exception hierarchy.

Shared across the registry, composer, app, and request handler so every
module raises and catches the same types.

Two families:

- ``StartupError`` subclasses are authoring mistakes in statically
  declared route groups. They abort app initialization.
- ``HTTPError`` subclasses are runtime outcomes mapped to a status code.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when app configuration is invalid.

    Typically raised during ``App._freeze()`` at startup.
    """


class StartupError(ConfigurationError):
    """A route or document declaration that must stop the process from serving."""


class InvalidPrefixError(StartupError):
    """Mount prefix is empty or not a valid path."""

    def __init__(self, prefix: str, reason: str) -> None:
        self.prefix = prefix
        self.reason = reason
        super().__init__(f"Invalid mount prefix {prefix!r}: {reason}")


class CollisionError(StartupError):
    """A (method, path) pair is already mounted."""

    def __init__(self, method: str, path: str, existing: str, prefix: str) -> None:
        self.method = method
        self.path = path
        self.existing = existing
        self.prefix = prefix
        super().__init__(
            f"{method} {path} (mounted at {prefix!r}) collides with "
            f"already registered {method} {existing}"
        )


class DuplicatePathError(StartupError):
    """Two operations produced the same entry in the API document.

    ``existing`` is set when *path* is an already documented template
    spelled with different parameter names.
    """

    def __init__(self, method: str, path: str, existing: str | None = None) -> None:
        self.method = method
        self.path = path
        self.existing = existing
        if existing is None:
            msg = f"Document already has an operation for {method} {path}"
        else:
            msg = f"{method} {path} repeats the templated path {existing} under other names"
        super().__init__(msg)


class UnknownTagError(StartupError):
    """An operation or tag group references a tag that is not configured."""

    def __init__(self, tag: str, where: str) -> None:
        self.tag = tag
        self.where = where
        super().__init__(f"Unknown tag {tag!r} referenced by {where}")


@dataclass(frozen=True, slots=True)
class HTTPError(RoostError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or handlers. The ASGI handler catches these
    and turns them into JSON error responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class NotImplementedHTTP(HTTPError):  # noqa: N818
    """501: the route is mounted but no handler is bound to its name."""

    def __init__(self, handler_name: str) -> None:
        super().__init__(status=501, detail=f"No handler bound for {handler_name!r}")

"""Operation descriptors, route groups, and match results.

Everything here is a frozen dataclass. Feature modules build
``OperationDescriptor`` values into a ``RouteGroup``; the registry turns
each descriptor into a prefixed ``Route``.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from roost._internal.types import Handler

HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})

# A handler is either a callable or the name of one in the app's handler table
HandlerRef = Handler | str

SchemaRef = type[BaseModel]


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"

    @property
    def shape(self) -> str:
        """Segment form used for collision checks (parameter names erased)."""
        if self.is_param:
            return "{:" + self.param_type + "}"
        return self.value


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    """One endpoint: method, path pattern, handler, and its documentation.

    ``responses`` maps status codes to a response model (or ``None`` for
    bodiless responses). ``tags`` keeps declaration order.
    """

    method: str
    path: str
    handler: HandlerRef
    summary: str = ""
    tags: tuple[str, ...] = ()
    request_schema: SchemaRef | None = None
    responses: tuple[tuple[int, SchemaRef | None], ...] = ()
    operation_id: str | None = None
    description: str | None = None
    deprecated: bool = False

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            msg = f"Unsupported HTTP method {self.method!r} for {self.path!r}"
            raise ValueError(msg)
        object.__setattr__(self, "method", method)

    @property
    def handler_name(self) -> str:
        """Readable name of the handler reference."""
        if isinstance(self.handler, str):
            return self.handler
        return getattr(self.handler, "__qualname__", None) or repr(self.handler)

    @property
    def resolved_operation_id(self) -> str:
        if self.operation_id:
            return self.operation_id
        if isinstance(self.handler, str):
            return self.handler.replace(".", "_")
        return getattr(self.handler, "__name__", self.method.lower())


@dataclass(frozen=True, slots=True)
class RouteGroup:
    """An ordered, immutable bundle of operations from one feature module.

    ``prefix`` is where the module expects to be mounted; ``App.mount``
    may override it.
    """

    prefix: str
    operations: tuple[OperationDescriptor, ...] = ()
    name: str | None = None

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)


@dataclass(frozen=True, slots=True)
class Route:
    """An operation with its mount prefix applied.

    ``order`` is the global registration index and breaks ties between
    equally-specific patterns (lower wins).
    """

    path: str
    operation: OperationDescriptor
    prefix: str
    order: int

    @property
    def method(self) -> str:
        return self.operation.method

    @property
    def handler(self) -> HandlerRef:
        return self.operation.handler


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]


def join_path(prefix: str, path: str) -> str:
    """Qualify *path* with a mount *prefix*.

    ``join_path("/", "/ping") == "/ping"``,
    ``join_path("/users", "/") == "/users"``.
    """
    base = prefix.rstrip("/")
    tail = path.strip("/")
    if not tail:
        return base or "/"
    return f"{base}/{tail}"


def operation(
    method: str,
    path: str,
    handler: HandlerRef,
    summary: str = "",
    *,
    tags: Iterable[str] = (),
    request: SchemaRef | None = None,
    responses: Mapping[int, SchemaRef | None] | None = None,
    operation_id: str | None = None,
    description: str | None = None,
    deprecated: bool = False,
) -> OperationDescriptor:
    """Build an ``OperationDescriptor`` from keyword-friendly arguments."""
    return OperationDescriptor(
        method=method,
        path=path,
        handler=handler,
        summary=summary,
        tags=tuple(tags),
        request_schema=request,
        responses=tuple((responses or {}).items()),
        operation_id=operation_id,
        description=description,
        deprecated=deprecated,
    )


def _method_builder(method: str) -> Callable[..., OperationDescriptor]:
    def build(
        path: str, handler: HandlerRef, summary: str = "", **kwargs: Any
    ) -> OperationDescriptor:
        return operation(method, path, handler, summary, **kwargs)

    build.__name__ = method.lower()
    build.__doc__ = f"Build a {method} ``OperationDescriptor``."
    return build


get = _method_builder("GET")
post = _method_builder("POST")
put = _method_builder("PUT")
patch = _method_builder("PATCH")
delete = _method_builder("DELETE")

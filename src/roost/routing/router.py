"""Compiled router with trie-based path matching.

Routes are added during mounting and compiled into an immutable
lookup structure before the first request.

Precedence, compared segment by segment from the left:

1. literal segment (``/users/@me``)
2. parameter segment (``/users/{id}``)
3. catch-all (``/files/{rest:path}``)

Among equally-specific candidates the first-registered route wins.
"""

import re
from dataclasses import dataclass, field

from roost.errors import ConfigurationError, MethodNotAllowed, NotFound
from roost.routing.params import CONVERTERS
from roost.routing.route import PathSegment, Route, RouteMatch

_LITERAL, _PARAM, _CATCH_ALL = 0, 1, 2


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]
        "/files/{path:path}" -> [PathSegment("{path:path}", is_param=True, param_type="path")]

    Raises ``ConfigurationError`` for ``<param>`` segments, unknown
    converters, and catch-all segments that are not last.
    """
    segments: list[PathSegment] = []
    parts = [p for p in path.strip("/").split("/") if p]
    for i, part in enumerate(parts):
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route {path!r} uses <param> syntax. "
                "Roost path parameters are written as {param} or {param:type}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name.isidentifier():
                msg = f"Invalid parameter name {param_name!r} in route {path!r}"
                raise ConfigurationError(msg)
            if param_type not in CONVERTERS:
                msg = f"Unknown converter {param_type!r} in route {path!r}"
                raise ConfigurationError(msg)
            if param_type == "path" and i != len(parts) - 1:
                msg = f"Catch-all segment must be last in route {path!r}"
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        elif "{" in part or "}" in part:
            msg = f"Malformed parameter segment {part!r} in route {path!r}"
            raise ConfigurationError(msg)
        else:
            segments.append(PathSegment(value=part))
    return segments


def path_shape(path: str) -> str:
    """Normalised form of *path* with parameter names erased.

    Two routes with the same method and shape can never be told apart
    by a request, so the registry treats them as colliding.
    """
    return "/" + "/".join(seg.shape for seg in parse_path(path))


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_alls", "children", "param_edges", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Parameter edges in registration order
        self.param_edges: list[_ParamEdge] = []
        # Catch-all edges in registration order
        self.catch_alls: list[_CatchAllEdge] = []
        # Routes at this node, keyed by HTTP method
        self.routes_by_method: dict[str, Route] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge: consumes remaining path."""

    param_name: str
    routes_by_method: dict[str, Route] = field(default_factory=dict)


@dataclass(slots=True)
class _Candidate:
    """A trie position that consumed the whole request path."""

    routes_by_method: dict[str, Route]
    params: dict[str, str]
    rank: tuple[int, ...]


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(route)
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._routes: list[Route] = []
        self._compiled = False

    @property
    def compiled(self) -> bool:
        return self._compiled

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments = parse_path(route.path)
        node = self._root
        method = route.method

        for seg in segments:
            if seg.is_param and seg.param_type == "path":
                edge = next(
                    (e for e in node.catch_alls if e.param_name == seg.param_name),
                    None,
                )
                if edge is None:
                    edge = _CatchAllEdge(param_name=seg.param_name or "path")
                    node.catch_alls.append(edge)
                edge.routes_by_method.setdefault(method, route)
                self._routes.append(route)
                return

            if seg.is_param:
                param_edge = next(
                    (
                        e
                        for e in node.param_edges
                        if e.param_name == seg.param_name and e.param_type == seg.param_type
                    ),
                    None,
                )
                if param_edge is None:
                    pattern, _ = CONVERTERS[seg.param_type]
                    param_edge = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                    node.param_edges.append(param_edge)
                node = param_edge.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        # First registration of a method at a node wins
        node.routes_by_method.setdefault(method, route)
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        method = method.upper()
        parts = [p for p in path.strip("/").split("/") if p]
        candidates: list[_Candidate] = []
        self._collect(self._root, parts, 0, {}, (), candidates)

        if not candidates:
            raise NotFound(f"No route matches {method} {path!r}")

        best = self._select(candidates, method)
        if best is None and method == "HEAD":
            best = self._select(candidates, "GET")
        if best is not None:
            candidate, route = best
            return RouteMatch(route=route, path_params=candidate.params)

        allowed = frozenset(m for c in candidates for m in c.routes_by_method)
        raise MethodNotAllowed(allowed)

    @staticmethod
    def _select(
        candidates: list[_Candidate], method: str
    ) -> tuple[_Candidate, Route] | None:
        """Pick the most specific candidate serving *method*."""
        best: tuple[_Candidate, Route] | None = None
        for candidate in candidates:
            route = candidate.routes_by_method.get(method)
            if route is None:
                continue
            if best is None or (candidate.rank, route.order) < (best[0].rank, best[1].order):
                best = (candidate, route)
        return best

    def _collect(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
        rank: tuple[int, ...],
        out: list[_Candidate],
    ) -> None:
        """Walk every trie branch that can consume *parts*."""
        if index == len(parts):
            if node.routes_by_method:
                out.append(_Candidate(node.routes_by_method, params, rank))
            return

        part = parts[index]

        child = node.children.get(part)
        if child is not None:
            self._collect(child, parts, index + 1, params, (*rank, _LITERAL), out)

        for edge in node.param_edges:
            if edge.regex.match(part):
                self._collect(
                    edge.node,
                    parts,
                    index + 1,
                    {**params, edge.param_name: part},
                    (*rank, _PARAM),
                    out,
                )

        remaining = "/".join(parts[index:])
        for catch_all in node.catch_alls:
            out.append(
                _Candidate(
                    catch_all.routes_by_method,
                    {**params, catch_all.param_name: remaining},
                    (*rank, _CATCH_ALL),
                )
            )

"""The request object handed to route handlers.

Metadata is fixed when the ASGI scope arrives; after dispatch the
request is rebound to the matched route and its raw path parameters.
The body is read from ASGI ``receive`` on first access and kept.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from roost._internal.asgi import Receive, Scope
from roost.http.headers import Headers

if TYPE_CHECKING:
    from roost.routing.route import Route


@dataclass(frozen=True, slots=True)
class Request:
    """An HTTP request as seen by a handler.

    ``route`` is ``None`` until the registry has matched the request.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)
    client: tuple[str, int] | None = None
    route: Route | None = None

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    # Shared between rebound copies so the body is consumed once
    _body: list[bytes] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(scope.get("headers", ())),
            query_string=scope.get("query_string", b""),
            client=tuple(client) if client else None,
            _receive=receive,
        )

    @property
    def query(self) -> dict[str, list[str]]:
        """Parsed query string (field name -> list of values)."""
        return parse_qs(self.query_string.decode("latin-1"), keep_blank_values=True)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def with_match(self, route: Route, path_params: dict[str, str]) -> Request:
        """Copy of this request bound to the matched route."""
        return replace(self, route=route, path_params=path_params)

    async def body(self) -> bytes:
        """The full request body."""
        if self._body:
            return self._body[0]
        chunks: list[bytes] = []
        more = self._receive is not None
        while more:
            message = await self._receive()
            chunks.append(message.get("body", b""))
            more = message.get("more_body", False)
        body = b"".join(chunks)
        self._body.append(body)
        return body

    async def json(self) -> Any:
        """The body decoded as JSON."""
        return json_module.loads(await self.body())

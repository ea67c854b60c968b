"""ASGI handler: translates ASGI scope/messages to roost types.

The only component that touches raw ASGI directly. Serves the API
document paths, dispatches everything else through the mount registry,
and sends the Response back through ASGI send().
"""

from collections.abc import Mapping
from functools import lru_cache

from roost._internal.asgi import Receive, Scope, Send
from roost._internal.invoke import accepted_kwargs, invoke
from roost._internal.types import Handler
from roost.config import AppConfig
from roost.errors import HTTPError, NotFound, NotImplementedHTTP
from roost.http.request import Request
from roost.http.response import Response
from roost.openapi.publisher import DocumentPublisher
from roost.routing.params import convert_param
from roost.routing.registry import MountRegistry
from roost.routing.route import OperationDescriptor
from roost.routing.router import parse_path
from roost.server.errors import handle_http_error, handle_internal_error
from roost.server.negotiation import negotiate
from roost.server.sender import send_response


@lru_cache(maxsize=1024)
def _param_types(path: str) -> dict[str, str]:
    return {seg.param_name: seg.param_type for seg in parse_path(path) if seg.is_param}


def resolve_handler(operation: OperationDescriptor, handlers: Mapping[str, Handler]) -> Handler:
    """Return the callable behind an operation's handler reference.

    Raises ``NotImplementedHTTP`` when a named handler has no binding.
    """
    if callable(operation.handler):
        return operation.handler
    handler = handlers.get(operation.handler)
    if handler is None:
        raise NotImplementedHTTP(operation.handler)
    return handler


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    registry: MountRegistry,
    publisher: DocumentPublisher,
    handlers: Mapping[str, Handler],
    config: AppConfig,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    try:
        response = await _dispatch(
            request, registry=registry, publisher=publisher, handlers=handlers, config=config
        )
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, config.debug)

    await send_response(response, send, head=request.method == "HEAD")


async def _dispatch(
    request: Request,
    *,
    registry: MountRegistry,
    publisher: DocumentPublisher,
    handlers: Mapping[str, Handler],
    config: AppConfig,
) -> Response:
    # Document endpoints sit outside the registry so they never show up
    # in the document they serve.
    if request.method in ("GET", "HEAD"):
        if request.path == config.openapi_path:
            return publisher.serve(request)
        if config.docs_path is not None and request.path == config.docs_path:
            return publisher.render_docs(config.openapi_path, config.redoc_js_url)

    match = registry.dispatch(request.method, request.path)
    request = request.with_match(match.route, match.path_params)
    handler = resolve_handler(match.route.operation, handlers)

    available: dict[str, object] = {"request": request}
    for name, param_type in _param_types(match.route.path).items():
        try:
            available[name] = convert_param(match.path_params[name], param_type)
        except ValueError as exc:
            raise NotFound(f"Invalid value for path parameter {name!r}") from exc

    result = await invoke(handler, **accepted_kwargs(handler, available))
    return negotiate(result)

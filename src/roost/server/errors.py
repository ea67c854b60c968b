"""Error handling pipeline for roost requests.

Maps HTTPError exceptions and unexpected failures to JSON error
responses of the form ``{"status": 404, "detail": "..."}``.
"""

import logging
import traceback

from roost.errors import HTTPError
from roost.http.request import Request
from roost.http.response import Response

logger = logging.getLogger("roost.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a JSON response carrying its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    resp = Response.json({"status": exc.status, "detail": detail}, status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    body: dict[str, object] = {"status": 500, "detail": "Internal Server Error"}
    if debug:
        body["exception"] = f"{type(exc).__name__}: {exc}"
        body["traceback"] = traceback.format_exception(exc)
    return Response.json(body, status=500)

"""Content negotiation: maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any

from pydantic import BaseModel

from roost.errors import ConfigurationError
from roost.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``          -> pass through
    2. ``None``              -> 204, no body
    3. pydantic model        -> 200, application/json
    4. ``dict`` / ``list``   -> 200, application/json
    5. ``str``               -> 200, text/plain
    6. ``bytes``             -> 200, application/octet-stream
    7. ``(value, int)``      -> negotiate value, override status
    8. ``(value, int, dict)``-> negotiate value, override status + headers
    """
    match value:
        case Response():
            return value
        case None:
            return Response(body=b"", status=204)
        case BaseModel():
            return Response.json(value.model_dump(mode="json", by_alias=True))
        case dict() | list():
            return Response.json(value)
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case (inner, int() as status, dict() as headers):
            return negotiate(inner).with_status(status).with_headers(headers)
        case _:
            msg = (
                f"Handler returned {type(value).__name__!r}, which roost cannot turn "
                "into a response. Return a Response, str, bytes, dict, list, "
                "pydantic model, or a (value, status) tuple."
            )
            raise ConfigurationError(msg)

"""HTTP primitives: immutable request and response types."""

from roost.http.headers import Headers
from roost.http.request import Request
from roost.http.response import Response

__all__ = ["Headers", "Request", "Response"]

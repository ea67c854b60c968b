"""Routing: operation descriptors, route groups, and the mount registry.

Route groups are registered during startup and compiled into an
immutable lookup structure before the first request.
"""

from roost.routing.registry import MountRegistry, validate_prefix
from roost.routing.route import (
    OperationDescriptor,
    Route,
    RouteGroup,
    RouteMatch,
    delete,
    get,
    join_path,
    operation,
    patch,
    post,
    put,
)
from roost.routing.router import Router, parse_path, path_shape

__all__ = [
    "MountRegistry",
    "OperationDescriptor",
    "Route",
    "RouteGroup",
    "RouteMatch",
    "Router",
    "delete",
    "get",
    "join_path",
    "operation",
    "parse_path",
    "patch",
    "path_shape",
    "post",
    "put",
    "validate_prefix",
]

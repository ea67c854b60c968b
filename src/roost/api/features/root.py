"""Node information: the only feature whose handlers live in roost itself."""

from roost.api.catalog import API_VERSION
from roost.api.schemas import NodeInfo
from roost.routing import RouteGroup, get

TAGS = ("Core",)


async def root() -> NodeInfo:
    """Describe this node: API version and enabled features."""
    return NodeInfo(revolt=API_VERSION)


async def ping() -> str:
    return "pong"


def routes() -> RouteGroup:
    return RouteGroup(
        "/",
        (
            get("/", root, "Query Node", tags=TAGS, responses={200: NodeInfo}),
            get("/ping", ping, "Ping", tags=TAGS, responses={200: None}),
        ),
        name="root",
    )

"""Settings and unread state shared between clients."""

from roost.api import schemas
from roost.routing import RouteGroup, get, post

TAGS = ("Sync",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/sync",
        (
            post(
                "/settings/fetch",
                "sync.get_settings",
                "Fetch Settings",
                tags=TAGS,
                request=schemas.FetchSettings,
            ),
            post(
                "/settings/set",
                "sync.set_settings",
                "Set Settings",
                tags=TAGS,
                responses={204: None},
            ),
            get(
                "/unreads",
                "sync.get_unreads",
                "Fetch Unreads",
                tags=TAGS,
                responses={200: schemas.ChannelUnread},
            ),
        ),
        name="sync",
    )

from roost.api import schemas
from roost.routing import RouteGroup, post

TAGS = ("Web Push",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/push",
        (
            post(
                "/subscribe",
                "push.subscribe",
                "Push Subscribe",
                tags=TAGS,
                request=schemas.WebPushSubscription,
                responses={204: None},
            ),
            post(
                "/unsubscribe",
                "push.unsubscribe",
                "Unsubscribe",
                tags=TAGS,
                responses={204: None},
            ),
        ),
        name="push",
    )

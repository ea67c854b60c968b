from roost.api import schemas
from roost.routing import RouteGroup, delete, get, post

TAGS = ("Invites",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/invites",
        (
            get(
                "/{target}",
                "invites.invite_fetch",
                "Fetch Invite",
                tags=TAGS,
                responses={200: schemas.Invite},
            ),
            post("/{target}", "invites.invite_join", "Join Invite", tags=TAGS),
            delete(
                "/{target}",
                "invites.invite_delete",
                "Delete Invite",
                tags=TAGS,
                responses={204: None},
            ),
        ),
        name="invites",
    )

from roost.api import schemas
from roost.routing import RouteGroup, delete, get, patch, post

TAGS = ("Bots",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/bots",
        (
            post(
                "/create",
                "bots.create",
                "Create Bot",
                tags=TAGS,
                request=schemas.CreateBot,
                responses={200: schemas.Bot},
            ),
            get(
                "/{target}/invite",
                "bots.fetch_public",
                "Fetch Public Bot",
                tags=TAGS,
                responses={200: schemas.Bot},
            ),
            post(
                "/{target}/invite",
                "bots.invite",
                "Invite Bot",
                tags=TAGS,
                request=schemas.InviteBotDestination,
                responses={204: None},
            ),
            get("/@me", "bots.fetch_owned", "Fetch Owned Bots", tags=TAGS),
            get("/{target}", "bots.fetch", "Fetch Bot", tags=TAGS, responses={200: schemas.Bot}),
            delete("/{target}", "bots.delete", "Delete Bot", tags=TAGS, responses={204: None}),
            patch(
                "/{target}",
                "bots.edit",
                "Edit Bot",
                tags=TAGS,
                request=schemas.EditBot,
                responses={200: schemas.Bot},
            ),
        ),
        name="bots",
    )

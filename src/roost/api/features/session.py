"""Session management, mounted under ``/auth/session``."""

from roost.api import schemas
from roost.routing import RouteGroup, delete, get, patch, post

TAGS = ("Session",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/auth/session",
        (
            post(
                "/login",
                "session.login",
                "Login",
                tags=TAGS,
                request=schemas.Login,
                responses={200: schemas.SessionInfo},
            ),
            post("/logout", "session.logout", "Logout", tags=TAGS, responses={204: None}),
            get("/all", "session.fetch_all", "Fetch Sessions", tags=TAGS),
            delete("/all", "session.revoke_all", "Delete All Sessions", tags=TAGS),
            patch(
                "/{id}",
                "session.edit",
                "Edit Session",
                tags=TAGS,
                request=schemas.EditSession,
                responses={200: schemas.SessionInfo},
            ),
            delete("/{id}", "session.revoke", "Revoke Session", tags=TAGS, responses={204: None}),
        ),
        name="session",
    )

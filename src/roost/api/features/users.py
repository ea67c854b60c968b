"""User information, direct messages, and relationships."""

from roost.api import schemas
from roost.routing import RouteGroup, delete, get, patch, post, put

INFO = ("User Information",)
DMS = ("Direct Messaging",)
RELATIONSHIPS = ("Relationships",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/users",
        (
            get("/@me", "users.fetch_self", "Fetch Self", tags=INFO, responses={200: schemas.User}),
            get(
                "/{target}",
                "users.fetch_user",
                "Fetch User",
                tags=INFO,
                responses={200: schemas.User},
            ),
            patch(
                "/{target}",
                "users.edit_user",
                "Edit User",
                tags=INFO,
                request=schemas.EditUser,
                responses={200: schemas.User},
            ),
            get("/{target}/flags", "users.fetch_user_flags", "Fetch User Flags", tags=INFO),
            patch(
                "/@me/username",
                "users.change_username",
                "Change Username",
                tags=INFO,
                request=schemas.ChangeUsername,
                responses={200: schemas.User},
            ),
            get(
                "/{target}/default_avatar",
                "users.get_default_avatar",
                "Fetch Default Avatar",
                tags=INFO,
            ),
            get(
                "/{target}/profile",
                "users.fetch_profile",
                "Fetch User Profile",
                tags=INFO,
                responses={200: schemas.UserProfile},
            ),
            get("/dms", "users.fetch_dms", "Fetch Direct Message Channels", tags=DMS),
            get(
                "/{target}/dm",
                "users.open_dm",
                "Open Direct Message",
                tags=DMS,
                responses={200: schemas.Channel},
            ),
            get(
                "/{target}/mutual",
                "users.find_mutual",
                "Fetch Mutual Friends And Servers",
                tags=RELATIONSHIPS,
                responses={200: schemas.MutualResponse},
            ),
            put(
                "/{target}/friend",
                "users.add_friend",
                "Accept Friend Request",
                tags=RELATIONSHIPS,
                responses={200: schemas.User},
            ),
            delete(
                "/{target}/friend",
                "users.remove_friend",
                "Deny Friend Request / Remove Friend",
                tags=RELATIONSHIPS,
                responses={200: schemas.User},
            ),
            put(
                "/{target}/block",
                "users.block_user",
                "Block User",
                tags=RELATIONSHIPS,
                responses={200: schemas.User},
            ),
            delete(
                "/{target}/block",
                "users.unblock_user",
                "Unblock User",
                tags=RELATIONSHIPS,
                responses={200: schemas.User},
            ),
            post(
                "/friend",
                "users.send_friend_request",
                "Send Friend Request",
                tags=RELATIONSHIPS,
                request=schemas.FriendRequest,
                responses={200: schemas.User},
            ),
        ),
        name="users",
    )

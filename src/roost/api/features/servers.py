"""Servers: information, members, and permissions."""

from roost.api import schemas
from roost.routing import RouteGroup, delete, get, patch, post, put

INFO = ("Server Information",)
MEMBERS = ("Server Members",)
PERMISSIONS = ("Server Permissions",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/servers",
        (
            post(
                "/create",
                "servers.server_create",
                "Create Server",
                tags=INFO,
                request=schemas.CreateServer,
                responses={200: schemas.Server},
            ),
            get(
                "/{target}",
                "servers.server_fetch",
                "Fetch Server",
                tags=INFO,
                responses={200: schemas.Server},
            ),
            delete(
                "/{target}",
                "servers.server_delete",
                "Delete / Leave Server",
                tags=INFO,
                responses={204: None},
            ),
            patch(
                "/{target}",
                "servers.server_edit",
                "Edit Server",
                tags=INFO,
                request=schemas.EditServer,
                responses={200: schemas.Server},
            ),
            put(
                "/{target}/ack",
                "servers.server_ack",
                "Mark Server As Read",
                tags=INFO,
                responses={204: None},
            ),
            post(
                "/{target}/channels",
                "servers.channel_create",
                "Create Channel",
                tags=INFO,
                request=schemas.CreateChannel,
                responses={200: schemas.Channel},
            ),
            get("/{target}/members", "servers.member_fetch_all", "Fetch Members", tags=MEMBERS),
            get(
                "/{target}/members/{member}",
                "servers.member_fetch",
                "Fetch Member",
                tags=MEMBERS,
                responses={200: schemas.Member},
            ),
            delete(
                "/{target}/members/{member}",
                "servers.member_remove",
                "Kick Member",
                tags=MEMBERS,
                responses={204: None},
            ),
            patch(
                "/{target}/members/{member}",
                "servers.member_edit",
                "Edit Member",
                tags=MEMBERS,
                request=schemas.EditMember,
                responses={200: schemas.Member},
            ),
            put(
                "/{target}/bans/{member}",
                "servers.ban_create",
                "Ban User",
                tags=MEMBERS,
                request=schemas.Ban,
                responses={204: None},
            ),
            delete(
                "/{target}/bans/{member}",
                "servers.ban_remove",
                "Unban user",
                tags=MEMBERS,
                responses={204: None},
            ),
            get("/{target}/bans", "servers.ban_list", "Fetch Bans", tags=MEMBERS),
            get("/{target}/invites", "servers.invites_fetch", "Fetch Invites", tags=MEMBERS),
            post(
                "/{target}/roles",
                "servers.roles_create",
                "Create Role",
                tags=PERMISSIONS,
                request=schemas.CreateRole,
                responses={200: schemas.Role},
            ),
            patch(
                "/{target}/roles/{role_id}",
                "servers.roles_edit",
                "Edit Role",
                tags=PERMISSIONS,
                responses={200: schemas.Role},
            ),
            delete(
                "/{target}/roles/{role_id}",
                "servers.roles_delete",
                "Delete Role",
                tags=PERMISSIONS,
                responses={204: None},
            ),
            put(
                "/{target}/permissions/{role_id}",
                "servers.permissions_set",
                "Set Role Permission",
                tags=PERMISSIONS,
                request=schemas.SetPermission,
                responses={200: schemas.Server},
            ),
            put(
                "/{target}/permissions/default",
                "servers.permissions_set_default",
                "Set Default Permission",
                tags=PERMISSIONS,
                request=schemas.SetDefaultPermission,
                responses={200: schemas.Server},
            ),
        ),
        name="servers",
    )

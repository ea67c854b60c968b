"""Channels: information, invites, permissions, messaging, groups, voice.

Literal segments such as ``/messages/bulk`` and ``/permissions/default``
sit beside parameter segments at the same depth; dispatch prefers the
literal whatever the declaration order.
"""

from roost.api import schemas
from roost.routing import RouteGroup, delete, get, patch, post, put

INFO = ("Channel Information",)
INVITES = ("Channel Invites",)
PERMISSIONS = ("Channel Permissions",)
MESSAGING = ("Messaging",)
GROUPS = ("Groups",)
VOICE = ("Voice",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/channels",
        (
            get(
                "/{target}",
                "channels.fetch",
                "Fetch Channel",
                tags=INFO,
                responses={200: schemas.Channel},
            ),
            delete(
                "/{target}",
                "channels.delete",
                "Close Channel",
                tags=INFO,
                responses={204: None},
            ),
            patch(
                "/{target}",
                "channels.edit",
                "Edit Channel",
                tags=INFO,
                request=schemas.EditChannel,
                responses={200: schemas.Channel},
            ),
            post(
                "/{target}/invites",
                "channels.invite_create",
                "Create Invite",
                tags=INVITES,
                responses={200: schemas.Invite},
            ),
            put(
                "/{target}/permissions/{role_id}",
                "channels.permissions_set",
                "Set Role Permission",
                tags=PERMISSIONS,
                request=schemas.SetPermission,
                responses={200: schemas.Channel},
            ),
            put(
                "/{target}/permissions/default",
                "channels.permissions_set_default",
                "Set Default Permission",
                tags=PERMISSIONS,
                request=schemas.SetDefaultPermission,
                responses={200: schemas.Channel},
            ),
            put(
                "/{target}/ack/{message}",
                "channels.channel_ack",
                "Acknowledge Message",
                tags=MESSAGING,
                responses={204: None},
            ),
            get("/{target}/messages", "channels.message_query", "Fetch Messages", tags=MESSAGING),
            post(
                "/{target}/messages",
                "channels.message_send",
                "Send Message",
                tags=MESSAGING,
                request=schemas.SendMessage,
                responses={200: schemas.Message},
            ),
            post(
                "/{target}/search",
                "channels.message_search",
                "Search for Messages",
                tags=MESSAGING,
            ),
            get(
                "/{target}/messages/{msg}",
                "channels.message_fetch",
                "Fetch Message",
                tags=MESSAGING,
                responses={200: schemas.Message},
            ),
            delete(
                "/{target}/messages/{msg}",
                "channels.message_delete",
                "Delete Message",
                tags=MESSAGING,
                responses={204: None},
            ),
            patch(
                "/{target}/messages/{msg}",
                "channels.message_edit",
                "Edit Message",
                tags=MESSAGING,
                request=schemas.EditMessage,
                responses={200: schemas.Message},
            ),
            delete(
                "/{target}/messages/bulk",
                "channels.message_bulk_delete",
                "Bulk Delete Messages",
                tags=MESSAGING,
                request=schemas.BulkDelete,
                responses={204: None},
            ),
            put(
                "/{target}/messages/{msg}/reactions/{emoji}",
                "channels.message_react",
                "Add Reaction to Message",
                tags=MESSAGING,
                responses={204: None},
            ),
            delete(
                "/{target}/messages/{msg}/reactions/{emoji}",
                "channels.message_unreact",
                "Remove Reaction(s) to Message",
                tags=MESSAGING,
                responses={204: None},
            ),
            post(
                "/create",
                "channels.group_create",
                "Create Group",
                tags=GROUPS,
                request=schemas.CreateGroup,
                responses={200: schemas.Channel},
            ),
            get("/{target}/members", "channels.members_fetch", "Fetch Group Members", tags=GROUPS),
            put(
                "/{target}/recipients/{member}",
                "channels.group_add_member",
                "Add Member to Group",
                tags=GROUPS,
                responses={204: None},
            ),
            delete(
                "/{target}/recipients/{member}",
                "channels.group_remove_member",
                "Remove Member from Group",
                tags=GROUPS,
                responses={204: None},
            ),
            post(
                "/{target}/join_call",
                "channels.voice_join",
                "Join Call",
                tags=VOICE,
                responses={200: schemas.VoiceToken},
            ),
        ),
        name="channels",
    )

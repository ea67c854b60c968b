"""Static document tables for the Revolt API.

Global metadata, the tag list, and the two-level tag-group taxonomy.
These are configuration, not derived from the mounted route groups;
the tag names are part of the public documentation and must stay
stable.
"""

from roost.openapi.metadata import (
    ApiInfo,
    Contact,
    DocumentMeta,
    ExternalDocs,
    License,
    ServerInfo,
    TagDescriptor,
    TagGroup,
)

API_VERSION = "0.5.3-rc.1"

META = DocumentMeta(
    info=ApiInfo(
        title="Revolt API",
        description="User-first privacy focused chat platform.",
        terms_of_service="https://revolt.chat/terms",
        contact=Contact(
            name="Revolt Support",
            url="https://revolt.chat",
            email="contact@revolt.chat",
        ),
        license=License(
            name="AGPLv3",
            url="https://github.com/revoltchat/delta/blob/master/LICENSE",
        ),
        version=API_VERSION,
    ),
    servers=(
        ServerInfo(url="https://api.revolt.chat", description="Revolt API"),
        ServerInfo(url="http://local.revolt.chat:8000", description="Local Revolt Environment"),
    ),
    external_docs=ExternalDocs(
        url="https://developers.revolt.chat",
        description="Revolt Developer Documentation",
    ),
    extensions={
        "x-logo": {
            "url": "https://revolt.chat/header.png",
            "altText": "Revolt Header",
        },
    },
)

TAGS: tuple[TagDescriptor, ...] = (
    TagDescriptor(
        "Core",
        "Use in your applications to determine information about the Revolt node",
    ),
    TagDescriptor("User Information", "Query and fetch users on Revolt"),
    TagDescriptor("Direct Messaging", "Direct message other users on Revolt"),
    TagDescriptor("Relationships", "Manage your friendships and block list on the platform"),
    TagDescriptor("Bots", "Create and edit bots"),
    TagDescriptor("Channel Information", "Query and fetch channels on Revolt"),
    TagDescriptor("Channel Invites", "Create and manage invites for channels"),
    TagDescriptor("Channel Permissions", "Manage permissions for channels"),
    TagDescriptor("Messaging", "Send and manipulate messages"),
    TagDescriptor("Groups", "Create, invite users and manipulate groups"),
    TagDescriptor("Voice", "Join and talk with other users"),
    TagDescriptor("Server Information", "Query and fetch servers on Revolt"),
    TagDescriptor("Server Members", "Find and edit server members"),
    TagDescriptor("Server Permissions", "Manage permissions for servers"),
    TagDescriptor("Invites", "View, join and delete invites"),
    TagDescriptor("Account", "Manage your account"),
    TagDescriptor("Session", "Create and manage sessions"),
    TagDescriptor(
        "Onboarding",
        "After signing up to Revolt, users must pick a unique username",
    ),
    TagDescriptor("Sync", "Upload and retrieve any JSON data between clients"),
    TagDescriptor(
        "Web Push",
        "Subscribe to and receive Revolt push notifications while offline",
    ),
)

TAG_GROUPS: tuple[TagGroup, ...] = (
    TagGroup("Revolt", ("Core",)),
    TagGroup("Users", ("User Information", "Direct Messaging", "Relationships")),
    TagGroup("Bots", ("Bots",)),
    TagGroup(
        "Channels",
        (
            "Channel Information",
            "Channel Invites",
            "Channel Permissions",
            "Messaging",
            "Groups",
            "Voice",
        ),
    ),
    TagGroup("Servers", ("Server Information", "Server Members", "Server Permissions")),
    TagGroup("Invites", ("Invites",)),
    TagGroup("Authentication", ("Account", "Session", "Onboarding")),
    TagGroup("Miscellaneous", ("Sync", "Web Push")),
)

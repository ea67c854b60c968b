"""Feature route groups, listed in mount order.

Registration order is the tie-break between equally specific patterns,
so generic fallbacks belong at the end of this list.
"""

from roost.api.features import (
    account,
    bots,
    channels,
    invites,
    onboard,
    push,
    root,
    servers,
    session,
    sync,
    users,
)

MOUNT_ORDER = (
    root,
    users,
    bots,
    channels,
    servers,
    invites,
    account,
    session,
    onboard,
    push,
    sync,
)

__all__ = [
    "MOUNT_ORDER",
    "account",
    "bots",
    "channels",
    "invites",
    "onboard",
    "push",
    "root",
    "servers",
    "session",
    "sync",
    "users",
]

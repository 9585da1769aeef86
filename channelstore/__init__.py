# channelstore/__init__.py
"""Guild channel stores for a Discord REST client."""

from .actions import ChannelCreateAction, ChannelCreateResult
from .client import Client
from .collection import ChannelCollection
from .constants import Events
from .exceptions import ChannelStoreError, InvalidArgument
from .models import CategoryChannel, Channel, Guild, Member, Role, User
from .options import ChannelCreateOptions
from .permissions import (
    OverwriteType,
    PermissionOverwrites,
    resolve_overwrite,
    resolve_overwrites,
    resolve_permissions,
)
from .stores import CategoryChildren, GuildChannels

__all__ = [
    "Client",
    "Events",
    "ChannelStoreError",
    "InvalidArgument",
    "ChannelCollection",
    "GuildChannels",
    "CategoryChildren",
    "ChannelCreateOptions",
    "ChannelCreateAction",
    "ChannelCreateResult",
    "Channel",
    "CategoryChannel",
    "Guild",
    "Member",
    "Role",
    "User",
    "OverwriteType",
    "PermissionOverwrites",
    "resolve_overwrite",
    "resolve_overwrites",
    "resolve_permissions",
]

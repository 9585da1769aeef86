"""
Cached entities built from raw Discord payloads.
"""

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, ClassVar

import discord

from .permissions import PermissionOverwrites

if TYPE_CHECKING:
    from .stores import CategoryChildren, GuildChannels


def _channel_type(value) -> int:
    # Echoed payloads may carry the literal default instead of a number
    if isinstance(value, str):
        return discord.ChannelType[value].value
    return int(value)


def _optional_id(value) -> str | None:
    return None if value is None else str(value)


@dataclass(eq=False)
class User:
    id: str
    username: str = ""
    bot: bool = False

    overwrite_type: ClassVar[str] = "member"

    @classmethod
    def from_payload(cls, data: dict) -> "User":
        return cls(
            id=str(data["id"]),
            username=data.get("username", ""),
            bot=data.get("bot", False),
        )


@dataclass(eq=False)
class Member:
    """A user's membership in one guild."""

    user: User
    guild_id: str
    nick: str | None = None
    role_ids: list[str] = field(default_factory=list)

    overwrite_type: ClassVar[str] = "member"

    @property
    def id(self) -> str:
        return self.user.id


@dataclass(eq=False)
class Role:
    id: str
    name: str
    permissions: int = 0
    position: int = 0

    overwrite_type: ClassVar[str] = "role"

    @classmethod
    def from_payload(cls, data: dict) -> "Role":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            permissions=int(data.get("permissions", 0)),
            position=data.get("position", 0),
        )


@dataclass(eq=False)
class Channel:
    id: str
    name: str
    type: int
    guild: "Guild | None" = field(default=None, repr=False)
    parent_id: str | None = None
    position: int | None = None
    topic: str | None = None
    nsfw: bool = False
    bitrate: int | None = None  # Voice only
    user_limit: int | None = None  # Voice only
    rate_limit_per_user: int | None = None
    permission_overwrites: list[PermissionOverwrites] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: dict, guild: "Guild | None" = None) -> "Channel":
        """
        Build a channel from a raw channel payload.

        Category payloads produce a CategoryChannel.

        Raises:
            KeyError: If the payload has no id.
        """
        channel_type = _channel_type(data.get("type", discord.ChannelType.text.value))
        klass = (
            CategoryChannel
            if channel_type == discord.ChannelType.category.value
            else Channel
        )
        return klass(
            id=str(data["id"]),
            name=data.get("name", ""),
            type=channel_type,
            guild=guild,
            parent_id=_optional_id(data.get("parent_id")),
            position=data.get("position"),
            topic=data.get("topic"),
            nsfw=bool(data.get("nsfw", False)),
            bitrate=data.get("bitrate"),
            user_limit=data.get("user_limit"),
            rate_limit_per_user=data.get("rate_limit_per_user"),
            permission_overwrites=[
                PermissionOverwrites.from_payload(o)
                for o in data.get("permission_overwrites") or []
            ],
        )

    def patch(self, other: "Channel") -> "Channel":
        """Copy a fresher build of this channel onto it, keeping its guild if unknown."""
        guild = other.guild if other.guild is not None else self.guild
        for f in fields(other):
            setattr(self, f.name, getattr(other, f.name))
        self.guild = guild
        return self

    @property
    def parent(self) -> "CategoryChannel | None":
        if self.guild is None or self.parent_id is None:
            return None
        return self.guild.channels.get(self.parent_id)


@dataclass(eq=False)
class CategoryChannel(Channel):
    """A channel that groups sibling channels under itself."""

    @property
    def children(self) -> "CategoryChildren":
        from .stores import CategoryChildren

        if self.guild is None:
            raise ValueError(f"Category {self.id} is not attached to a guild")
        return CategoryChildren(self.guild, self)


@dataclass(eq=False)
class Guild:
    client: Any = field(repr=False)
    id: str
    name: str = ""
    roles: dict[str, Role] = field(default_factory=dict)
    members: dict[str, Member] = field(default_factory=dict)
    channels: "GuildChannels" = field(init=False, repr=False)

    def __post_init__(self):
        from .stores import GuildChannels

        self.channels = GuildChannels(self)

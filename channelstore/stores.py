# channelstore/stores.py
"""Guild channel stores - the only place channels get created."""

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from .collection import ChannelCollection
from .exceptions import InvalidArgument
from .models import CategoryChannel, Channel
from .options import ChannelCreateOptions
from .permissions import resolve_overwrites

if TYPE_CHECKING:
    from .models import Guild

logger = logging.getLogger(__name__)

ApplyCreated = Callable[[dict], Channel]


class GuildChannels:
    """All cached channels of one guild."""

    def __init__(
        self,
        guild: "Guild",
        channels: ChannelCollection | None = None,
        apply_created: ApplyCreated | None = None,
    ):
        self.guild = guild
        self.cache = channels if channels is not None else ChannelCollection()
        self._apply_created = apply_created

    @property
    def client(self):
        return self.guild.client

    def get(self, channel_id) -> Channel | None:
        return self.cache.get(channel_id)

    def set(self, channel: Channel) -> Channel:
        return self.cache.set(channel)

    def delete(self, channel_or_id) -> bool:
        return self.cache.delete(channel_or_id)

    def resolve(self, channel_or_id) -> Channel | None:
        return self.cache.resolve(channel_or_id)

    def __contains__(self, channel_or_id) -> bool:
        return channel_or_id in self.cache

    def __iter__(self) -> Iterator[Channel]:
        return iter(self.cache)

    def __len__(self) -> int:
        return len(self.cache)

    def apply_created(self, data: dict) -> Channel:
        if self._apply_created is not None:
            return self._apply_created(data)
        return self.client.actions.channel_create.apply_created(data)

    async def create(
        self,
        name: str,
        options: ChannelCreateOptions | dict | None = None,
        *,
        parent: CategoryChannel | str | None = None,
    ) -> Channel:
        """
        Create a new channel in the guild.

        Args:
            name: The name of the new channel.
            options: A ChannelCreateOptions or a dict of its field names.
            parent: Category (or category id) to create the channel under.

        Returns:
            The cached channel built from Discord's response.

        Raises:
            InvalidArgument: If type isn't "text" or "voice", or an overwrite
                can't be resolved. Nothing is sent in that case.
            discord.HTTPException: If Discord rejects the request.
        """
        options = ChannelCreateOptions.coerce(options)
        parent_id = self.client.channels.resolve_id(parent) if parent is not None else None

        overwrites = None
        if options.permission_overwrites is not None:
            overwrites = [
                o.to_dict()
                for o in resolve_overwrites(options.permission_overwrites, self.guild)
            ]

        data = {
            "name": name,
            "topic": options.topic,
            "type": options.wire_type,
            "nsfw": options.nsfw,
            "bitrate": options.bitrate,
            "user_limit": options.user_limit,
            "parent_id": parent_id,
            "position": options.position,
            "permission_overwrites": overwrites,
            "rate_limit_per_user": options.rate_limit_per_user,
        }
        # Unset options are left off the body entirely
        data = {key: value for key, value in data.items() if value is not None}

        logger.debug(f"Creating channel '{name}' in guild {self.guild.id}")
        payload = await self.client.api.guild_channels(self.guild.id).post(
            data, reason=options.reason
        )
        return self.apply_created(payload)


class CategoryChildren:
    """Channels of a guild that share one parent category."""

    def __init__(self, guild: "Guild", parent: CategoryChannel | str):
        if ChannelCollection.resolve_id(parent) is None:
            raise InvalidArgument(f"Can't resolve parent category: {parent!r}")
        self.guild = guild
        self._parent = parent

    @property
    def parent(self) -> CategoryChannel | None:
        """The parent category, looked up fresh if only its id is known."""
        if isinstance(self._parent, Channel):
            return self._parent
        return self.guild.channels.get(self._parent)

    def _parent_id(self) -> str | None:
        return self.guild.client.channels.resolve_id(self._parent)

    def _children(self) -> list[Channel]:
        parent_id = self._parent_id()
        return self.guild.channels.cache.filter(lambda c: c.parent_id == parent_id)

    def get(self, channel_id) -> Channel | None:
        channel = self.guild.channels.get(channel_id)
        if channel is None or channel.parent_id != self._parent_id():
            return None
        return channel

    def __contains__(self, channel_or_id) -> bool:
        channel_id = self.guild.client.channels.resolve_id(channel_or_id)
        return channel_id is not None and self.get(channel_id) is not None

    def __iter__(self) -> Iterator[Channel]:
        return iter(self._children())

    def __len__(self) -> int:
        return len(self._children())

    async def create(
        self,
        name: str,
        options: ChannelCreateOptions | dict | None = None,
    ) -> Channel:
        """
        Create a new channel in the parent category.

        Args:
            name: The name of the new channel.
            options: A ChannelCreateOptions or a dict of its field names.

        Returns:
            The cached channel built from Discord's response.

        Raises:
            InvalidArgument: If type isn't "text" or "voice". Nothing is sent.
            discord.HTTPException: If Discord rejects the request.

        Example:
            await category.children.create(
                "new-voice",
                {"type": "voice", "permission_overwrites": [
                    {"id": member.id, "deny": ["VIEW_CHANNEL"]},
                ]},
            )
        """
        return await self.guild.channels.create(name, options, parent=self._parent)

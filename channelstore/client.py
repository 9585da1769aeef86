# channelstore/client.py
"""Client that owns the transport, the caches and the event emitter."""

import asyncio
import logging
from typing import Any

from discord.http import HTTPClient

from . import config
from .actions import Actions
from .collection import ChannelCollection
from .events import EventEmitter
from .exceptions import ChannelStoreError
from .models import Channel, Guild, Member, Role, User
from .rest import RestAPI

logger = logging.getLogger(__name__)


class Client(EventEmitter):
    def __init__(self, http: HTTPClient | None = None):
        super().__init__()
        self.http = http
        self.api = RestAPI(self)
        self.actions = Actions(self)
        self.channels = ChannelCollection()
        self.users: dict[str, User] = {}
        self.guilds: dict[str, Guild] = {}

    async def login(self, token: str | None = None) -> dict[str, Any]:
        """
        Authenticate the REST transport.

        Args:
            token: Bot token. Falls back to DISCORD_BOT_TOKEN.

        Returns:
            The bot user's raw payload.
        """
        token = token or config.get_bot_token()
        if not token:
            raise ChannelStoreError("No bot token given and DISCORD_BOT_TOKEN is not set")
        if self.http is None:
            self.http = HTTPClient(
                asyncio.get_running_loop(),
                proxy=config.get_proxy(),
                max_ratelimit_timeout=config.get_max_ratelimit_timeout(),
            )
        data = await self.http.static_login(token)
        logger.info(f"Logged in as {data.get('username')} ({data.get('id')})")
        return data

    async def close(self) -> None:
        if self.http is not None:
            await self.http.close()

    def add_guild(self, data: dict) -> Guild:
        """Cache a guild payload along with its roles, members and channels."""
        guild = Guild(client=self, id=str(data["id"]), name=data.get("name", ""))

        for role_data in data.get("roles", []):
            role = Role.from_payload(role_data)
            guild.roles[role.id] = role

        for member_data in data.get("members", []):
            user = User.from_payload(member_data["user"])
            self.users[user.id] = user
            guild.members[user.id] = Member(
                user=user,
                guild_id=guild.id,
                nick=member_data.get("nick"),
                role_ids=[str(r) for r in member_data.get("roles", [])],
            )

        for channel_data in data.get("channels", []):
            channel = Channel.from_payload(channel_data, guild)
            guild.channels.set(channel)
            self.channels.set(channel)

        self.guilds[guild.id] = guild
        logger.debug(
            f"Cached guild {guild.id}: {len(guild.roles)} roles, "
            f"{len(guild.members)} members, {len(guild.channels)} channels"
        )
        return guild

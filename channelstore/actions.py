# channelstore/actions.py
"""Fold raw gateway/REST payloads into the client's caches."""

import logging
from dataclasses import dataclass

from .constants import Events
from .models import Channel

logger = logging.getLogger(__name__)


@dataclass
class ChannelCreateResult:
    channel: Channel


class ChannelCreateAction:
    def __init__(self, client):
        self.client = client

    def handle(self, data: dict) -> ChannelCreateResult:
        """
        Cache a newly created channel and announce it.

        The channel_create event only fires the first time an id is seen, so
        a REST response and the matching gateway event don't both emit. A
        channel that is already cached is updated in place and returned.

        Raises:
            KeyError: If the payload has no id.
        """
        client = self.client
        existing = client.channels.get(str(data["id"]))

        guild = client.guilds.get(str(data["guild_id"])) if data.get("guild_id") else None
        channel = Channel.from_payload(data, guild)
        # Keep the cached object so references handed out earlier stay live
        if existing is not None and type(existing) is type(channel):
            channel = existing.patch(channel)
        client.channels.set(channel)
        if channel.guild is not None:
            channel.guild.channels.cache.set(channel)

        if existing is None:
            logger.info(f"Cached new channel {channel.id} ({channel.name})")
            client.emit(Events.CHANNEL_CREATE, channel)

        return ChannelCreateResult(channel=channel)

    def apply_created(self, data: dict) -> Channel:
        """Callback form of handle() used by the stores."""
        return self.handle(data).channel


class Actions:
    def __init__(self, client):
        self.channel_create = ChannelCreateAction(client)

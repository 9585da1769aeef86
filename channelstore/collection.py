# channelstore/collection.py
"""Ordered id -> channel mapping shared by the client and guild stores."""

from collections.abc import Callable, Iterator

from .models import Channel


class ChannelCollection:
    """Ordered mapping of channel id to channel, keyed by string snowflakes."""

    def __init__(self, channels=()):
        self._items: dict[str, Channel] = {}
        for channel in channels:
            self.set(channel)

    def get(self, channel_id) -> Channel | None:
        return self._items.get(str(channel_id))

    def set(self, channel: Channel) -> Channel:
        self._items[channel.id] = channel
        return channel

    def delete(self, channel_or_id) -> bool:
        """Remove a channel. Returns False if it was not cached."""
        channel_id = self.resolve_id(channel_or_id)
        return self._items.pop(channel_id, None) is not None

    def has(self, channel_or_id) -> bool:
        return self.resolve_id(channel_or_id) in self._items

    def __contains__(self, channel_or_id) -> bool:
        return self.has(channel_or_id)

    def __iter__(self) -> Iterator[Channel]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def values(self) -> list[Channel]:
        return list(self._items.values())

    def filter(self, predicate: Callable[[Channel], bool]) -> list[Channel]:
        return [channel for channel in self._items.values() if predicate(channel)]

    def resolve(self, channel_or_id) -> Channel | None:
        """Get the cached channel for a channel object or its id."""
        if isinstance(channel_or_id, Channel):
            return channel_or_id
        channel_id = self.resolve_id(channel_or_id)
        if channel_id is None:
            return None
        return self._items.get(channel_id)

    @staticmethod
    def resolve_id(channel_or_id) -> str | None:
        """
        Get the snowflake for a channel reference.

        Args:
            channel_or_id: A channel, its id as a string, or its id as an int.

        Returns:
            The id as a string, or None if the reference can't be resolved.
        """
        if isinstance(channel_or_id, Channel):
            return channel_or_id.id
        if isinstance(channel_or_id, str):
            return channel_or_id
        if isinstance(channel_or_id, int) and not isinstance(channel_or_id, bool):
            return str(channel_or_id)
        return None

"""
Options accepted when creating a guild channel.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

import discord

from .constants import CHANNEL_CREATE_TYPES, DEFAULT_WIRE_TYPE
from .exceptions import InvalidArgument

_IGNORED_OPTIONS = ("parent", "parent_id")


@dataclass(frozen=True)
class ChannelCreateOptions:
    """Optional settings for a new channel. None means "leave unset"."""

    type: str | None = None  # "text" or "voice"; None behaves as text
    topic: str | None = None
    nsfw: bool | None = None
    bitrate: int | None = None  # Voice only
    user_limit: int | None = None  # Voice only
    permission_overwrites: Any = None  # Sequence or mapping of overwrites
    position: int | None = None
    rate_limit_per_user: int | None = None
    reason: str | None = None  # Audit log reason

    def __post_init__(self):
        if self.type is not None and self.type not in CHANNEL_CREATE_TYPES:
            raise InvalidArgument("Type must be either 'text' or 'voice'.")

    @classmethod
    def coerce(cls, value) -> "ChannelCreateOptions":
        """Accept None, an instance, or a mapping of option names."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            # The parent is fixed by the store, never taken from options
            value = {k: v for k, v in value.items() if k not in _IGNORED_OPTIONS}
            unknown = set(value) - known
            if unknown:
                raise InvalidArgument(
                    f"Unknown channel option(s): {', '.join(sorted(unknown))}"
                )
            return cls(**value)
        raise InvalidArgument(f"Invalid channel options: {value!r}")

    @property
    def wire_type(self) -> int | str:
        # Unset type goes out as the literal string, not ChannelType.text
        if self.type is None:
            return DEFAULT_WIRE_TYPE
        return discord.ChannelType[self.type].value

# channelstore/exceptions.py
"""Errors raised locally, before anything is sent over the wire.

Errors returned by Discord itself are ``discord.HTTPException`` (and its
subclasses) and are raised by the transport untouched.
"""


class ChannelStoreError(Exception):
    """Base class for errors raised by channelstore."""

    pass


class InvalidArgument(ChannelStoreError, TypeError):
    """An argument failed local validation."""

    pass

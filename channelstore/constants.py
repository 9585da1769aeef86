# channelstore/constants.py
"""Constants shared across the stores."""

# Channel types accepted by the create helpers
CHANNEL_CREATE_TYPES = ("text", "voice")

# Sent as-is when no type is given (not the numeric ChannelType value)
DEFAULT_WIRE_TYPE = "text"


class Events:
    """Event names emitted by the client."""

    CHANNEL_CREATE = "channel_create"

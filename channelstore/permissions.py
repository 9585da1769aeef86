# channelstore/permissions.py
"""Permission overwrite normalization - loose input in, wire-ready records out."""

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import discord

from .exceptions import InvalidArgument

# Upper-snake names that don't lowercase to a discord.py flag name
_FLAG_ALIASES = {
    "use_vad": "use_voice_activation",
    "manage_emojis_and_stickers": "manage_expressions",
}


class OverwriteType(str, enum.Enum):
    role = "role"
    member = "member"

    @property
    def wire_value(self) -> int:
        return 0 if self is OverwriteType.role else 1

    @classmethod
    def coerce(cls, value) -> "OverwriteType":
        if isinstance(value, cls):
            return value
        if value in (0, 1) and not isinstance(value, bool):
            return cls.role if value == 0 else cls.member
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(
                f"Overwrite type must be 'role' or 'member', got {value!r}"
            ) from None


def resolve_permissions(bits) -> int:
    """
    Resolve a loose permission value to its integer bit set.

    Args:
        bits: None, an int, a numeric string, a flag name ("VIEW_CHANNEL" or
            "view_channel"), a discord.Permissions, or an iterable of those.

    Returns:
        The OR of every resolved bit.

    Raises:
        InvalidArgument: If a flag name is unknown or the value can't be read.
    """
    if bits is None:
        return 0
    if isinstance(bits, discord.Permissions):
        return bits.value
    if isinstance(bits, bool):
        raise InvalidArgument(f"Invalid permission value: {bits!r}")
    if isinstance(bits, int):
        return bits
    if isinstance(bits, str):
        if bits.isdigit():
            return int(bits)
        name = bits.lower()
        name = _FLAG_ALIASES.get(name, name)
        flag = discord.Permissions.VALID_FLAGS.get(name)
        if flag is None:
            raise InvalidArgument(f"Unknown permission flag: {bits!r}")
        return flag
    if isinstance(bits, Iterable):
        value = 0
        for bit in bits:
            value |= resolve_permissions(bit)
        return value
    raise InvalidArgument(f"Invalid permission value: {bits!r}")


@dataclass
class PermissionOverwrites:
    """A per-subject permission override, in canonical form."""

    id: str
    type: OverwriteType
    allow: int = 0
    deny: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.wire_value,
            "allow": str(self.allow),
            "deny": str(self.deny),
        }

    @classmethod
    def from_payload(cls, data: Mapping) -> "PermissionOverwrites":
        return cls(
            id=str(data["id"]),
            type=OverwriteType.coerce(data["type"]),
            allow=resolve_permissions(data.get("allow")),
            deny=resolve_permissions(data.get("deny")),
        )


def _subject_id(subject) -> str:
    if isinstance(subject, str):
        return subject
    if isinstance(subject, int) and not isinstance(subject, bool):
        return str(subject)
    subject_id = getattr(subject, "id", None)
    if subject_id is None:
        raise InvalidArgument(f"Overwrite subject has no id: {subject!r}")
    return str(subject_id)


def _subject_type(subject, guild, explicit=None) -> OverwriteType:
    if explicit is not None:
        return OverwriteType.coerce(explicit)

    declared = getattr(subject, "overwrite_type", None)
    if declared is not None:
        return OverwriteType(declared)

    subject_id = _subject_id(subject)
    # @everyone shares the guild's id
    if subject_id in guild.roles or subject_id == guild.id:
        return OverwriteType.role
    users = getattr(guild.client, "users", None) or {}
    if subject_id in guild.members or subject_id in users:
        return OverwriteType.member
    raise InvalidArgument(
        f"Overwrite subject {subject_id} is not a cached user or role"
    )


def resolve_overwrite(overwrite, guild) -> PermissionOverwrites:
    """
    Normalize one overwrite descriptor against a guild.

    Args:
        overwrite: A PermissionOverwrites, a mapping with "id" and optional
            "allow", "deny" and "type", or a (subject, discord.PermissionOverwrite)
            pair.
        guild: The guild the channel is created in. Its role and member
            caches decide the subject type when none is given.

    Returns:
        The canonical overwrite record.

    Raises:
        InvalidArgument: If the subject can't be resolved or the shape is unknown.
    """
    if isinstance(overwrite, PermissionOverwrites):
        return PermissionOverwrites(
            id=overwrite.id,
            type=OverwriteType.coerce(overwrite.type),
            allow=resolve_permissions(overwrite.allow),
            deny=resolve_permissions(overwrite.deny),
        )

    if (
        isinstance(overwrite, tuple)
        and len(overwrite) == 2
        and isinstance(overwrite[1], discord.PermissionOverwrite)
    ):
        subject, pair = overwrite
        allow, deny = pair.pair()
        return PermissionOverwrites(
            id=_subject_id(subject),
            type=_subject_type(subject, guild),
            allow=allow.value,
            deny=deny.value,
        )

    if isinstance(overwrite, Mapping):
        if "id" not in overwrite:
            raise InvalidArgument("Permission overwrite is missing an id")
        subject = overwrite["id"]
        return PermissionOverwrites(
            id=_subject_id(subject),
            type=_subject_type(subject, guild, overwrite.get("type")),
            allow=resolve_permissions(overwrite.get("allow")),
            deny=resolve_permissions(overwrite.get("deny")),
        )

    raise InvalidArgument(f"Unsupported permission overwrite: {overwrite!r}")


def resolve_overwrites(overwrites, guild) -> list[PermissionOverwrites]:
    """Normalize a sequence (or mapping) of overwrites, keeping their order."""
    if isinstance(overwrites, Mapping):
        if all(isinstance(v, discord.PermissionOverwrite) for v in overwrites.values()):
            items = list(overwrites.items())
        else:
            items = list(overwrites.values())
    else:
        items = list(overwrites)
    return [resolve_overwrite(o, guild) for o in items]

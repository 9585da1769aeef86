"""Tests for creating channels anywhere in a guild."""

import pytest
from unittest.mock import MagicMock

from .helpers import CATEGORY_ID, MEMBER_ID, sent_body


class TestGuildChannelsCreate:
    @pytest.mark.asyncio
    async def test_without_parent_omits_parent_id(self, http, guild):
        channel = await guild.channels.create("top-level")

        assert "parent_id" not in sent_body(http)
        assert channel.parent_id is None
        assert guild.channels.get(channel.id) is channel

    @pytest.mark.asyncio
    async def test_with_parent(self, http, guild, category):
        await guild.channels.create("nested", parent=category)

        assert sent_body(http)["parent_id"] == CATEGORY_ID

    @pytest.mark.asyncio
    async def test_with_parent_int_id(self, http, guild):
        await guild.channels.create("nested", parent=int(CATEGORY_ID))

        assert sent_body(http)["parent_id"] == CATEGORY_ID

    @pytest.mark.asyncio
    async def test_overwrites_from_discord_py_mapping(self, http, guild):
        import discord

        member = guild.members[MEMBER_ID]
        await guild.channels.create(
            "private",
            {"permission_overwrites": {member: discord.PermissionOverwrite(view_channel=True)}},
        )

        assert sent_body(http)["permission_overwrites"][0]["id"] == MEMBER_ID

    @pytest.mark.asyncio
    async def test_custom_apply_created(self, http, guild):
        from channelstore.stores import GuildChannels

        sentinel = MagicMock()
        apply_created = MagicMock(return_value=sentinel)
        store = GuildChannels(guild, apply_created=apply_created)

        result = await store.create("hooked")

        apply_created.assert_called_once()
        assert apply_created.call_args.args[0]["name"] == "hooked"
        assert result is sentinel


class TestGuildChannelsCollection:
    def test_delegates_to_cache(self, guild):
        channel = guild.channels.get("202")

        assert channel in guild.channels
        assert guild.channels.resolve("202") is channel
        assert guild.channels.delete(channel) is True
        assert "202" not in guild.channels

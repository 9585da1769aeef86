"""Tests for channel creation options."""

import pytest


class TestChannelCreateOptions:
    def test_defaults_are_unset(self):
        from channelstore.options import ChannelCreateOptions

        options = ChannelCreateOptions()

        assert options.type is None
        assert options.permission_overwrites is None
        assert options.reason is None

    def test_invalid_type_raises_at_construction(self):
        from channelstore.exceptions import InvalidArgument
        from channelstore.options import ChannelCreateOptions

        with pytest.raises(InvalidArgument, match="either 'text' or 'voice'"):
            ChannelCreateOptions(type="category")

    def test_wire_type(self):
        from channelstore.options import ChannelCreateOptions

        assert ChannelCreateOptions().wire_type == "text"
        assert ChannelCreateOptions(type="text").wire_type == 0
        assert ChannelCreateOptions(type="voice").wire_type == 2


class TestCoerce:
    def test_none_gives_defaults(self):
        from channelstore.options import ChannelCreateOptions

        assert ChannelCreateOptions.coerce(None) == ChannelCreateOptions()

    def test_instance_passes_through(self):
        from channelstore.options import ChannelCreateOptions

        options = ChannelCreateOptions(topic="hello")

        assert ChannelCreateOptions.coerce(options) is options

    def test_mapping(self):
        from channelstore.options import ChannelCreateOptions

        options = ChannelCreateOptions.coerce({"type": "voice", "user_limit": 4})

        assert options.type == "voice"
        assert options.user_limit == 4

    def test_unknown_names_raise(self):
        from channelstore.exceptions import InvalidArgument
        from channelstore.options import ChannelCreateOptions

        with pytest.raises(InvalidArgument, match="userLimit"):
            ChannelCreateOptions.coerce({"userLimit": 4})

    def test_parent_keys_are_ignored(self):
        from channelstore.options import ChannelCreateOptions

        options = ChannelCreateOptions.coerce(
            {"parent": "999", "parent_id": "999", "topic": "hello"}
        )

        assert options == ChannelCreateOptions(topic="hello")

    def test_other_values_raise(self):
        from channelstore.exceptions import InvalidArgument
        from channelstore.options import ChannelCreateOptions

        with pytest.raises(InvalidArgument):
            ChannelCreateOptions.coerce(["voice"])

"""
Pytest fixtures for channel store tests.
"""

import pytest

from .helpers import CATEGORY_ID, GUILD_PAYLOAD, make_http


@pytest.fixture
def http():
    return make_http()


@pytest.fixture
def client(http):
    from channelstore.client import Client

    return Client(http=http)


@pytest.fixture
def guild(client):
    return client.add_guild(GUILD_PAYLOAD)


@pytest.fixture
def category(guild):
    return guild.channels.get(CATEGORY_ID)

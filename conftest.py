"""Root pytest configuration."""

from pathlib import Path

import pytest

from channelstore.config import load_env

# Local DISCORD_* settings, same files the client reads at runtime
load_env(Path(__file__).parent)


@pytest.fixture
def clean_discord_env(monkeypatch):
    """Drop DISCORD_* settings a developer's .env may have loaded."""
    for name in (
        "DISCORD_BOT_TOKEN",
        "DISCORD_PROXY",
        "DISCORD_MAX_RATELIMIT_TIMEOUT",
        "DEV_MODE",
    ):
        # setenv first so teardown also drops anything load_dotenv sets later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch

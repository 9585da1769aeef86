"""
Environment-driven configuration for channelstore.

Values are read lazily so that tests and callers can adjust the
environment (or a .env file) before the client logs in.
"""

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(root: Path | None = None) -> None:
    """
    Load .env.local (local overrides, gitignored) then .env from `root`.

    Already-set environment variables win over both files.
    """
    root = root or Path.cwd()
    load_dotenv(root / ".env.local")
    load_dotenv(root / ".env")


def is_dev_mode() -> bool:
    """Check if running in development mode (DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def get_bot_token() -> str | None:
    """Get the Discord bot token used for REST calls."""
    return os.getenv("DISCORD_BOT_TOKEN") or None


def get_proxy() -> str | None:
    """Get an optional HTTP proxy URL for the transport."""
    return os.getenv("DISCORD_PROXY") or None


def get_max_ratelimit_timeout() -> float | None:
    """
    Get the longest rate-limit wait the transport will sleep through.

    Unset means the transport's own default. Rate-limit handling itself
    stays inside discord.py.
    """
    value = os.getenv("DISCORD_MAX_RATELIMIT_TIMEOUT")
    if not value:
        return None
    return float(value)


# Format: (name, description, required_in_dev)
REQUIRED_ENV_VARS = [
    ("DISCORD_BOT_TOKEN", "Discord bot token", False),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that required environment variables are set.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    in_dev = is_dev_mode()

    for name, description, required_in_dev in REQUIRED_ENV_VARS:
        if os.environ.get(name):
            continue
        if required_in_dev or not in_dev:
            warnings.append(f"  ⚠ {name}: Not set ({description})")

    return not warnings, warnings

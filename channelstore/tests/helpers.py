"""
Test helpers for building a client without a real transport.
"""

import itertools
from unittest.mock import AsyncMock, MagicMock

GUILD_ID = "100"
CATEGORY_ID = "200"
ROLE_ID = "300"
MEMBER_ID = "U1"


def make_http(guild_id: str = GUILD_ID) -> MagicMock:
    """Transport whose request() echoes the JSON body back as a channel payload."""
    ids = itertools.count(900)

    async def echo(route, *, json=None, reason=None):
        return {"id": str(next(ids)), "guild_id": guild_id, **json}

    http = MagicMock()
    http.request = AsyncMock(side_effect=echo)
    return http


def sent_body(http: MagicMock) -> dict:
    """JSON body of the single request made through the mocked transport."""
    http.request.assert_called_once()
    return http.request.call_args.kwargs["json"]


GUILD_PAYLOAD = {
    "id": GUILD_ID,
    "name": "Lens Academy",
    "roles": [
        {"id": GUILD_ID, "name": "@everyone"},
        {"id": ROLE_ID, "name": "Facilitators", "permissions": "0"},
    ],
    "members": [
        {"user": {"id": MEMBER_ID, "username": "alice"}, "roles": [ROLE_ID]},
    ],
    "channels": [
        {"id": CATEGORY_ID, "name": "Cohort Alpha", "type": 4},
        {"id": "201", "name": "general", "type": 0, "parent_id": CATEGORY_ID},
        {"id": "202", "name": "lobby", "type": 0},
    ],
}

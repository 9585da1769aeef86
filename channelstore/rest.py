# channelstore/rest.py
import logging
from typing import Any

from discord.http import HTTPClient, Route

logger = logging.getLogger(__name__)


class GuildChannelsRoute:
    """POST /guilds/{guild_id}/channels through discord.py's HTTP client."""

    def __init__(self, http: HTTPClient, guild_id: str):
        self._http = http
        self.guild_id = guild_id

    async def post(self, data: dict[str, Any], reason: str | None = None) -> dict:
        """
        Create a channel in the guild.

        Args:
            data: JSON body for the request.
            reason: Audit log reason, sent as a header rather than in the body.

        Returns:
            The raw channel payload from Discord.

        Raises:
            discord.HTTPException: Passed through from the transport.
        """
        route = Route("POST", "/guilds/{guild_id}/channels", guild_id=self.guild_id)
        logger.debug(f"POST {route.path} for guild {self.guild_id}")
        return await self._http.request(route, json=data, reason=reason)


class RestAPI:
    """Entry point for the REST routes the stores use."""

    def __init__(self, client):
        self._client = client

    def guild_channels(self, guild_id: str) -> GuildChannelsRoute:
        return GuildChannelsRoute(self._client.http, guild_id)

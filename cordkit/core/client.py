"""The client context every entity is bound to."""

import logging
from typing import List, Optional, Protocol

import aiohttp

from cordkit.config import ClientConfig
from cordkit.core.cache import Caches, CacheStrategy
from cordkit.core.channel import Channel
from cordkit.core.entity_builder import EntityBuilder
from cordkit.core.invite import Invite
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.voice import VoiceRegion
from cordkit.rest.client import RequestOptions, RestClient
from cordkit.rest.services import RestServices

logger = logging.getLogger(__name__)


class AudioController(Protocol):
    """Opens voice sessions; the voice transport itself lives elsewhere."""

    async def connect(self, guild_id: Snowflake, channel_id: Snowflake) -> None: ...


class Client:
    """
    Holds the services, caches and entity builder shared by all entities.

    Entities keep a reference to the client they were built by and reach
    the API and the caches only through it.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        rest_services: Optional[RestServices] = None,
        caches: Optional[Caches] = None,
        audio_controller: Optional[AudioController] = None,
        gateway_feeds_cache: bool = False,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config
        self.rest_services = rest_services or RestServices(RestClient(config, session))
        self.caches = caches or Caches(config.cache_max_size)
        self.entity_builder = EntityBuilder(self)
        self.audio_controller = audio_controller
        # True once a gateway connection keeps the caches up to date.
        self.gateway_feeds_cache = gateway_feeds_cache

    async def close(self) -> None:
        await self.rest_services.close()
        logger.debug("Client closed")

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # =========================================================================
    # Conveniences
    # =========================================================================

    async def fetch_channel(
        self, channel_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> Channel:
        data = await self.rest_services.channels.get_channel(channel_id, options=options)
        return self.entity_builder.create_channel(data, CacheStrategy.NO_WS)

    async def fetch_invite(
        self,
        code: str,
        *,
        with_counts: bool = False,
        with_expiration: bool = False,
        options: Optional[RequestOptions] = None,
    ) -> Invite:
        data = await self.rest_services.invites.get_invite(
            code, with_counts=with_counts, with_expiration=with_expiration, options=options
        )
        return self.entity_builder.create_invite(data, CacheStrategy.NO_WS)

    async def get_voice_regions(
        self, *, options: Optional[RequestOptions] = None
    ) -> List[VoiceRegion]:
        return await self.rest_services.voice.get_voice_regions(options=options)

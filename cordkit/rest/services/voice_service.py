"""Voice endpoints."""

from typing import List, Optional

from cordkit.discord.voice import VoiceRegion
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions
from cordkit.rest.services.base import Service, list_of


class VoiceService(Service):
    async def get_voice_regions(
        self, *, options: Optional[RequestOptions] = None
    ) -> List[VoiceRegion]:
        compiled_route = routes.GET_VOICE_REGIONS.compile(None)
        return await self.rest_client.do(
            compiled_route, decoder=list_of(VoiceRegion.from_payload), options=options
        )

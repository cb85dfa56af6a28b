"""Resource services, one per endpoint family."""

from cordkit.rest.client import RestClient
from cordkit.rest.services.base import Service, list_of
from cordkit.rest.services.channel_service import ChannelService
from cordkit.rest.services.invite_service import InviteService
from cordkit.rest.services.stage_instance_service import StageInstanceService
from cordkit.rest.services.voice_service import VoiceService
from cordkit.rest.services.webhook_service import WebhookService


class RestServices:
    """All services sharing one ``RestClient``."""

    def __init__(self, rest_client: RestClient):
        self.rest_client = rest_client
        self.channels = ChannelService(rest_client)
        self.invites = InviteService(rest_client)
        self.stage_instances = StageInstanceService(rest_client)
        self.voice = VoiceService(rest_client)
        self.webhooks = WebhookService(rest_client)

    async def close(self) -> None:
        await self.rest_client.close()


__all__ = [
    "ChannelService",
    "InviteService",
    "RestServices",
    "Service",
    "StageInstanceService",
    "VoiceService",
    "WebhookService",
    "list_of",
]

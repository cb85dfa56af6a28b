"""Channel and channel message endpoints."""

from typing import Optional

from cordkit.discord.channel import ChannelData
from cordkit.discord.message import MessageCreate, MessageData, MessageUpdate
from cordkit.discord.snowflake import Snowflake
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions
from cordkit.rest.services.base import Service


class ChannelService(Service):
    async def get_channel(
        self, channel_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> ChannelData:
        compiled_route = routes.GET_CHANNEL.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route, decoder=ChannelData.from_payload, options=options
        )

    async def get_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.GET_MESSAGE.compile(None, channel_id, message_id)
        return await self.rest_client.do(
            compiled_route, decoder=MessageData.from_payload, options=options
        )

    async def create_message(
        self,
        channel_id: Snowflake,
        message_create: MessageCreate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.CREATE_MESSAGE.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route, message_create, decoder=MessageData.from_payload, options=options
        )

    async def update_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        message_update: MessageUpdate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.UPDATE_MESSAGE.compile(None, channel_id, message_id)
        return await self.rest_client.do(
            compiled_route, message_update, decoder=MessageData.from_payload, options=options
        )

    async def delete_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        compiled_route = routes.DELETE_MESSAGE.compile(None, channel_id, message_id)
        await self.rest_client.do(compiled_route, expect_response=False, options=options)

    async def bulk_delete_messages(
        self,
        channel_id: Snowflake,
        *message_ids: Snowflake,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Delete several messages with a single request."""
        compiled_route = routes.BULK_DELETE_MESSAGES.compile(None, channel_id)
        await self.rest_client.do(
            compiled_route,
            {"messages": [str(message_id) for message_id in message_ids]},
            expect_response=False,
            options=options,
        )

    async def crosspost_message(
        self,
        channel_id: Snowflake,
        message_id: Snowflake,
        *,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.CROSSPOST_MESSAGE.compile(None, channel_id, message_id)
        return await self.rest_client.do(
            compiled_route, decoder=MessageData.from_payload, options=options
        )

"""Webhook endpoints.

Webhook responses come as one envelope for every webhook kind; they are
unwrapped into the concrete variant with ``parse_webhook``.
"""

from typing import Any, Dict, Optional

from cordkit.discord.message import MessageData
from cordkit.discord.payload import Payload
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.webhook import (
    Webhook,
    WebhookMessageCreate,
    WebhookMessageUpdate,
    WebhookUpdate,
    WebhookUpdateWithToken,
    parse_webhook,
)
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions
from cordkit.rest.route import Route
from cordkit.rest.services.base import Service


def _thread_query(thread_id: Optional[Snowflake]) -> Dict[str, Any]:
    # Absent inputs must not show up in the compiled query at all.
    if thread_id:
        return {"thread_id": thread_id}
    return {}


class WebhookService(Service):
    async def get_webhook(
        self, webhook_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> Webhook:
        compiled_route = routes.GET_WEBHOOK.compile(None, webhook_id)
        return await self.rest_client.do(compiled_route, decoder=parse_webhook, options=options)

    async def update_webhook(
        self,
        webhook_id: Snowflake,
        webhook_update: WebhookUpdate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Webhook:
        compiled_route = routes.UPDATE_WEBHOOK.compile(None, webhook_id)
        return await self.rest_client.do(
            compiled_route, webhook_update, decoder=parse_webhook, options=options
        )

    async def delete_webhook(
        self, webhook_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> None:
        compiled_route = routes.DELETE_WEBHOOK.compile(None, webhook_id)
        await self.rest_client.do(compiled_route, expect_response=False, options=options)

    async def get_webhook_with_token(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Webhook:
        compiled_route = routes.GET_WEBHOOK_WITH_TOKEN.compile(None, webhook_id, webhook_token)
        return await self.rest_client.do(compiled_route, decoder=parse_webhook, options=options)

    async def update_webhook_with_token(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        webhook_update: WebhookUpdateWithToken,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Webhook:
        compiled_route = routes.UPDATE_WEBHOOK_WITH_TOKEN.compile(None, webhook_id, webhook_token)
        return await self.rest_client.do(
            compiled_route, webhook_update, decoder=parse_webhook, options=options
        )

    async def delete_webhook_with_token(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        *,
        options: Optional[RequestOptions] = None,
    ) -> None:
        compiled_route = routes.DELETE_WEBHOOK_WITH_TOKEN.compile(None, webhook_id, webhook_token)
        await self.rest_client.do(compiled_route, expect_response=False, options=options)

    async def _create_message(
        self,
        route: Route,
        webhook_id: Snowflake,
        webhook_token: str,
        message_create: Payload,
        wait: bool,
        thread_id: Optional[Snowflake],
        options: Optional[RequestOptions],
    ) -> Optional[MessageData]:
        query = _thread_query(thread_id)
        if wait:
            query["wait"] = True
        compiled_route = route.compile(query, webhook_id, webhook_token)

        if not wait:
            # Without wait the API answers 204 and there is nothing to decode.
            await self.rest_client.do(
                compiled_route, message_create, expect_response=False, options=options
            )
            return None
        return await self.rest_client.do(
            compiled_route, message_create, decoder=MessageData.from_payload, options=options
        )

    async def create_message(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_create: WebhookMessageCreate,
        *,
        wait: bool = False,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> Optional[MessageData]:
        """
        Execute a webhook.

        Args:
            webhook_id: The webhook to execute.
            webhook_token: Its token.
            message_create: The message body.
            wait: Wait for the message to be created and return it.
            thread_id: Post into this thread of the webhook's channel.
            options: Per-request options.

        Returns:
            The created message when ``wait`` is set, otherwise ``None``.
        """
        return await self._create_message(
            routes.CREATE_WEBHOOK_MESSAGE,
            webhook_id,
            webhook_token,
            message_create,
            wait,
            thread_id,
            options,
        )

    async def create_message_slack(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_create: Payload,
        *,
        wait: bool = False,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> Optional[MessageData]:
        """Execute a webhook with a Slack formatted body."""
        return await self._create_message(
            routes.CREATE_WEBHOOK_MESSAGE_SLACK,
            webhook_id,
            webhook_token,
            message_create,
            wait,
            thread_id,
            options,
        )

    async def create_message_github(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_create: Payload,
        *,
        wait: bool = False,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> Optional[MessageData]:
        """Execute a webhook with a GitHub event body."""
        return await self._create_message(
            routes.CREATE_WEBHOOK_MESSAGE_GITHUB,
            webhook_id,
            webhook_token,
            message_create,
            wait,
            thread_id,
            options,
        )

    async def get_message(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_id: Snowflake,
        *,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.GET_WEBHOOK_MESSAGE.compile(
            _thread_query(thread_id), webhook_id, webhook_token, message_id
        )
        return await self.rest_client.do(
            compiled_route, decoder=MessageData.from_payload, options=options
        )

    async def update_message(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_id: Snowflake,
        message_update: WebhookMessageUpdate,
        *,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> MessageData:
        compiled_route = routes.UPDATE_WEBHOOK_MESSAGE.compile(
            _thread_query(thread_id), webhook_id, webhook_token, message_id
        )
        return await self.rest_client.do(
            compiled_route, message_update, decoder=MessageData.from_payload, options=options
        )

    async def delete_message(
        self,
        webhook_id: Snowflake,
        webhook_token: str,
        message_id: Snowflake,
        *,
        thread_id: Optional[Snowflake] = None,
        options: Optional[RequestOptions] = None,
    ) -> None:
        compiled_route = routes.DELETE_WEBHOOK_MESSAGE.compile(
            _thread_query(thread_id), webhook_id, webhook_token, message_id
        )
        await self.rest_client.do(compiled_route, expect_response=False, options=options)

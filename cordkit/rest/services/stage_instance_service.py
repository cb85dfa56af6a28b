"""Stage instance endpoints."""

from typing import Optional

from cordkit.discord.snowflake import Snowflake
from cordkit.discord.stage_instance import (
    StageInstanceCreate,
    StageInstanceData,
    StageInstanceUpdate,
)
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions
from cordkit.rest.services.base import Service


class StageInstanceService(Service):
    async def get_stage_instance(
        self, channel_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> StageInstanceData:
        compiled_route = routes.GET_STAGE_INSTANCE.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route, decoder=StageInstanceData.from_payload, options=options
        )

    async def create_stage_instance(
        self,
        stage_instance_create: StageInstanceCreate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> StageInstanceData:
        compiled_route = routes.CREATE_STAGE_INSTANCE.compile(None)
        return await self.rest_client.do(
            compiled_route,
            stage_instance_create,
            decoder=StageInstanceData.from_payload,
            options=options,
        )

    async def update_stage_instance(
        self,
        channel_id: Snowflake,
        stage_instance_update: StageInstanceUpdate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> StageInstanceData:
        compiled_route = routes.UPDATE_STAGE_INSTANCE.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route,
            stage_instance_update,
            decoder=StageInstanceData.from_payload,
            options=options,
        )

    async def delete_stage_instance(
        self, channel_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> None:
        compiled_route = routes.DELETE_STAGE_INSTANCE.compile(None, channel_id)
        await self.rest_client.do(compiled_route, expect_response=False, options=options)

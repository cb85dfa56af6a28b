"""Invite endpoints."""

from typing import List, Optional

from cordkit.discord.invite import InviteCreate, InviteData
from cordkit.discord.snowflake import Snowflake
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions
from cordkit.rest.services.base import Service, list_of


class InviteService(Service):
    async def get_invite(
        self,
        code: str,
        *,
        with_counts: bool = False,
        with_expiration: bool = False,
        options: Optional[RequestOptions] = None,
    ) -> InviteData:
        """Resolve an invite code.

        ``with_counts`` adds approximate member counts and ``with_expiration``
        adds the expiry timestamp.
        """
        compiled_route = routes.GET_INVITE.compile(
            {
                "with_counts": True if with_counts else None,
                "with_expiration": True if with_expiration else None,
            },
            code,
        )
        return await self.rest_client.do(
            compiled_route, decoder=InviteData.from_payload, options=options
        )

    async def create_invite(
        self,
        channel_id: Snowflake,
        invite_create: InviteCreate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> InviteData:
        compiled_route = routes.CREATE_INVITE.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route, invite_create, decoder=InviteData.from_payload, options=options
        )

    async def delete_invite(
        self, code: str, *, options: Optional[RequestOptions] = None
    ) -> InviteData:
        """Delete an invite and return it as it was."""
        compiled_route = routes.DELETE_INVITE.compile(None, code)
        return await self.rest_client.do(
            compiled_route, decoder=InviteData.from_payload, options=options
        )

    async def get_guild_invites(
        self, guild_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> List[InviteData]:
        compiled_route = routes.GET_GUILD_INVITES.compile(None, guild_id)
        return await self.rest_client.do(
            compiled_route, decoder=list_of(InviteData.from_payload), options=options
        )

    async def get_channel_invites(
        self, channel_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> List[InviteData]:
        compiled_route = routes.GET_CHANNEL_INVITES.compile(None, channel_id)
        return await self.rest_client.do(
            compiled_route, decoder=list_of(InviteData.from_payload), options=options
        )

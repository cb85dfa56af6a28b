"""Entities: wire data bound to the client that produced it."""

from typing import TYPE_CHECKING, Dict, Optional

from cordkit.core.cache import CacheStrategy
from cordkit.discord.guild import GuildData, MemberData, RoleData, UserData
from cordkit.discord.message import MessageData, MessageUpdate
from cordkit.discord.permissions import Permissions
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.stage_instance import StageInstanceData, StageInstanceUpdate
from cordkit.rest.client import RequestOptions

if TYPE_CHECKING:
    from cordkit.core.channel import Channel
    from cordkit.core.client import Client


class User:
    def __init__(self, client: "Client", data: UserData):
        self.client = client
        self.data = data

    @property
    def id(self) -> Snowflake:
        return self.data.id

    @property
    def username(self) -> str:
        return self.data.username

    @property
    def bot(self) -> bool:
        return self.data.bot

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"


class Guild:
    def __init__(self, client: "Client", data: GuildData):
        self.client = client
        self.data = data
        self.roles: Dict[Snowflake, RoleData] = {role.id: role for role in data.roles}

    @property
    def id(self) -> Snowflake:
        return self.data.id

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def owner_id(self) -> Optional[Snowflake]:
        return self.data.owner_id

    @property
    def everyone_role(self) -> Optional[RoleData]:
        """The @everyone role shares the guild's id."""
        return self.roles.get(self.id)

    def __repr__(self) -> str:
        return f"<Guild id={self.id} name={self.name!r}>"


class Member:
    def __init__(self, client: "Client", data: MemberData, user: User):
        self.client = client
        self.data = data
        self.user = user

    @property
    def guild_id(self) -> Snowflake:
        return self.data.guild_id

    @property
    def role_ids(self):
        return self.data.role_ids

    @property
    def permissions(self) -> Optional[Permissions]:
        """Channel-resolved permissions when the payload carried them."""
        return self.data.permissions

    @property
    def guild(self) -> Optional[Guild]:
        return self.client.caches.guilds.get(self.guild_id)

    def __repr__(self) -> str:
        return f"<Member guild_id={self.guild_id} user={self.user!r}>"


class Message:
    def __init__(self, client: "Client", data: MessageData, author: Optional[User] = None):
        self.client = client
        self.data = data
        self.author = author

    @property
    def id(self) -> Snowflake:
        return self.data.id

    @property
    def channel_id(self) -> Snowflake:
        return self.data.channel_id

    @property
    def content(self) -> str:
        return self.data.content

    @property
    def channel(self) -> Optional["Channel"]:
        return self.client.caches.channels.get(self.channel_id)

    async def update(
        self, message_update: MessageUpdate, *, options: Optional[RequestOptions] = None
    ) -> "Message":
        data = await self.client.rest_services.channels.update_message(
            self.channel_id, self.id, message_update, options=options
        )
        return self.client.entity_builder.create_message(data, CacheStrategy.NO_WS)

    async def delete(self, *, options: Optional[RequestOptions] = None) -> None:
        await self.client.rest_services.channels.delete_message(
            self.channel_id, self.id, options=options
        )

    def __repr__(self) -> str:
        return f"<Message id={self.id} channel_id={self.channel_id}>"


class StageInstance:
    def __init__(self, client: "Client", data: StageInstanceData):
        self.client = client
        self.data = data

    @property
    def id(self) -> Snowflake:
        return self.data.id

    @property
    def channel_id(self) -> Snowflake:
        return self.data.channel_id

    @property
    def guild_id(self) -> Snowflake:
        return self.data.guild_id

    @property
    def topic(self) -> str:
        return self.data.topic

    @property
    def channel(self) -> Optional["Channel"]:
        return self.client.caches.channels.get(self.channel_id)

    @property
    def guild(self) -> Optional[Guild]:
        return self.client.caches.guilds.get(self.guild_id)

    async def update(
        self,
        stage_instance_update: StageInstanceUpdate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "StageInstance":
        data = await self.client.rest_services.stage_instances.update_stage_instance(
            self.channel_id, stage_instance_update, options=options
        )
        return self.client.entity_builder.create_stage_instance(data, CacheStrategy.NO_WS)

    async def delete(self, *, options: Optional[RequestOptions] = None) -> None:
        await self.client.rest_services.stage_instances.delete_stage_instance(
            self.channel_id, options=options
        )
        self.client.caches.stage_instances.remove(self.id)

    def __repr__(self) -> str:
        return f"<StageInstance id={self.id} channel_id={self.channel_id}>"

"""The channel entity.

Every channel kind shares one wire representation, so one class carries every
capability. Each capability is tied to a set of channel types; using it on any
other type raises ``UnsupportedOperationError`` before any state is read or
any request is made.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from cordkit.core.cache import CacheStrategy
from cordkit.core.permissions import compute_base_permissions, compute_overwrites
from cordkit.discord.channel import ChannelData, ChannelType
from cordkit.discord.invite import InviteCreate
from cordkit.discord.message import MessageCreate, MessageUpdate
from cordkit.discord.permissions import (
    STAGE_MODERATOR_PERMISSIONS,
    PermissionOverwrite,
    Permissions,
)
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.stage_instance import StageInstanceCreate
from cordkit.exceptions import ConfigurationException, UnsupportedOperationError
from cordkit.rest.client import RequestOptions

if TYPE_CHECKING:
    from cordkit.core.capabilities import Category
    from cordkit.core.client import Client
    from cordkit.core.entities import Guild, Member, Message, StageInstance
    from cordkit.core.invite import Invite

logger = logging.getLogger(__name__)

MESSAGE_CHANNEL_TYPES = frozenset(
    {ChannelType.GUILD_TEXT, ChannelType.GUILD_NEWS, ChannelType.DM}
)
TEXT_CAPABLE_TYPES = frozenset({ChannelType.GUILD_TEXT, ChannelType.GUILD_NEWS})
VOICE_CAPABLE_TYPES = frozenset({ChannelType.GUILD_VOICE, ChannelType.GUILD_STAGE_VOICE})


class Channel:
    """A channel of any type, bound to its client."""

    def __init__(
        self,
        client: "Client",
        data: ChannelData,
        stage_instance_id: Optional[Snowflake] = None,
    ):
        self.client = client
        self._data = data
        self.stage_instance_id = stage_instance_id

    def __repr__(self) -> str:
        return f"<Channel id={self.id} type={self.type} name={self._data.name!r}>"

    def _require(self, supported: bool, operation: str) -> None:
        if not supported:
            raise UnsupportedOperationError(operation, self.type)

    # =========================================================================
    # Channel
    # =========================================================================

    @property
    def data(self) -> ChannelData:
        return self._data

    @property
    def id(self) -> Snowflake:
        return self._data.id

    @property
    def name(self) -> Optional[str]:
        """The channel name; DMs have none."""
        return self._data.name

    @property
    def type(self) -> ChannelType:
        return self._data.type

    def is_dm_channel(self) -> bool:
        return self.type == ChannelType.DM

    def is_text_channel(self) -> bool:
        return self.type == ChannelType.GUILD_TEXT

    def is_voice_channel(self) -> bool:
        return self.type == ChannelType.GUILD_VOICE

    def is_category(self) -> bool:
        return self.type == ChannelType.GUILD_CATEGORY

    def is_news_channel(self) -> bool:
        return self.type == ChannelType.GUILD_NEWS

    def is_store_channel(self) -> bool:
        return self.type == ChannelType.GUILD_STORE

    def is_stage_channel(self) -> bool:
        return self.type == ChannelType.GUILD_STAGE_VOICE

    def is_message_channel(self) -> bool:
        return self.type in MESSAGE_CHANNEL_TYPES

    def is_guild_channel(self) -> bool:
        return self.type != ChannelType.DM

    def is_text_capable(self) -> bool:
        """Text and news channels: both carry a topic and an NSFW flag."""
        return self.type in TEXT_CAPABLE_TYPES

    def is_voice_capable(self) -> bool:
        """Voice and stage channels."""
        return self.type in VOICE_CAPABLE_TYPES

    # =========================================================================
    # MessageChannel
    # =========================================================================

    @property
    def last_message_id(self) -> Optional[Snowflake]:
        self._require(self.is_message_channel(), "last_message_id")
        return self._data.last_message_id

    @property
    def last_pin_timestamp(self) -> Optional[datetime]:
        self._require(self.is_message_channel(), "last_pin_timestamp")
        return self._data.last_pin_timestamp

    async def get_message(
        self, message_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> "Message":
        self._require(self.is_message_channel(), "get_message")
        data = await self.client.rest_services.channels.get_message(
            self.id, message_id, options=options
        )
        return self.client.entity_builder.create_message(data, CacheStrategy.NO_WS)

    async def create_message(
        self, message_create: MessageCreate, *, options: Optional[RequestOptions] = None
    ) -> "Message":
        """Send a message to this channel."""
        self._require(self.is_message_channel(), "create_message")
        data = await self.client.rest_services.channels.create_message(
            self.id, message_create, options=options
        )
        return self.client.entity_builder.create_message(data, CacheStrategy.NO_WS)

    async def update_message(
        self,
        message_id: Snowflake,
        message_update: MessageUpdate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "Message":
        """Edit a message previously sent in this channel."""
        self._require(self.is_message_channel(), "update_message")
        data = await self.client.rest_services.channels.update_message(
            self.id, message_id, message_update, options=options
        )
        return self.client.entity_builder.create_message(data, CacheStrategy.NO_WS)

    async def delete_message(
        self, message_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> None:
        self._require(self.is_message_channel(), "delete_message")
        await self.client.rest_services.channels.delete_message(
            self.id, message_id, options=options
        )

    async def bulk_delete_messages(
        self, *message_ids: Snowflake, options: Optional[RequestOptions] = None
    ) -> None:
        """Delete many messages with one request."""
        self._require(self.is_message_channel(), "bulk_delete_messages")
        await self.client.rest_services.channels.bulk_delete_messages(
            self.id, *message_ids, options=options
        )

    # =========================================================================
    # GuildChannel
    # =========================================================================

    @property
    def guild_id(self) -> Snowflake:
        self._require(self.is_guild_channel() and self._data.guild_id is not None, "guild_id")
        return self._data.guild_id

    @property
    def guild(self) -> Optional["Guild"]:
        self._require(self.is_guild_channel(), "guild")
        if self._data.guild_id is None:
            return None
        return self.client.caches.guilds.get(self._data.guild_id)

    @property
    def permissions(self) -> Optional[Permissions]:
        """Permissions of the invoking member, present on interaction payloads."""
        self._require(self.is_guild_channel(), "permissions")
        return self._data.permissions

    @property
    def permission_overwrites(self) -> List[PermissionOverwrite]:
        self._require(self.is_guild_channel(), "permission_overwrites")
        return self._data.permission_overwrites

    @property
    def parent_id(self) -> Optional[Snowflake]:
        self._require(self.is_guild_channel(), "parent_id")
        return self._data.parent_id

    @property
    def parent(self) -> Optional["Category"]:
        """The category this channel sits in, if cached."""
        parent_id = self.parent_id
        if parent_id is None:
            return None
        return self.client.caches.category(parent_id)

    @property
    def position(self) -> Optional[int]:
        self._require(self.is_guild_channel(), "position")
        return self._data.position

    async def create_invite(
        self, invite_create: InviteCreate, *, options: Optional[RequestOptions] = None
    ) -> "Invite":
        self._require(self.is_guild_channel(), "create_invite")
        data = await self.client.rest_services.invites.create_invite(
            self.id, invite_create, options=options
        )
        return self.client.entity_builder.create_invite(data, CacheStrategy.NO_WS)

    async def get_invites(self, *, options: Optional[RequestOptions] = None) -> List["Invite"]:
        self._require(self.is_guild_channel(), "get_invites")
        invites = await self.client.rest_services.invites.get_channel_invites(
            self.id, options=options
        )
        return [
            self.client.entity_builder.create_invite(data, CacheStrategy.NO_WS)
            for data in invites
        ]

    # =========================================================================
    # VoiceChannel
    # =========================================================================

    @property
    def bitrate(self) -> Optional[int]:
        self._require(self.is_voice_capable(), "bitrate")
        return self._data.bitrate

    @property
    def user_limit(self) -> Optional[int]:
        self._require(self.is_voice_capable(), "user_limit")
        return self._data.user_limit

    async def connect(self) -> None:
        """Join this channel through the client's audio controller."""
        self._require(self.is_voice_capable(), "connect")
        controller = self.client.audio_controller
        if controller is None:
            raise ConfigurationException(
                "No audio controller configured", {"channel_id": self.id}
            )
        await controller.connect(self.guild_id, self.id)

    # =========================================================================
    # TextChannel
    # =========================================================================

    @property
    def nsfw(self) -> bool:
        self._require(self.is_text_capable(), "nsfw")
        return bool(self._data.nsfw)

    @property
    def topic(self) -> Optional[str]:
        self._require(self.is_text_capable(), "topic")
        return self._data.topic

    # =========================================================================
    # NewsChannel
    # =========================================================================

    async def crosspost_message(
        self, message_id: Snowflake, *, options: Optional[RequestOptions] = None
    ) -> "Message":
        """Publish a message of this news channel to the channels following it."""
        self._require(self.is_news_channel(), "crosspost_message")
        data = await self.client.rest_services.channels.crosspost_message(
            self.id, message_id, options=options
        )
        return self.client.entity_builder.create_message(data, CacheStrategy.NO_WS)

    # =========================================================================
    # StageChannel
    # =========================================================================

    @property
    def stage_instance(self) -> Optional["StageInstance"]:
        self._require(self.is_stage_channel(), "stage_instance")
        if self.stage_instance_id is None:
            return None
        return self.client.caches.stage_instances.get(self.stage_instance_id)

    async def create_stage_instance(
        self,
        stage_instance_create: StageInstanceCreate,
        *,
        options: Optional[RequestOptions] = None,
    ) -> "StageInstance":
        """Open a stage instance on this channel."""
        self._require(self.is_stage_channel(), "create_stage_instance")
        if stage_instance_create.channel_id is None:
            stage_instance_create = replace(stage_instance_create, channel_id=self.id)
        data = await self.client.rest_services.stage_instances.create_stage_instance(
            stage_instance_create, options=options
        )
        return self.client.entity_builder.create_stage_instance(data, CacheStrategy.NO_WS)

    def is_moderator(self, member: "Member") -> bool:
        """
        Whether ``member`` moderates this stage.

        Stage moderators hold MANAGE_CHANNELS, MUTE_MEMBERS and MOVE_MEMBERS in
        the channel (or are administrators). Permissions resolved by the API
        on the member payload are used as-is; otherwise they are computed from
        the cached guild. Without either the answer is False.
        """
        self._require(self.is_stage_channel(), "is_moderator")
        permissions = self._member_permissions(member)
        if permissions is None:
            return False
        return bool(permissions & Permissions.ADMINISTRATOR) or permissions.has(
            STAGE_MODERATOR_PERMISSIONS
        )

    def _member_permissions(self, member: "Member") -> Optional[Permissions]:
        if member.permissions is not None:
            return member.permissions
        guild = self.guild
        if guild is None:
            logger.debug("Guild %s not cached; cannot resolve permissions", self._data.guild_id)
            return None
        base = compute_base_permissions(guild, member)
        return compute_overwrites(base, guild.id, member, self._data.permission_overwrites)

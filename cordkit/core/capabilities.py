"""Capability views of a channel, for type checkers.

``Channel`` satisfies all of these structurally; annotate with the narrowest
one a function needs. They carry no runtime checks of their own, the gates
live on ``Channel``.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Protocol

from cordkit.discord.channel import ChannelType
from cordkit.discord.invite import InviteCreate
from cordkit.discord.message import MessageCreate, MessageUpdate
from cordkit.discord.permissions import PermissionOverwrite, Permissions
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.stage_instance import StageInstanceCreate

if TYPE_CHECKING:
    from cordkit.core.entities import Guild, Member, Message, StageInstance
    from cordkit.core.invite import Invite


class BaseChannel(Protocol):
    @property
    def id(self) -> Snowflake: ...

    @property
    def name(self) -> Optional[str]: ...

    @property
    def type(self) -> ChannelType: ...


class MessageChannel(BaseChannel, Protocol):
    @property
    def last_message_id(self) -> Optional[Snowflake]: ...

    @property
    def last_pin_timestamp(self) -> Optional[datetime]: ...

    async def create_message(self, message_create: MessageCreate) -> "Message": ...

    async def update_message(
        self, message_id: Snowflake, message_update: MessageUpdate
    ) -> "Message": ...

    async def delete_message(self, message_id: Snowflake) -> None: ...

    async def bulk_delete_messages(self, *message_ids: Snowflake) -> None: ...


class DMChannel(MessageChannel, Protocol):
    pass


class GuildChannel(BaseChannel, Protocol):
    @property
    def guild_id(self) -> Snowflake: ...

    @property
    def guild(self) -> Optional["Guild"]: ...

    @property
    def permissions(self) -> Optional[Permissions]: ...

    @property
    def permission_overwrites(self) -> List[PermissionOverwrite]: ...

    @property
    def parent_id(self) -> Optional[Snowflake]: ...

    @property
    def parent(self) -> Optional["Category"]: ...

    @property
    def position(self) -> Optional[int]: ...

    async def create_invite(self, invite_create: InviteCreate) -> "Invite": ...


class Category(GuildChannel, Protocol):
    pass


class StoreChannel(GuildChannel, Protocol):
    pass


class VoiceChannel(GuildChannel, Protocol):
    @property
    def bitrate(self) -> Optional[int]: ...

    async def connect(self) -> None: ...


class TextChannel(GuildChannel, MessageChannel, Protocol):
    @property
    def nsfw(self) -> bool: ...

    @property
    def topic(self) -> Optional[str]: ...


class NewsChannel(TextChannel, Protocol):
    async def crosspost_message(self, message_id: Snowflake) -> "Message": ...


class StageChannel(VoiceChannel, Protocol):
    @property
    def stage_instance(self) -> Optional["StageInstance"]: ...

    async def create_stage_instance(
        self, stage_instance_create: StageInstanceCreate
    ) -> "StageInstance": ...

    def is_moderator(self, member: "Member") -> bool: ...

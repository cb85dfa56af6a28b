"""Channel wire model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional

from cordkit.discord.guild import UserData
from cordkit.discord.payload import parse_timestamp
from cordkit.discord.permissions import PermissionOverwrite, Permissions
from cordkit.discord.snowflake import Snowflake


class ChannelType(IntEnum):
    """Channel discriminant."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_STORE = 6
    GUILD_STAGE_VOICE = 13

    def __str__(self) -> str:
        return self.name


@dataclass
class ChannelData:
    """A channel as sent by the API.

    Which optional fields are populated depends on ``type``.
    """

    id: Snowflake
    type: ChannelType
    name: Optional[str] = None
    guild_id: Optional[Snowflake] = None
    position: Optional[int] = None
    permission_overwrites: List[PermissionOverwrite] = field(default_factory=list)
    topic: Optional[str] = None
    nsfw: Optional[bool] = None
    last_message_id: Optional[Snowflake] = None
    bitrate: Optional[int] = None
    user_limit: Optional[int] = None
    parent_id: Optional[Snowflake] = None
    last_pin_timestamp: Optional[datetime] = None
    permissions: Optional[Permissions] = None
    recipients: List[UserData] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ChannelData":
        return cls(
            id=Snowflake(data["id"]),
            type=ChannelType(int(data["type"])),
            name=data.get("name"),
            guild_id=Snowflake.optional(data.get("guild_id")),
            position=data.get("position"),
            permission_overwrites=[
                PermissionOverwrite.from_payload(item)
                for item in data.get("permission_overwrites") or []
            ],
            topic=data.get("topic"),
            nsfw=data.get("nsfw"),
            last_message_id=Snowflake.optional(data.get("last_message_id")),
            bitrate=data.get("bitrate"),
            user_limit=data.get("user_limit"),
            parent_id=Snowflake.optional(data.get("parent_id")),
            last_pin_timestamp=parse_timestamp(data.get("last_pin_timestamp")),
            permissions=Permissions.from_raw(data.get("permissions")),
            recipients=[UserData.from_payload(item) for item in data.get("recipients") or []],
        )

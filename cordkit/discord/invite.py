"""Invite wire model and payloads."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Optional

from cordkit.discord.channel import ChannelType
from cordkit.discord.guild import UserData
from cordkit.discord.payload import Payload, drop_none, parse_timestamp
from cordkit.discord.snowflake import Snowflake


class InviteTargetType(IntEnum):
    STREAM = 1
    EMBEDDED_APPLICATION = 2


@dataclass
class InviteGuild:
    id: Snowflake
    name: str
    icon: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "InviteGuild":
        return cls(id=Snowflake(data["id"]), name=data["name"], icon=data.get("icon"))


@dataclass
class InviteChannel:
    id: Snowflake
    type: ChannelType
    name: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "InviteChannel":
        return cls(
            id=Snowflake(data["id"]),
            type=ChannelType(int(data["type"])),
            name=data.get("name"),
        )


@dataclass
class InviteData:
    code: str
    guild: Optional[InviteGuild] = None
    channel: Optional[InviteChannel] = None
    inviter: Optional[UserData] = None
    target_type: Optional[InviteTargetType] = None
    target_user: Optional[UserData] = None
    approximate_presence_count: Optional[int] = None
    approximate_member_count: Optional[int] = None
    expires_at: Optional[datetime] = None
    uses: Optional[int] = None
    max_uses: Optional[int] = None
    max_age: Optional[int] = None
    temporary: Optional[bool] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "InviteData":
        guild = data.get("guild")
        channel = data.get("channel")
        inviter = data.get("inviter")
        target_user = data.get("target_user")
        target_type = data.get("target_type")
        return cls(
            code=data["code"],
            guild=InviteGuild.from_payload(guild) if guild else None,
            channel=InviteChannel.from_payload(channel) if channel else None,
            inviter=UserData.from_payload(inviter) if inviter else None,
            target_type=InviteTargetType(int(target_type)) if target_type else None,
            target_user=UserData.from_payload(target_user) if target_user else None,
            approximate_presence_count=data.get("approximate_presence_count"),
            approximate_member_count=data.get("approximate_member_count"),
            expires_at=parse_timestamp(data.get("expires_at")),
            uses=data.get("uses"),
            max_uses=data.get("max_uses"),
            max_age=data.get("max_age"),
            temporary=data.get("temporary"),
            created_at=parse_timestamp(data.get("created_at")),
        )


@dataclass
class InviteCreate(Payload):
    """Body for creating a channel invite.

    ``max_age`` is in seconds (0 never expires); ``max_uses`` 0 is unlimited.
    """

    max_age: Optional[int] = None
    max_uses: Optional[int] = None
    temporary: Optional[bool] = None
    unique: Optional[bool] = None
    target_type: Optional[InviteTargetType] = None
    target_user_id: Optional[Snowflake] = None
    target_application_id: Optional[Snowflake] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "max_age": self.max_age,
                "max_uses": self.max_uses,
                "temporary": self.temporary,
                "unique": self.unique,
                "target_type": int(self.target_type) if self.target_type else None,
                "target_user_id": self.target_user_id,
                "target_application_id": self.target_application_id,
            }
        )

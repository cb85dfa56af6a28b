"""Guild, role, user and member wire models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from cordkit.discord.payload import parse_timestamp
from cordkit.discord.permissions import Permissions
from cordkit.discord.snowflake import Snowflake


@dataclass
class UserData:
    id: Snowflake
    username: str
    discriminator: str = "0"
    avatar: Optional[str] = None
    bot: bool = False

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "UserData":
        return cls(
            id=Snowflake(data["id"]),
            username=data["username"],
            discriminator=data.get("discriminator", "0"),
            avatar=data.get("avatar"),
            bot=bool(data.get("bot", False)),
        )


@dataclass
class RoleData:
    id: Snowflake
    name: str
    permissions: Permissions = Permissions.NONE
    position: int = 0

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "RoleData":
        return cls(
            id=Snowflake(data["id"]),
            name=data["name"],
            permissions=Permissions(int(data.get("permissions", 0))),
            position=int(data.get("position", 0)),
        )


@dataclass
class GuildData:
    id: Snowflake
    name: str
    owner_id: Optional[Snowflake] = None
    icon: Optional[str] = None
    roles: List[RoleData] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "GuildData":
        return cls(
            id=Snowflake(data["id"]),
            name=data["name"],
            owner_id=Snowflake.optional(data.get("owner_id")),
            icon=data.get("icon"),
            roles=[RoleData.from_payload(item) for item in data.get("roles") or []],
        )


@dataclass
class MemberData:
    """A guild member.

    ``permissions`` is only present when the API resolved it for us
    (interaction payloads); otherwise it is computed from roles.
    """

    guild_id: Snowflake
    user: UserData
    nick: Optional[str] = None
    role_ids: List[Snowflake] = field(default_factory=list)
    joined_at: Optional[datetime] = None
    permissions: Optional[Permissions] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any], guild_id: Optional[Snowflake] = None) -> "MemberData":
        return cls(
            guild_id=Snowflake.from_raw(guild_id if guild_id is not None else data["guild_id"]),
            user=UserData.from_payload(data["user"]),
            nick=data.get("nick"),
            role_ids=[Snowflake(role_id) for role_id in data.get("roles") or []],
            joined_at=parse_timestamp(data.get("joined_at")),
            permissions=Permissions.from_raw(data.get("permissions")),
        )

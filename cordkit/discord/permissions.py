"""Permission bit flags and channel overwrites."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Dict, Optional

from cordkit.discord.snowflake import Snowflake


class Permissions(IntFlag):
    """Discord permission bits."""

    NONE = 0
    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    STREAM = 1 << 9
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    VIEW_GUILD_INSIGHTS = 1 << 19
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_EMOJIS = 1 << 30
    USE_APPLICATION_COMMANDS = 1 << 31
    REQUEST_TO_SPEAK = 1 << 32

    @classmethod
    def all(cls) -> "Permissions":
        value = cls.NONE
        for flag in cls:
            value |= flag
        return value

    @classmethod
    def from_raw(cls, value: Optional[Any]) -> Optional["Permissions"]:
        """Permissions arrive as decimal strings; ``None`` passes through."""
        if value is None:
            return None
        return cls(int(value))

    def has(self, permissions: "Permissions") -> bool:
        """True when every bit of ``permissions`` is set."""
        return self & permissions == permissions


STAGE_MODERATOR_PERMISSIONS = (
    Permissions.MANAGE_CHANNELS | Permissions.MUTE_MEMBERS | Permissions.MOVE_MEMBERS
)


class OverwriteType(IntEnum):
    ROLE = 0
    MEMBER = 1


@dataclass(frozen=True)
class PermissionOverwrite:
    """A channel-level allow/deny pair for a role or a member."""

    id: Snowflake
    type: OverwriteType
    allow: Permissions = Permissions.NONE
    deny: Permissions = Permissions.NONE

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "PermissionOverwrite":
        return cls(
            id=Snowflake(data["id"]),
            type=OverwriteType(int(data["type"])),
            allow=Permissions(int(data.get("allow", 0))),
            deny=Permissions(int(data.get("deny", 0))),
        )

    def apply(self, permissions: Permissions) -> Permissions:
        return (permissions & ~self.deny) | self.allow

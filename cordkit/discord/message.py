"""Message wire model and message payloads."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from cordkit.discord.guild import UserData
from cordkit.discord.payload import File, Payload, drop_none, parse_timestamp
from cordkit.discord.snowflake import Snowflake


@dataclass
class MessageData:
    id: Snowflake
    channel_id: Snowflake
    content: str = ""
    author: Optional[UserData] = None
    guild_id: Optional[Snowflake] = None
    timestamp: Optional[datetime] = None
    edited_timestamp: Optional[datetime] = None
    pinned: bool = False
    tts: bool = False
    type: int = 0
    flags: int = 0
    webhook_id: Optional[Snowflake] = None
    embeds: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MessageData":
        author = data.get("author")
        return cls(
            id=Snowflake(data["id"]),
            channel_id=Snowflake(data["channel_id"]),
            content=data.get("content", ""),
            author=UserData.from_payload(author) if author else None,
            guild_id=Snowflake.optional(data.get("guild_id")),
            timestamp=parse_timestamp(data.get("timestamp")),
            edited_timestamp=parse_timestamp(data.get("edited_timestamp")),
            pinned=bool(data.get("pinned", False)),
            tts=bool(data.get("tts", False)),
            type=int(data.get("type", 0)),
            flags=int(data.get("flags", 0)),
            webhook_id=Snowflake.optional(data.get("webhook_id")),
            embeds=list(data.get("embeds") or []),
        )


@dataclass
class MessageReference:
    message_id: Snowflake
    channel_id: Optional[Snowflake] = None
    guild_id: Optional[Snowflake] = None
    fail_if_not_exists: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "message_id": self.message_id,
                "channel_id": self.channel_id,
                "guild_id": self.guild_id,
                "fail_if_not_exists": self.fail_if_not_exists,
            }
        )


@dataclass
class MessageCreate(Payload):
    """Body for sending a message to a channel."""

    content: Optional[str] = None
    tts: bool = False
    embeds: List[Dict[str, Any]] = field(default_factory=list)
    allowed_mentions: Optional[Dict[str, Any]] = None
    message_reference: Optional[MessageReference] = None
    flags: Optional[int] = None
    attachments: List[File] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "content": self.content,
                "tts": self.tts or None,
                "embeds": self.embeds or None,
                "allowed_mentions": self.allowed_mentions,
                "message_reference": (
                    self.message_reference.to_dict() if self.message_reference else None
                ),
                "flags": self.flags,
            }
        )

    def files(self) -> List[File]:
        return list(self.attachments)


@dataclass
class MessageUpdate(Payload):
    """Body for editing a message.

    Fields left as ``None`` are not sent and stay unchanged remotely.
    """

    content: Optional[str] = None
    embeds: Optional[List[Dict[str, Any]]] = None
    allowed_mentions: Optional[Dict[str, Any]] = None
    flags: Optional[int] = None
    attachments: List[File] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "content": self.content,
                "embeds": self.embeds,
                "allowed_mentions": self.allowed_mentions,
                "flags": self.flags,
            }
        )

    def files(self) -> List[File]:
        return list(self.attachments)

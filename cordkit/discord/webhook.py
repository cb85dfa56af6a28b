"""Webhook wire models and payloads.

The API sends every webhook kind through one envelope discriminated by
``type``; ``parse_webhook`` unwraps it into the concrete variant.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

from cordkit.discord.guild import UserData
from cordkit.discord.icon import Icon
from cordkit.discord.payload import File, Payload, drop_none
from cordkit.discord.snowflake import Snowflake


class WebhookType(IntEnum):
    INCOMING = 1
    CHANNEL_FOLLOWER = 2
    APPLICATION = 3


@dataclass
class BaseWebhook:
    id: Snowflake
    name: Optional[str] = None
    avatar: Optional[str] = None
    channel_id: Optional[Snowflake] = None
    guild_id: Optional[Snowflake] = None
    application_id: Optional[Snowflake] = None
    user: Optional[UserData] = None

    type = None

    @staticmethod
    def _common_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        user = data.get("user")
        return {
            "id": Snowflake(data["id"]),
            "name": data.get("name"),
            "avatar": data.get("avatar"),
            "channel_id": Snowflake.optional(data.get("channel_id")),
            "guild_id": Snowflake.optional(data.get("guild_id")),
            "application_id": Snowflake.optional(data.get("application_id")),
            "user": UserData.from_payload(user) if user else None,
        }


@dataclass
class IncomingWebhook(BaseWebhook):
    """A webhook that can post messages with its token."""

    token: Optional[str] = None

    type = WebhookType.INCOMING

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "IncomingWebhook":
        return cls(token=data.get("token"), **cls._common_fields(data))


@dataclass
class ChannelFollowerWebhook(BaseWebhook):
    """A webhook that crossposts from a followed news channel."""

    source_guild_id: Optional[Snowflake] = None
    source_guild_name: Optional[str] = None
    source_channel_id: Optional[Snowflake] = None
    source_channel_name: Optional[str] = None

    type = WebhookType.CHANNEL_FOLLOWER

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ChannelFollowerWebhook":
        source_guild = data.get("source_guild") or {}
        source_channel = data.get("source_channel") or {}
        return cls(
            source_guild_id=Snowflake.optional(source_guild.get("id")),
            source_guild_name=source_guild.get("name"),
            source_channel_id=Snowflake.optional(source_channel.get("id")),
            source_channel_name=source_channel.get("name"),
            **cls._common_fields(data),
        )


@dataclass
class ApplicationWebhook(BaseWebhook):
    """A webhook used by interactions."""

    type = WebhookType.APPLICATION

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ApplicationWebhook":
        return cls(**cls._common_fields(data))


Webhook = Union[IncomingWebhook, ChannelFollowerWebhook, ApplicationWebhook]

_WEBHOOK_TYPES = {
    WebhookType.INCOMING: IncomingWebhook,
    WebhookType.CHANNEL_FOLLOWER: ChannelFollowerWebhook,
    WebhookType.APPLICATION: ApplicationWebhook,
}


def parse_webhook(data: Dict[str, Any]) -> Webhook:
    """Unwrap a webhook envelope into its concrete variant.

    Raises:
        ValueError: If ``type`` is not a known webhook type.
    """
    webhook_type = WebhookType(int(data["type"]))
    return _WEBHOOK_TYPES[webhook_type].from_payload(data)


# =============================================================================
# Payloads
# =============================================================================

@dataclass
class WebhookUpdate(Payload):
    """Body for editing a webhook with bot authorization.

    An ``Icon`` with empty data clears the avatar.
    """

    name: Optional[str] = None
    avatar: Optional[Icon] = None
    channel_id: Optional[Snowflake] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "name": self.name,
                "avatar": str(self.avatar) if self.avatar is not None else None,
                "channel_id": self.channel_id,
            }
        )


@dataclass
class WebhookUpdateWithToken(Payload):
    """Body for editing a webhook through its token; the channel cannot change."""

    name: Optional[str] = None
    avatar: Optional[Icon] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "name": self.name,
                "avatar": str(self.avatar) if self.avatar is not None else None,
            }
        )


@dataclass
class WebhookMessageCreate(Payload):
    content: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    tts: bool = False
    embeds: List[Dict[str, Any]] = field(default_factory=list)
    allowed_mentions: Optional[Dict[str, Any]] = None
    flags: Optional[int] = None
    thread_name: Optional[str] = None
    attachments: List[File] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "content": self.content,
                "username": self.username,
                "avatar_url": self.avatar_url,
                "tts": self.tts or None,
                "embeds": self.embeds or None,
                "allowed_mentions": self.allowed_mentions,
                "flags": self.flags,
                "thread_name": self.thread_name,
            }
        )

    def files(self) -> List[File]:
        return list(self.attachments)


@dataclass
class WebhookMessageUpdate(Payload):
    content: Optional[str] = None
    embeds: Optional[List[Dict[str, Any]]] = None
    allowed_mentions: Optional[Dict[str, Any]] = None
    attachments: List[File] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "content": self.content,
                "embeds": self.embeds,
                "allowed_mentions": self.allowed_mentions,
            }
        )

    def files(self) -> List[File]:
        return list(self.attachments)


@dataclass
class RawPayload(Payload):
    """A pre-built JSON body, e.g. a Slack or GitHub formatted webhook payload."""

    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.data)

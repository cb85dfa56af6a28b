"""Stage instance wire model and payloads."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional

from cordkit.discord.payload import Payload, drop_none
from cordkit.discord.snowflake import Snowflake


class PrivacyLevel(IntEnum):
    PUBLIC = 1
    GUILD_ONLY = 2


@dataclass
class StageInstanceData:
    id: Snowflake
    guild_id: Snowflake
    channel_id: Snowflake
    topic: str
    privacy_level: PrivacyLevel = PrivacyLevel.GUILD_ONLY
    discoverable_disabled: bool = False

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "StageInstanceData":
        return cls(
            id=Snowflake(data["id"]),
            guild_id=Snowflake(data["guild_id"]),
            channel_id=Snowflake(data["channel_id"]),
            topic=data["topic"],
            privacy_level=PrivacyLevel(int(data.get("privacy_level", PrivacyLevel.GUILD_ONLY))),
            discoverable_disabled=bool(data.get("discoverable_disabled", False)),
        )


@dataclass
class StageInstanceCreate(Payload):
    """Body for opening a stage instance.

    ``channel_id`` may be left unset when created through a stage channel.
    """

    topic: str
    channel_id: Optional[Snowflake] = None
    privacy_level: Optional[PrivacyLevel] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "channel_id": self.channel_id,
                "topic": self.topic,
                "privacy_level": int(self.privacy_level) if self.privacy_level else None,
            }
        )


@dataclass
class StageInstanceUpdate(Payload):
    topic: Optional[str] = None
    privacy_level: Optional[PrivacyLevel] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "topic": self.topic,
                "privacy_level": int(self.privacy_level) if self.privacy_level else None,
            }
        )

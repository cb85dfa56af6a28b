"""Client-bound entities, caches and the channel facade."""

from cordkit.core.cache import Caches, CacheStrategy, EntityCache
from cordkit.core.capabilities import (
    Category,
    DMChannel,
    GuildChannel,
    MessageChannel,
    NewsChannel,
    StageChannel,
    StoreChannel,
    TextChannel,
    VoiceChannel,
)
from cordkit.core.channel import Channel
from cordkit.core.client import AudioController, Client
from cordkit.core.entities import Guild, Member, Message, StageInstance, User
from cordkit.core.entity_builder import EntityBuilder
from cordkit.core.invite import Invite

__all__ = [
    "AudioController",
    "CacheStrategy",
    "Caches",
    "Category",
    "Channel",
    "Client",
    "DMChannel",
    "EntityBuilder",
    "EntityCache",
    "Guild",
    "GuildChannel",
    "Invite",
    "Member",
    "Message",
    "MessageChannel",
    "NewsChannel",
    "StageChannel",
    "StageInstance",
    "StoreChannel",
    "TextChannel",
    "User",
    "VoiceChannel",
]

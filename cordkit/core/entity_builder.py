"""Turns wire data into client-bound entities and feeds the caches."""

import logging
from typing import TYPE_CHECKING, Optional

from cordkit.core.cache import CacheStrategy
from cordkit.core.channel import Channel
from cordkit.core.entities import Guild, Member, Message, StageInstance, User
from cordkit.core.invite import Invite
from cordkit.discord.channel import ChannelData
from cordkit.discord.guild import GuildData, MemberData, UserData
from cordkit.discord.invite import InviteData
from cordkit.discord.message import MessageData
from cordkit.discord.stage_instance import StageInstanceData

if TYPE_CHECKING:
    from cordkit.core.client import Client

logger = logging.getLogger(__name__)


class EntityBuilder:
    """Builds entities for one client.

    Every ``create_*`` method takes a ``CacheStrategy``; the entity is written
    to the matching cache only when the strategy says so for this client.
    """

    def __init__(self, client: "Client"):
        self.client = client

    def _should_cache(self, cache_strategy: CacheStrategy) -> bool:
        return cache_strategy.should_cache(self.client)

    def create_user(self, data: UserData, cache_strategy: CacheStrategy) -> User:
        user = User(self.client, data)
        if self._should_cache(cache_strategy):
            self.client.caches.users.put(user.id, user)
        return user

    def create_guild(self, data: GuildData, cache_strategy: CacheStrategy) -> Guild:
        guild = Guild(self.client, data)
        if self._should_cache(cache_strategy):
            self.client.caches.guilds.put(guild.id, guild)
        return guild

    def create_member(self, data: MemberData, cache_strategy: CacheStrategy) -> Member:
        member = Member(self.client, data, self.create_user(data.user, cache_strategy))
        if self._should_cache(cache_strategy):
            self.client.caches.members.put((member.guild_id, member.user.id), member)
        return member

    def create_channel(self, data: ChannelData, cache_strategy: CacheStrategy) -> Channel:
        # A refreshed channel keeps the stage instance it was last seen with.
        previous = self.client.caches.channels.get(data.id)
        stage_instance_id = previous.stage_instance_id if previous is not None else None
        channel = Channel(self.client, data, stage_instance_id)
        if self._should_cache(cache_strategy):
            self.client.caches.channels.put(channel.id, channel)
        return channel

    def create_message(self, data: MessageData, cache_strategy: CacheStrategy) -> Message:
        author: Optional[User] = None
        if data.author is not None:
            author = self.create_user(data.author, cache_strategy)
        message = Message(self.client, data, author)
        if self._should_cache(cache_strategy):
            self.client.caches.messages.put(message.id, message)
        return message

    def create_stage_instance(
        self, data: StageInstanceData, cache_strategy: CacheStrategy
    ) -> StageInstance:
        stage_instance = StageInstance(self.client, data)
        if self._should_cache(cache_strategy):
            self.client.caches.stage_instances.put(stage_instance.id, stage_instance)
            channel = self.client.caches.channels.get(data.channel_id)
            if channel is not None:
                channel.stage_instance_id = stage_instance.id
            else:
                logger.debug("Stage channel %s not cached", data.channel_id)
        return stage_instance

    def create_invite(self, data: InviteData, cache_strategy: CacheStrategy) -> Invite:
        inviter = self.create_user(data.inviter, cache_strategy) if data.inviter else None
        target_user = (
            self.create_user(data.target_user, cache_strategy) if data.target_user else None
        )
        return Invite(self.client, data, inviter, target_user)


__all__ = ["CacheStrategy", "EntityBuilder"]

"""Feature tests for entity construction and cache population."""

import pytest

from cordkit.core.cache import CacheStrategy
from cordkit.core.channel import Channel
from cordkit.core.entities import Guild, Member, Message, StageInstance, User
from cordkit.core.invite import Invite
from cordkit.discord.channel import ChannelData, ChannelType
from cordkit.discord.guild import GuildData, MemberData, RoleData, UserData
from cordkit.discord.invite import InviteData
from cordkit.discord.message import MessageData
from cordkit.discord.stage_instance import StageInstanceData

USER = UserData(id="3", username="soye")


class TestCacheStrategyHandling:
    """Entities are cached according to the strategy passed in."""

    def test_yes_caches(self, client):
        user = client.entity_builder.create_user(USER, CacheStrategy.YES)
        assert isinstance(user, User)
        assert client.caches.users.get("3") is user

    def test_no_skips_cache(self, client):
        client.entity_builder.create_user(USER, CacheStrategy.NO)
        assert client.caches.users.get("3") is None

    def test_no_ws_caches_without_gateway(self, client):
        client.entity_builder.create_user(USER, CacheStrategy.NO_WS)
        assert client.caches.users.get("3") is not None

    def test_no_ws_skips_with_gateway(self, client):
        client.gateway_feeds_cache = True
        client.entity_builder.create_user(USER, CacheStrategy.NO_WS)
        assert client.caches.users.get("3") is None


class TestCreate:
    def test_create_guild(self, client):
        data = GuildData(id="1", name="Guild", roles=[RoleData(id="1", name="@everyone")])
        guild = client.entity_builder.create_guild(data, CacheStrategy.YES)

        assert isinstance(guild, Guild)
        assert guild.everyone_role.name == "@everyone"
        assert client.caches.guilds.get("1") is guild

    def test_create_member(self, client):
        data = MemberData(guild_id="1", user=USER)
        member = client.entity_builder.create_member(data, CacheStrategy.YES)

        assert isinstance(member, Member)
        assert member.user.id == "3"
        assert client.caches.member("1", "3") is member
        assert client.caches.users.get("3") is member.user

    def test_create_message_with_author(self, client):
        data = MessageData(id="4", channel_id="2", author=USER)
        message = client.entity_builder.create_message(data, CacheStrategy.YES)

        assert isinstance(message, Message)
        assert message.author.username == "soye"
        assert client.caches.messages.get("4") is message

    def test_create_message_without_author(self, client):
        message = client.entity_builder.create_message(
            MessageData(id="4", channel_id="2"), CacheStrategy.NO
        )
        assert message.author is None

    def test_create_channel(self, client):
        data = ChannelData(id="2", type=ChannelType.GUILD_TEXT, guild_id="1")
        channel = client.entity_builder.create_channel(data, CacheStrategy.YES)

        assert isinstance(channel, Channel)
        assert client.caches.channels.get("2") is channel

    def test_create_channel_keeps_stage_instance(self, client):
        """A refreshed stage channel still knows its live stage instance."""
        data = ChannelData(id="2", type=ChannelType.GUILD_STAGE_VOICE, guild_id="1")
        first = client.entity_builder.create_channel(data, CacheStrategy.YES)
        first.stage_instance_id = "7"

        second = client.entity_builder.create_channel(data, CacheStrategy.YES)

        assert second is not first
        assert second.stage_instance_id == "7"

    def test_create_stage_instance_links_channel(self, client):
        channel = client.entity_builder.create_channel(
            ChannelData(id="2", type=ChannelType.GUILD_STAGE_VOICE, guild_id="1"),
            CacheStrategy.YES,
        )
        data = StageInstanceData(id="7", guild_id="1", channel_id="2", topic="Q&A")

        instance = client.entity_builder.create_stage_instance(data, CacheStrategy.YES)

        assert isinstance(instance, StageInstance)
        assert channel.stage_instance_id == "7"
        assert channel.stage_instance is instance

    def test_create_stage_instance_uncached_channel(self, client):
        data = StageInstanceData(id="7", guild_id="1", channel_id="2", topic="Q&A")
        instance = client.entity_builder.create_stage_instance(data, CacheStrategy.YES)
        assert client.caches.stage_instances.get("7") is instance

    def test_create_invite(self, client):
        data = InviteData(code="abc", inviter=USER, target_user=UserData(id="8", username="x"))
        invite = client.entity_builder.create_invite(data, CacheStrategy.YES)

        assert isinstance(invite, Invite)
        assert invite.inviter.id == "3"
        assert invite.target_user.id == "8"
        assert client.caches.users.get("8") is invite.target_user

    @pytest.mark.parametrize("strategy", list(CacheStrategy))
    def test_entities_bound_to_client(self, client, strategy):
        message = client.entity_builder.create_message(
            MessageData(id="4", channel_id="2"), strategy
        )
        assert message.client is client

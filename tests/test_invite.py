"""Feature tests for the Invite entity."""

import logging

import pytest

from cordkit.core.entities import Guild
from cordkit.core.invite import Invite
from cordkit.discord.guild import GuildData
from cordkit.discord.invite import InviteData, InviteGuild


class TestInviteUrl:
    """Tests for the derived invite link."""

    def test_url_from_code(self, client):
        invite = Invite(client, InviteData(code="abc123"))
        assert invite.url == "https://discord.gg/abc123"

    def test_url_is_stable_and_offline(self, client):
        """Repeated reads give the same value and never reach a service."""
        invite = Invite(client, InviteData(code="abc123"))

        assert invite.url == invite.url
        assert client.rest_services.invites.mock_calls == []

    def test_empty_code_gives_empty_url(self, client, caplog):
        invite = Invite(client, InviteData(code=""))

        with caplog.at_level(logging.DEBUG, logger="cordkit.core.invite"):
            assert invite.url == ""

        assert any("invite URL" in record.message for record in caplog.records)

    def test_code_is_escaped(self, client):
        assert Invite(client, InviteData(code="a/b")).url == "https://discord.gg/a%2Fb"


class TestInvite:
    def test_guild_lookup(self, client):
        data = InviteData(code="abc", guild=InviteGuild(id="1", name="Guild"))
        invite = Invite(client, data)
        assert invite.guild is None

        guild = Guild(client, GuildData(id="1", name="Guild"))
        client.caches.guilds.put(guild.id, guild)
        assert invite.guild is guild

    def test_guild_absent(self, client):
        assert Invite(client, InviteData(code="abc")).guild is None

    @pytest.mark.asyncio
    async def test_delete(self, client):
        invite = Invite(client, InviteData(code="abc"))

        assert await invite.delete() is None

        client.rest_services.invites.delete_invite.assert_awaited_once_with("abc", options=None)

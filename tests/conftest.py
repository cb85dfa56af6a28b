"""Pytest configuration and fixtures for cordkit tests."""

from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from cordkit.config import ClientConfig
from cordkit.core.cache import Caches
from cordkit.core.channel import Channel
from cordkit.core.client import Client
from cordkit.discord.channel import ChannelData, ChannelType
from cordkit.discord.snowflake import Snowflake

GUILD_ID = Snowflake("100000000000000001")
CHANNEL_ID = Snowflake("200000000000000002")
USER_ID = Snowflake("300000000000000003")
MESSAGE_ID = Snowflake("400000000000000004")


@pytest.fixture
def message_payload() -> Dict[str, Any]:
    """A minimal message object as the API returns it."""
    return {
        "id": str(MESSAGE_ID),
        "channel_id": str(CHANNEL_ID),
        "content": "hello",
        "author": {"id": str(USER_ID), "username": "soye"},
        "timestamp": "2021-06-01T12:00:00.000000+00:00",
    }


@pytest.fixture
def invite_payload() -> Dict[str, Any]:
    """An invite object with guild, channel and inviter."""
    return {
        "code": "abc123",
        "guild": {"id": str(GUILD_ID), "name": "Test Guild"},
        "channel": {"id": str(CHANNEL_ID), "type": 0, "name": "general"},
        "inviter": {"id": str(USER_ID), "username": "soye"},
    }


@pytest.fixture
def config():
    """Client config with a token and fast transport retries."""
    return ClientConfig(
        token="test-token",
        max_retries=2,
        retry_backoff_base=0.0,
        retry_backoff_max=0.0,
    )


@pytest.fixture
def mock_rest_client():
    """A RestClient stand-in; tests set ``do.return_value`` as needed."""
    rest_client = MagicMock()
    rest_client.do = AsyncMock(return_value=None)
    rest_client.close = AsyncMock()
    return rest_client


@pytest.fixture
def mock_services():
    """A RestServices stand-in with one AsyncMock per service method."""
    services = MagicMock()
    services.close = AsyncMock()
    for service in ("channels", "invites", "stage_instances", "voice", "webhooks"):
        setattr(services, service, AsyncMock())
    return services


@pytest.fixture
def client(config, mock_services):
    """A client whose services never touch the network."""
    return Client(config, rest_services=mock_services, caches=Caches())


@pytest.fixture
def make_channel(client):
    """Factory for channels of a given type bound to ``client``."""

    def _make(
        channel_type: ChannelType,
        channel_id: Snowflake = CHANNEL_ID,
        guild_id: Optional[Snowflake] = GUILD_ID,
        **fields: Any,
    ) -> Channel:
        if channel_type == ChannelType.DM:
            guild_id = None
        data = ChannelData(id=channel_id, type=channel_type, guild_id=guild_id, **fields)
        return Channel(client, data)

    return _make

"""Wire models: the shapes the API sends and accepts."""

from cordkit.discord.channel import ChannelData, ChannelType
from cordkit.discord.guild import GuildData, MemberData, RoleData, UserData
from cordkit.discord.icon import Icon, IconType
from cordkit.discord.invite import (
    InviteChannel,
    InviteCreate,
    InviteData,
    InviteGuild,
    InviteTargetType,
)
from cordkit.discord.message import MessageCreate, MessageData, MessageReference, MessageUpdate
from cordkit.discord.payload import File, Payload
from cordkit.discord.permissions import (
    STAGE_MODERATOR_PERMISSIONS,
    OverwriteType,
    PermissionOverwrite,
    Permissions,
)
from cordkit.discord.snowflake import Snowflake
from cordkit.discord.stage_instance import (
    PrivacyLevel,
    StageInstanceCreate,
    StageInstanceData,
    StageInstanceUpdate,
)
from cordkit.discord.voice import VoiceRegion
from cordkit.discord.webhook import (
    ApplicationWebhook,
    ChannelFollowerWebhook,
    IncomingWebhook,
    RawPayload,
    Webhook,
    WebhookMessageCreate,
    WebhookMessageUpdate,
    WebhookType,
    WebhookUpdate,
    WebhookUpdateWithToken,
    parse_webhook,
)

__all__ = [
    "ApplicationWebhook",
    "ChannelData",
    "ChannelFollowerWebhook",
    "ChannelType",
    "File",
    "GuildData",
    "Icon",
    "IconType",
    "IncomingWebhook",
    "InviteChannel",
    "InviteCreate",
    "InviteData",
    "InviteGuild",
    "InviteTargetType",
    "MemberData",
    "MessageCreate",
    "MessageData",
    "MessageReference",
    "MessageUpdate",
    "OverwriteType",
    "Payload",
    "PermissionOverwrite",
    "Permissions",
    "PrivacyLevel",
    "RawPayload",
    "RoleData",
    "STAGE_MODERATOR_PERMISSIONS",
    "Snowflake",
    "StageInstanceCreate",
    "StageInstanceData",
    "StageInstanceUpdate",
    "UserData",
    "VoiceRegion",
    "Webhook",
    "WebhookMessageCreate",
    "WebhookMessageUpdate",
    "WebhookType",
    "WebhookUpdate",
    "WebhookUpdateWithToken",
    "parse_webhook",
]

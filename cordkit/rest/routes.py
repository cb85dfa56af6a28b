"""Named route templates for the endpoints cordkit talks to."""

from cordkit.rest.route import Route

INVITE_BASE_URL = "https://discord.gg"

# Channels
GET_CHANNEL = Route("GET", "/channels/{channel_id}")
GET_MESSAGE = Route("GET", "/channels/{channel_id}/messages/{message_id}")
CREATE_MESSAGE = Route("POST", "/channels/{channel_id}/messages")
UPDATE_MESSAGE = Route("PATCH", "/channels/{channel_id}/messages/{message_id}")
DELETE_MESSAGE = Route("DELETE", "/channels/{channel_id}/messages/{message_id}")
BULK_DELETE_MESSAGES = Route("POST", "/channels/{channel_id}/messages/bulk-delete")
CROSSPOST_MESSAGE = Route("POST", "/channels/{channel_id}/messages/{message_id}/crosspost")

# Invites
GET_INVITE = Route(
    "GET", "/invites/{code}", queries=frozenset({"with_counts", "with_expiration"})
)
CREATE_INVITE = Route("POST", "/channels/{channel_id}/invites")
DELETE_INVITE = Route("DELETE", "/invites/{code}")
GET_GUILD_INVITES = Route("GET", "/guilds/{guild_id}/invites")
GET_CHANNEL_INVITES = Route("GET", "/channels/{channel_id}/invites")
INVITE_URL = Route("GET", "/{code}", base_url=INVITE_BASE_URL)

# Voice
GET_VOICE_REGIONS = Route("GET", "/voice/regions")

# Stage instances
GET_STAGE_INSTANCE = Route("GET", "/stage-instances/{channel_id}")
CREATE_STAGE_INSTANCE = Route("POST", "/stage-instances")
UPDATE_STAGE_INSTANCE = Route("PATCH", "/stage-instances/{channel_id}")
DELETE_STAGE_INSTANCE = Route("DELETE", "/stage-instances/{channel_id}")

# Webhooks
GET_WEBHOOK = Route("GET", "/webhooks/{webhook_id}")
UPDATE_WEBHOOK = Route("PATCH", "/webhooks/{webhook_id}")
DELETE_WEBHOOK = Route("DELETE", "/webhooks/{webhook_id}")
GET_WEBHOOK_WITH_TOKEN = Route("GET", "/webhooks/{webhook_id}/{webhook_token}")
UPDATE_WEBHOOK_WITH_TOKEN = Route("PATCH", "/webhooks/{webhook_id}/{webhook_token}")
DELETE_WEBHOOK_WITH_TOKEN = Route("DELETE", "/webhooks/{webhook_id}/{webhook_token}")

_WEBHOOK_CREATE_QUERIES = frozenset({"wait", "thread_id"})

CREATE_WEBHOOK_MESSAGE = Route(
    "POST", "/webhooks/{webhook_id}/{webhook_token}", queries=_WEBHOOK_CREATE_QUERIES
)
CREATE_WEBHOOK_MESSAGE_SLACK = Route(
    "POST", "/webhooks/{webhook_id}/{webhook_token}/slack", queries=_WEBHOOK_CREATE_QUERIES
)
CREATE_WEBHOOK_MESSAGE_GITHUB = Route(
    "POST", "/webhooks/{webhook_id}/{webhook_token}/github", queries=_WEBHOOK_CREATE_QUERIES
)
GET_WEBHOOK_MESSAGE = Route(
    "GET",
    "/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}",
    queries=frozenset({"thread_id"}),
)
UPDATE_WEBHOOK_MESSAGE = Route(
    "PATCH",
    "/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}",
    queries=frozenset({"thread_id"}),
)
DELETE_WEBHOOK_MESSAGE = Route(
    "DELETE",
    "/webhooks/{webhook_id}/{webhook_token}/messages/{message_id}",
    queries=frozenset({"thread_id"}),
)

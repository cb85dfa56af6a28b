"""Invite entity."""

import logging
from typing import TYPE_CHECKING, Optional

from cordkit.core.entities import Guild, User
from cordkit.discord.invite import InviteData
from cordkit.exceptions import RouteCompilationException
from cordkit.rest import routes
from cordkit.rest.client import RequestOptions

if TYPE_CHECKING:
    from cordkit.core.client import Client

logger = logging.getLogger(__name__)


class Invite:
    def __init__(
        self,
        client: "Client",
        data: InviteData,
        inviter: Optional[User] = None,
        target_user: Optional[User] = None,
    ):
        self.client = client
        self.data = data
        self.inviter = inviter
        self.target_user = target_user

    @property
    def code(self) -> str:
        return self.data.code

    @property
    def url(self) -> str:
        """The public invite link, e.g. ``https://discord.gg/{code}``.

        Derived from the code on every access. A code that cannot be put in
        the link yields an empty string instead of an error.
        """
        try:
            return routes.INVITE_URL.compile(None, self.code).url()
        except RouteCompilationException as e:
            logger.debug("Cannot build invite URL: %s", e)
            return ""

    @property
    def guild(self) -> Optional[Guild]:
        if self.data.guild is None:
            return None
        return self.client.caches.guilds.get(self.data.guild.id)

    async def delete(self, *, options: Optional[RequestOptions] = None) -> None:
        await self.client.rest_services.invites.delete_invite(self.code, options=options)

    def __repr__(self) -> str:
        return f"<Invite code={self.code!r}>"

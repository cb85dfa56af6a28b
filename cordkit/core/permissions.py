"""Effective permission computation for members in channels."""

from typing import Iterable, Optional

from cordkit.discord.permissions import OverwriteType, PermissionOverwrite, Permissions


def compute_base_permissions(guild, member) -> Permissions:
    """Guild-wide permissions: owner, then @everyone plus the member's roles."""
    if guild.owner_id is not None and guild.owner_id == member.user.id:
        return Permissions.all()

    roles = guild.roles
    everyone = roles.get(guild.id)
    permissions = everyone.permissions if everyone is not None else Permissions.NONE
    for role_id in member.role_ids:
        role = roles.get(role_id)
        if role is not None:
            permissions |= role.permissions

    if permissions & Permissions.ADMINISTRATOR:
        return Permissions.all()
    return permissions


def compute_overwrites(
    base: Permissions,
    guild_id,
    member,
    overwrites: Iterable[PermissionOverwrite],
) -> Permissions:
    """Apply channel overwrites in API order: @everyone, roles, then the member."""
    if base & Permissions.ADMINISTRATOR:
        return Permissions.all()

    by_id = {overwrite.id: overwrite for overwrite in overwrites}
    permissions = base

    everyone = by_id.get(guild_id)
    if everyone is not None:
        permissions = everyone.apply(permissions)

    allow = Permissions.NONE
    deny = Permissions.NONE
    for role_id in member.role_ids:
        overwrite = by_id.get(role_id)
        if overwrite is not None and overwrite.type == OverwriteType.ROLE:
            allow |= overwrite.allow
            deny |= overwrite.deny
    permissions = (permissions & ~deny) | allow

    member_overwrite: Optional[PermissionOverwrite] = by_id.get(member.user.id)
    if member_overwrite is not None and member_overwrite.type == OverwriteType.MEMBER:
        permissions = member_overwrite.apply(permissions)

    return permissions

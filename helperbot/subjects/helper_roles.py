"""
Naming conventions linking subjects, helper roles and forum threads.

A subject ``Biology`` with emoji ``🧬`` owns the forum channel ``🧬-Biology``
and the role ``biology-helper``.
"""

from dataclasses import dataclass
from typing import List, Optional

import discord

from ..config import BotConfig
from ..utils.text_utils import normalize_subject_name


@dataclass(frozen=True)
class HelperRoleOption:
    """A helper role as presented in the selection prompt."""
    id: int
    role: str
    subject: str


def helper_role_name(subject_name: str, suffix: str) -> str:
    """Role name for a subject, e.g. ``biology-helper``."""
    return f"{subject_name.lower()}{suffix}"


def forum_channel_name(subject_name: str, emoji: str) -> str:
    """Forum channel name for a subject, e.g. ``🧬-Biology``."""
    return f"{emoji}-{subject_name}"


def subject_label(role_name: str, suffix: str) -> str:
    """Human-readable subject label for a helper role name.

    >>> subject_label("biology-helper", "-helper")
    'Biology'
    """
    if role_name.endswith(suffix):
        role_name = role_name[:-len(suffix)]
    return role_name[:1].upper() + role_name[1:]


def list_helper_roles(guild: discord.Guild, suffix: str) -> List[HelperRoleOption]:
    """All roles following the helper naming convention, sorted by subject."""
    options = [
        HelperRoleOption(id=role.id, role=role.name, subject=subject_label(role.name, suffix))
        for role in guild.roles
        if role.name.endswith(suffix) and len(role.name) > len(suffix)
    ]
    return sorted(options, key=lambda option: option.subject.lower())


def forum_subject_name(forum_name: str) -> str:
    """Strip the ``{emoji}-`` prefix from a subject forum name."""
    _, sep, rest = forum_name.partition("-")
    return rest if sep else forum_name


def find_helper_role_for_forum(
    guild: discord.Guild, forum: discord.abc.GuildChannel, suffix: str
) -> Optional[discord.Role]:
    """Return the helper role owned by the subject of ``forum``, if any."""
    wanted = normalize_subject_name(forum_subject_name(forum.name))
    if not wanted:
        return None
    for role in guild.roles:
        if not role.name.endswith(suffix):
            continue
        if normalize_subject_name(role.name[:-len(suffix)]) == wanted:
            return role
    return None


def thread_helper_role(
    channel: Optional[discord.abc.Messageable], guild: discord.Guild, config: BotConfig
) -> Optional[discord.Role]:
    """Return the helper role for a subject forum thread.

    The channel must be a thread whose parent is a forum inside the subject
    category, and the forum's subject must have a helper role.
    """
    if not isinstance(channel, discord.Thread):
        return None
    forum = channel.parent
    if not isinstance(forum, discord.ForumChannel):
        return None
    if forum.category is None or forum.category.name != config.category_name:
        return None
    return find_helper_role_for_forum(guild, forum, config.helper_role_suffix)


def is_helper_thread(
    channel: Optional[discord.abc.Messageable], guild: discord.Guild, config: BotConfig
) -> bool:
    """Whether ``channel`` is a thread whose subject has a helper role."""
    return thread_helper_role(channel, guild, config) is not None

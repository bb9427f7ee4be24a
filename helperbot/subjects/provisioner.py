"""
Creation of subjects: one forum channel plus one helper role each.
"""

from dataclasses import dataclass
from typing import Optional

import discord

from ..config import BotConfig
from ..utils.logging import logger
from ..utils.text_utils import normalize_subject_name
from .category import CategoryResolver
from .errors import DuplicateSubjectError
from .helper_roles import forum_channel_name, helper_role_name
from .validation import SubjectOptions


@dataclass
class ProvisionedSubject:
    """The resources created for a new subject."""
    forum: discord.ForumChannel
    role: discord.Role


class SubjectProvisioner:
    """Creates subject forums and helper roles in a guild."""

    def __init__(
        self,
        guild: discord.Guild,
        config: BotConfig,
        resolver: Optional[CategoryResolver] = None
    ) -> None:
        self.guild = guild
        self.config = config
        self.resolver = resolver or CategoryResolver(guild, config)

    async def is_subject_name_unique(self, subject_name: str) -> bool:
        """Check that no channel in the subject category contains the name.

        This is a case-insensitive substring match on normalized names, so
        ``Math`` collides with an existing ``calculus-math-study`` channel and
        ``Computer Science`` with ``💻-computer-science``.
        """
        category_id = await self.resolver.resolve_category_id()
        needle = normalize_subject_name(subject_name)
        return not any(
            getattr(channel, "category_id", None) == category_id
            and needle in normalize_subject_name(channel.name)
            for channel in self.guild.channels
        )

    async def create_subject(self, options: SubjectOptions) -> ProvisionedSubject:
        """Create the forum channel and helper role for a subject.

        Nothing is rolled back: if role creation fails the forum is left in
        place and the error propagates.

        Raises:
            DuplicateSubjectError: If the subject name is already taken.
            discord.HTTPException: If a Discord API call fails.
        """
        if not await self.is_subject_name_unique(options.name):
            raise DuplicateSubjectError(options.name)

        category = await self.resolver.resolve_category()
        forum = await self.guild.create_forum(
            forum_channel_name(options.name, options.emoji),
            category=category,
            reason=f"New subject: {options.name}"
        )
        logger.info(f"Created forum '{forum.name}' ({forum.id}) for subject '{options.name}'")

        try:
            role = await self.guild.create_role(
                name=helper_role_name(options.name, self.config.helper_role_suffix),
                colour=options.color,
                mentionable=True,
                reason=f"Helpers for subject: {options.name}"
            )
        except discord.HTTPException as e:
            logger.error(f"Role creation failed for subject '{options.name}', forum {forum.id} left without a role: {e}")
            raise
        logger.info(f"Created role '{role.name}' ({role.id}) for subject '{options.name}'")

        return ProvisionedSubject(forum=forum, role=role)

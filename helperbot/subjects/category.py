"""
Find-or-create for the category that groups all subject channels.
"""

from typing import Optional

import discord

from ..config import BotConfig
from ..utils.logging import logger


class CategoryResolver:
    """Resolves the subject category for one request.

    The resolved category is memoized on the instance only; build a new
    resolver per request so deleted or renamed categories are picked up.

    Not safe under concurrent use: two resolutions that both miss will both
    create a category, and later lookups pick whichever the cache lists first.
    """

    def __init__(self, guild: discord.Guild, config: BotConfig) -> None:
        self.guild = guild
        self.category_name = config.category_name
        self._category: Optional[discord.CategoryChannel] = None

    def find_category(self) -> Optional[discord.CategoryChannel]:
        """Return the existing subject category, or None."""
        for channel in self.guild.channels:
            if channel.type == discord.ChannelType.category and channel.name == self.category_name:
                return channel
        return None

    async def resolve_category(self) -> discord.CategoryChannel:
        """Return the subject category, creating it on first use."""
        if self._category is not None:
            return self._category

        category = self.find_category()
        if category is None:
            category = await self.guild.create_category(
                self.category_name, reason="Subject category did not exist"
            )
            logger.info(f"Created subject category '{self.category_name}' ({category.id}) in guild {self.guild.id}")

        self._category = category
        return category

    async def resolve_category_id(self) -> int:
        """Return the identifier of the subject category, creating it on first use."""
        category = await self.resolve_category()
        return category.id

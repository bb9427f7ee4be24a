"""
Shared factories for mocked Discord guild objects.
"""

from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from helperbot.config import BotConfig


def make_role(role_id: int, name: str) -> MagicMock:
    """Create a mock role with id, name and mention."""
    role = MagicMock(spec=discord.Role)
    role.id = role_id
    role.name = name
    role.mention = f"<@&{role_id}>"
    return role


def make_channel(
    channel_id: int,
    name: str,
    channel_type: discord.ChannelType = discord.ChannelType.text,
    category_id: Optional[int] = None
) -> MagicMock:
    """Create a mock guild channel."""
    channel = MagicMock()
    channel.id = channel_id
    channel.name = name
    channel.type = channel_type
    channel.category_id = category_id
    channel.mention = f"<#{channel_id}>"
    return channel


def make_guild(channels: Optional[List] = None, roles: Optional[List] = None) -> MagicMock:
    """Create a mock guild whose create_* calls add to its channel/role lists."""
    guild = MagicMock()
    guild.id = 999
    guild.channels = list(channels or [])
    guild.roles = list(roles or [])
    guild.get_role = lambda role_id: next((r for r in guild.roles if r.id == role_id), None)

    next_id = iter(range(1000, 2000))

    async def create_category(name, **kwargs):
        category = make_channel(next(next_id), name, discord.ChannelType.category)
        guild.channels.append(category)
        return category

    async def create_forum(name, category=None, **kwargs):
        forum = make_channel(
            next(next_id), name, discord.ChannelType.forum,
            category_id=category.id if category else None
        )
        guild.channels.append(forum)
        return forum

    async def create_role(name, **kwargs):
        role = make_role(next(next_id), name)
        role.colour = kwargs.get("colour")
        guild.roles.append(role)
        return role

    guild.create_category = AsyncMock(side_effect=create_category)
    guild.create_forum = AsyncMock(side_effect=create_forum)
    guild.create_role = AsyncMock(side_effect=create_role)
    return guild


@pytest.fixture
def config():
    """A configuration with the default subject settings and a short timeout."""
    return BotConfig(selection_timeout_seconds=0.2)


def make_thread(forum_name: str = "🧬-biology", category_name: str = "Subjects") -> MagicMock:
    """Create a mock thread inside a forum inside a category."""
    category = MagicMock(spec=discord.CategoryChannel)
    category.name = category_name
    forum = MagicMock(spec=discord.ForumChannel)
    forum.name = forum_name
    forum.category = category
    thread = MagicMock(spec=discord.Thread)
    thread.id = 555
    thread.parent = forum
    return thread

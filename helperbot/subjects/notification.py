"""
The /whip-slaves flow: ping a subject's helpers from one of its forum threads.
"""

import discord

from ..config import BotConfig
from ..utils.logging import logger
from ..utils.message_templates import MessageTemplates
from .helper_roles import thread_helper_role


async def ping_helpers(interaction: discord.Interaction, config: BotConfig) -> bool:
    """Mention the helper role of the thread the command was used in.

    Returns:
        True if helpers were pinged, False if the channel is not a subject thread.
    """
    await interaction.response.defer()

    role = thread_helper_role(interaction.channel, interaction.guild, config)
    if role is None:
        await interaction.edit_original_response(content=MessageTemplates.NOT_A_HELPER_THREAD)
        return False

    await interaction.edit_original_response(
        content=MessageTemplates.ping_helpers(role.mention),
        allowed_mentions=discord.AllowedMentions(roles=[role]),
    )
    logger.info(f"User {interaction.user.id} pinged '{role.name}' in thread {interaction.channel.id}")
    return True

"""
Helper commands: /become-helper and /whip-slaves.
"""

import discord
from discord import app_commands

from ..config import BotConfig
from ..subjects import HelperEnrollmentFlow, ping_helpers


def setup_helper_commands(bot, config: BotConfig) -> tuple:
    """Set up the helper commands on the bot.

    Returns:
        Tuple of (become_helper, whip_slaves) command functions.
    """

    @bot.tree.command(
        name="become-helper",
        description="Volunteer as a helper for a subject"
    )
    @app_commands.guild_only()
    async def become_helper(interaction: discord.Interaction) -> None:
        """Handle the /become-helper command."""
        await HelperEnrollmentFlow(interaction, config).run()

    @bot.tree.command(
        name="whip-slaves",
        description="Ping the helpers of this thread's subject"
    )
    @app_commands.guild_only()
    async def whip_slaves(interaction: discord.Interaction) -> None:
        """Handle the /whip-slaves command."""
        await ping_helpers(interaction, config)

    return become_helper, whip_slaves

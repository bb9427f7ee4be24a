"""
Discord bot client for the Subject Helper Bot.
"""

import asyncio
import signal
import sys

import discord
from discord import app_commands

from .config import BotConfig
from .utils.database import UserPointsStore
from .utils.logging import logger
from .utils.message_templates import MessageTemplates


class HelperBot(discord.Client):
    """Discord bot client with application commands support."""

    def __init__(self, config: BotConfig) -> None:
        intents = discord.Intents.default()
        intents.members = True  # Required for reliable member role checks
        super().__init__(intents=intents)
        self.config = config
        self.tree = app_commands.CommandTree(self)
        self.tree.error(on_app_command_error)
        self.store = UserPointsStore(config.database_path)

    async def setup_hook(self) -> None:
        """Called after login to prepare storage and register commands."""
        await self.store.initialize()
        if self.config.guild_id:
            guild = discord.Object(id=self.config.guild_id)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info(f"Synced {len(synced)} command(s) to guild {self.config.guild_id}")
        else:
            synced = await self.tree.sync()
            logger.info(f"Synced {len(synced)} global command(s)")

    async def cleanup(self) -> None:
        """Cleanup resources before shutdown."""
        logger.info("Cleaning up resources...")
        if not self.is_closed():
            await self.close()
        logger.info("Cleanup complete")


def create_bot(config: BotConfig) -> HelperBot:
    """Create a new bot instance for the given configuration."""
    return HelperBot(config)


async def on_app_command_error(
    interaction: discord.Interaction,
    error: app_commands.AppCommandError
) -> None:
    """Log an unexpected command failure and acknowledge it to the user."""
    original = getattr(error, "original", error)
    command_name = interaction.command.name if interaction.command else "unknown"
    logger.error(f"Command /{command_name} failed: {original!r}", exc_info=original)

    try:
        if interaction.response.is_done():
            await interaction.followup.send(MessageTemplates.GENERIC_FAILURE, ephemeral=True)
        else:
            await interaction.response.send_message(MessageTemplates.GENERIC_FAILURE, ephemeral=True)
    except discord.HTTPException as e:
        logger.warning(f"Could not send failure notice for /{command_name}: {e}")


async def on_ready_handler(bot: HelperBot) -> None:
    """Handle the on_ready event."""
    logger.info(f"Bot is ready! Logged in as {bot.user}")
    logger.info(f"Subject category: '{bot.config.category_name}', helper role suffix: '{bot.config.helper_role_suffix}'")
    logger.info(f"Helper selection timeout: {bot.config.selection_timeout_seconds}s")
    logger.info(
        f"Invite URL: https://discord.com/api/oauth2/authorize?"
        f"client_id={bot.user.id}&permissions=275146345488&scope=bot%20applications.commands"
    )


def setup_signal_handlers(bot: HelperBot) -> None:
    """Set up signal handlers for graceful shutdown."""
    def signal_handler(sig: int, frame) -> None:
        logger.info(f"Received signal {sig}, initiating graceful shutdown...")
        loop = asyncio.get_event_loop()
        if loop.is_running():
            asyncio.create_task(bot.cleanup())
        sys.exit(0)

    # SIGTERM may not exist on Windows
    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, 'SIGTERM'):
        signal.signal(signal.SIGTERM, signal_handler)


def run_bot(bot: HelperBot) -> None:
    """Start the Discord bot."""
    token = bot.config.discord_bot_token
    if not token:
        raise ValueError("DISCORD_BOT_TOKEN environment variable is required")

    @bot.event
    async def on_ready() -> None:
        """Discord event handler for when the bot is ready."""
        await on_ready_handler(bot)

    setup_signal_handlers(bot)

    logger.info("Starting Subject Helper Bot...")
    bot.run(token)

"""
/create-subject command for the Subject Helper Bot.
"""

import discord
from discord import app_commands

from ..config import BotConfig
from ..subjects import (
    DuplicateSubjectError,
    SubjectProvisioner,
    SubjectValidationError,
    validate_subject_options,
)
from ..utils.logging import logger
from ..utils.message_templates import MessageTemplates
from ..utils.text_utils import format_error_message


def setup_create_subject_command(bot, config: BotConfig):
    """Set up the /create-subject command on the bot.

    Returns:
        The create_subject command function.
    """

    @bot.tree.command(
        name="create-subject",
        description="Create a subject forum and a helper role for it"
    )
    @app_commands.describe(
        name="Name of the subject, e.g. Biology",
        color="Color of the helper role, e.g. #00FF00 or green",
        emoji="A single emoji shown before the forum name"
    )
    @app_commands.guild_only()
    @app_commands.default_permissions(manage_channels=True, manage_roles=True)
    async def create_subject(
        interaction: discord.Interaction,
        name: str,
        color: str,
        emoji: str
    ) -> None:
        """Handle the /create-subject command."""
        try:
            options = validate_subject_options({"name": name, "color": color, "emoji": emoji})
        except SubjectValidationError as e:
            await interaction.response.send_message(
                format_error_message("Invalid Input", e.message, include_traceback=False),
                ephemeral=True
            )
            return

        # Up to three API calls follow; acknowledge within Discord's 3 second window
        await interaction.response.defer()

        provisioner = SubjectProvisioner(interaction.guild, config)
        try:
            subject = await provisioner.create_subject(options)
        except DuplicateSubjectError:
            logger.info(f"User {interaction.user.id} tried to create existing subject '{options.name}'")
            await interaction.followup.send(MessageTemplates.SUBJECT_EXISTS, ephemeral=True)
            return

        await interaction.followup.send(
            MessageTemplates.subject_created(subject.forum.mention, subject.role.name)
        )

    return create_subject

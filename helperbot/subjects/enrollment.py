"""
The /become-helper flow: pick a subject, receive its helper role.
"""

from typing import List, Optional

import discord

from ..config import BotConfig, MAX_SELECT_OPTIONS
from ..utils.logging import logger
from ..utils.message_templates import MessageTemplates
from .helper_roles import HelperRoleOption, list_helper_roles
from .selection import HelperRoleSelectView, SelectionOutcome, SelectionResult


class HelperEnrollmentFlow:
    """Lets the invoking member grant themselves one helper role."""

    def __init__(self, interaction: discord.Interaction, config: BotConfig) -> None:
        self.interaction = interaction
        self.guild = interaction.guild
        self.config = config

    def helper_role_options(self) -> List[HelperRoleOption]:
        """Helper roles to offer, capped at the select menu limit."""
        options = list_helper_roles(self.guild, self.config.helper_role_suffix)
        if len(options) > MAX_SELECT_OPTIONS:
            logger.warning(
                f"Guild {self.guild.id} has {len(options)} helper roles, "
                f"only the first {MAX_SELECT_OPTIONS} can be offered"
            )
            options = options[:MAX_SELECT_OPTIONS]
        return options

    async def run(self) -> Optional[SelectionOutcome]:
        """Run the flow to completion.

        Returns:
            The selection outcome, or None when there was nothing to offer.
            SELECTED covers both a new grant and the already-has-role no-op.
        """
        options = self.helper_role_options()
        if not options:
            await self.interaction.response.send_message(MessageTemplates.NO_SUBJECTS, ephemeral=True)
            return None

        view = HelperRoleSelectView(
            requester_id=self.interaction.user.id,
            options=options,
            timeout=self.config.selection_timeout_seconds,
        )
        await self.interaction.response.send_message(
            MessageTemplates.SELECT_PROMPT, view=view, ephemeral=True
        )

        result = await view.wait_for_selection()
        logger.info(f"Helper selection for user {self.interaction.user.id} ended: {result.outcome.value}")

        if result.outcome is SelectionOutcome.TIMED_OUT:
            await self.interaction.edit_original_response(content=MessageTemplates.SELECTION_TIMED_OUT, view=None)
        elif result.outcome is SelectionOutcome.CANCELLED:
            await self.interaction.edit_original_response(content=MessageTemplates.SELECTION_CANCELLED, view=None)
        else:
            await self.interaction.delete_original_response()
            await self._grant_selected(result, options)
        return result.outcome

    async def _grant_selected(self, result: SelectionResult, options: List[HelperRoleOption]) -> None:
        selection = result.interaction
        chosen = next((option for option in options if str(option.id) in result.values), None)
        role = self.guild.get_role(chosen.id) if chosen else None
        if chosen is None or role is None:
            await selection.response.send_message(MessageTemplates.ROLE_GONE, ephemeral=True)
            return

        member = self.interaction.user
        if member.get_role(role.id) is not None:
            await selection.response.send_message(MessageTemplates.already_helper(role.name), ephemeral=True)
            return

        await member.add_roles(role, reason="Volunteered via /become-helper")
        logger.info(f"Granted '{role.name}' to user {member.id} in guild {self.guild.id}")

        await selection.response.send_message(
            MessageTemplates.helper_welcome(chosen.subject, role.name), ephemeral=True
        )
        await selection.followup.send(
            MessageTemplates.helper_announcement(member.display_name, chosen.subject)
        )

"""
Bounded, requester-scoped selection prompt for helper roles.

``HelperRoleSelectView.wait_for_selection`` always resolves to a
``SelectionResult``; a timeout or cancellation is an outcome, not an error.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

import discord

from ..utils.logging import logger
from ..utils.message_templates import MessageTemplates
from ..utils.text_utils import truncate_label
from .helper_roles import HelperRoleOption

SELECT_HELPER_ROLES_ID = "select_helper_roles"


class SelectionOutcome(Enum):
    """How a selection prompt ended."""
    SELECTED = "SELECTED"
    TIMED_OUT = "TIMED_OUT"
    CANCELLED = "CANCELLED"


@dataclass
class SelectionResult:
    """Result of waiting on a selection prompt."""
    outcome: SelectionOutcome
    values: List[str] = field(default_factory=list)
    interaction: Optional[discord.Interaction] = None

    @property
    def selected(self) -> bool:
        return self.outcome is SelectionOutcome.SELECTED


class HelperRoleSelectView(discord.ui.View):
    """A single select menu of helper roles that only the requester may use."""

    def __init__(
        self,
        requester_id: int,
        options: Sequence[HelperRoleOption],
        timeout: float,
    ) -> None:
        super().__init__(timeout=timeout)
        self.requester_id = requester_id
        self.selection_timeout = timeout
        self._result: Optional[SelectionResult] = None

        self.select = discord.ui.Select(
            custom_id=SELECT_HELPER_ROLES_ID,
            placeholder=MessageTemplates.SELECT_PLACEHOLDER,
            min_values=1,
            max_values=1,
            options=[
                discord.SelectOption(label=truncate_label(option.subject), value=str(option.id))
                for option in options
            ],
        )
        self.select.callback = self.on_select
        self.add_item(self.select)

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        """Reject input from anyone but the requester."""
        if interaction.user.id == self.requester_id:
            return True
        logger.debug(f"Ignoring selection from user {interaction.user.id}, prompt belongs to {self.requester_id}")
        await interaction.response.send_message(MessageTemplates.NOT_YOUR_MENU, ephemeral=True)
        return False

    async def on_select(self, interaction: discord.Interaction) -> None:
        """Record the first selection and stop listening."""
        if self._result is None:
            values = [str(value) for value in ((interaction.data or {}).get("values") or [])]
            self._result = SelectionResult(SelectionOutcome.SELECTED, values, interaction)
        self.stop()

    def cancel(self) -> None:
        """Stop waiting without a selection."""
        if self._result is None:
            self._result = SelectionResult(SelectionOutcome.CANCELLED)
        self.stop()

    async def wait_for_selection(self) -> SelectionResult:
        """Wait for the requester's selection, at most ``selection_timeout`` seconds.

        The view's own timeout only runs once discord.py has stored the view,
        so the bound is enforced here as well.
        """
        if self._result is not None:
            return self._result

        waiter = asyncio.ensure_future(self.wait())
        done, _ = await asyncio.wait({waiter}, timeout=self.selection_timeout)
        if waiter in done:
            timed_out = waiter.result()
        else:
            timed_out = True
            self.stop()
            await waiter

        if self._result is None:
            outcome = SelectionOutcome.TIMED_OUT if timed_out else SelectionOutcome.CANCELLED
            self._result = SelectionResult(outcome)
        return self._result

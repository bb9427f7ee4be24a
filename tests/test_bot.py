"""
Tests for the bot client, its command error handler and startup.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest

from helperbot.bot import HelperBot, create_bot, on_app_command_error, run_bot
from helperbot.config import BotConfig
from helperbot.utils.message_templates import MessageTemplates


def make_failed_interaction(is_done=False):
    """Create a mock interaction for a command that raised."""
    interaction = MagicMock()
    interaction.command.name = "create-subject"
    interaction.response.is_done = MagicMock(return_value=is_done)
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


class TestCreateBot:
    """Tests for create_bot."""

    def test_returns_configured_client(self, tmp_path):
        config = BotConfig(database_path=tmp_path / "bot.sqlite3")

        bot = create_bot(config)

        assert isinstance(bot, HelperBot)
        assert bot.config is config
        assert bot.intents.members is True
        assert bot.store.db_path == str(tmp_path / "bot.sqlite3")

    def test_instances_are_independent(self, tmp_path):
        first = create_bot(BotConfig(database_path=tmp_path / "a.sqlite3"))
        second = create_bot(BotConfig(database_path=tmp_path / "b.sqlite3"))

        assert first is not second
        assert first.tree is not second.tree


class TestSetupHook:
    """Tests for HelperBot.setup_hook."""

    @pytest.mark.asyncio
    async def test_syncs_to_configured_guild(self, tmp_path):
        bot = create_bot(BotConfig(guild_id=42, database_path=tmp_path / "bot.sqlite3"))

        with patch.object(bot.tree, "sync", new_callable=AsyncMock, return_value=[1, 2, 3]) as sync, \
                patch.object(bot.tree, "copy_global_to") as copy_global_to:
            await bot.setup_hook()

        assert copy_global_to.call_args.kwargs["guild"].id == 42
        assert sync.call_args.kwargs["guild"].id == 42
        assert (tmp_path / "bot.sqlite3").exists()

    @pytest.mark.asyncio
    async def test_syncs_globally_without_guild(self, tmp_path):
        bot = create_bot(BotConfig(database_path=tmp_path / "bot.sqlite3"))

        with patch.object(bot.tree, "sync", new_callable=AsyncMock, return_value=[]) as sync, \
                patch.object(bot.tree, "copy_global_to") as copy_global_to:
            await bot.setup_hook()

        sync.assert_awaited_once_with()
        copy_global_to.assert_not_called()


class TestOnAppCommandError:
    """Tests for the command tree error handler."""

    @pytest.mark.asyncio
    async def test_responds_when_not_yet_acknowledged(self):
        interaction = make_failed_interaction(is_done=False)
        error = discord.app_commands.AppCommandError("boom")

        await on_app_command_error(interaction, error)

        interaction.response.send_message.assert_awaited_once_with(
            MessageTemplates.GENERIC_FAILURE, ephemeral=True
        )
        interaction.followup.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_follows_up_when_already_acknowledged(self):
        interaction = make_failed_interaction(is_done=True)
        error = discord.app_commands.AppCommandError("boom")

        await on_app_command_error(interaction, error)

        interaction.followup.send.assert_awaited_once_with(MessageTemplates.GENERIC_FAILURE, ephemeral=True)
        interaction.response.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_logs_original_exception(self):
        interaction = make_failed_interaction()
        error = discord.app_commands.AppCommandError("wrapper")
        error.original = RuntimeError("missing permissions")

        with patch("helperbot.bot.logger") as mock_logger:
            await on_app_command_error(interaction, error)

        message = mock_logger.error.call_args.args[0]
        assert "/create-subject" in message
        assert "missing permissions" in message
        assert mock_logger.error.call_args.kwargs["exc_info"] is error.original

    @pytest.mark.asyncio
    async def test_notice_failure_is_logged(self):
        """A failure to deliver the notice is logged instead of raised."""
        interaction = make_failed_interaction()
        response = MagicMock(status=404, reason="Not Found")
        interaction.response.send_message = AsyncMock(
            side_effect=discord.HTTPException(response, "Unknown interaction")
        )

        with patch("helperbot.bot.logger") as mock_logger:
            await on_app_command_error(interaction, discord.app_commands.AppCommandError("boom"))

        mock_logger.warning.assert_called_once()


class TestRunBot:
    """Tests for run_bot."""

    def test_requires_token(self, tmp_path):
        bot = create_bot(BotConfig(database_path=tmp_path / "bot.sqlite3"))

        with pytest.raises(ValueError, match="DISCORD_BOT_TOKEN"):
            run_bot(bot)

    def test_runs_with_token(self, tmp_path):
        bot = create_bot(BotConfig(discord_bot_token="token", database_path=tmp_path / "bot.sqlite3"))

        with patch.object(bot, "run") as mock_run, \
                patch("helperbot.bot.setup_signal_handlers") as mock_signals:
            run_bot(bot)

        mock_run.assert_called_once_with("token")
        mock_signals.assert_called_once_with(bot)

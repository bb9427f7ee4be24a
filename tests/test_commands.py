"""
Tests for command registration and the /create-subject handler.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest

from helperbot.subjects.errors import DuplicateSubjectError
from helperbot.utils.message_templates import MessageTemplates
from conftest import make_channel, make_guild


def capture_commands(setup, config):
    """Run a setup function against a mock bot and return commands by name."""
    mock_bot = MagicMock()
    captured = {}

    def mock_command(*args, **kwargs):
        def decorator(func):
            captured[kwargs.get('name')] = func
            return func
        return decorator

    mock_bot.tree.command = mock_command
    setup(mock_bot, config)
    return captured


def make_interaction(guild):
    interaction = AsyncMock()
    interaction.guild = guild
    interaction.user = MagicMock()
    interaction.user.id = 12345
    interaction.response = AsyncMock()
    return interaction


class TestSetupCommands:
    """Tests for the setup_* functions."""

    def test_registers_create_subject(self, config):
        from helperbot.commands import setup_create_subject_command

        captured = capture_commands(setup_create_subject_command, config)

        assert list(captured) == ["create-subject"]
        handler = captured["create-subject"]
        assert handler.__discord_app_commands_guild_only__ is True
        assert set(handler.__discord_app_commands_param_description__) == {"name", "color", "emoji"}

    def test_registers_helper_commands(self, config):
        from helperbot.commands import setup_helper_commands

        captured = capture_commands(setup_helper_commands, config)

        assert set(captured) == {"become-helper", "whip-slaves"}

    def test_returns_callable_functions(self, config):
        from helperbot.commands.helper_commands import setup_helper_commands

        mock_bot = MagicMock()
        mock_bot.tree.command = MagicMock(return_value=lambda f: f)

        become_helper, whip_slaves = setup_helper_commands(mock_bot, config)

        assert callable(become_helper)
        assert callable(whip_slaves)


class TestCreateSubjectCommand:
    """Tests for the /create-subject handler."""

    @pytest.fixture
    def handler(self, config):
        from helperbot.commands import setup_create_subject_command
        return capture_commands(setup_create_subject_command, config)["create-subject"]

    @pytest.mark.asyncio
    async def test_biology_example(self, handler):
        guild = make_guild(channels=[make_channel(10, "Subjects", discord.ChannelType.category)])
        interaction = make_interaction(guild)

        await handler(interaction, "Biology", "#00FF00", "🧬")

        guild.create_forum.assert_awaited_once()
        guild.create_role.assert_awaited_once()
        interaction.response.defer.assert_awaited_once()
        interaction.response.send_message.assert_not_called()
        call_args = interaction.followup.send.call_args
        forum = next(c for c in guild.channels if c.name == "🧬-Biology")
        assert call_args.args[0] == MessageTemplates.subject_created(forum.mention, "biology-helper")
        assert call_args.kwargs.get("ephemeral") is not True

    @pytest.mark.asyncio
    async def test_defers_before_creating_anything(self, handler):
        """The interaction is acknowledged before any Discord API call."""
        guild = make_guild()
        interaction = make_interaction(guild)
        calls = []
        interaction.response.defer = AsyncMock(side_effect=lambda *a, **k: calls.append("defer"))
        original_create_category = guild.create_category.side_effect

        async def create_category(*args, **kwargs):
            calls.append("create_category")
            return await original_create_category(*args, **kwargs)

        guild.create_category.side_effect = create_category

        await handler(interaction, "Biology", "#00FF00", "🧬")

        assert calls == ["defer", "create_category"]
        interaction.followup.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_validation_error_has_no_side_effects(self, handler):
        guild = make_guild()
        interaction = make_interaction(guild)

        await handler(interaction, "Biology", "not a colour", "🧬")

        call_args = interaction.response.send_message.call_args
        assert "Invalid Input" in call_args.args[0]
        assert "color" in call_args.args[0]
        assert call_args.kwargs["ephemeral"] is True
        interaction.response.defer.assert_not_called()
        guild.create_category.assert_not_called()
        guild.create_forum.assert_not_called()
        guild.create_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_subject(self, handler):
        guild = make_guild(channels=[
            make_channel(10, "Subjects", discord.ChannelType.category),
            make_channel(11, "calculus-math-study", discord.ChannelType.forum, category_id=10),
        ])
        interaction = make_interaction(guild)

        await handler(interaction, "Math", "blue", "📐")

        interaction.response.defer.assert_awaited_once()
        interaction.followup.send.assert_awaited_once_with(MessageTemplates.SUBJECT_EXISTS, ephemeral=True)
        guild.create_forum.assert_not_called()
        guild.create_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_remote_errors_propagate(self, handler):
        """Unexpected failures reach the command tree's error handler."""
        interaction = make_interaction(make_guild())
        provisioner = MagicMock()
        provisioner.create_subject = AsyncMock(side_effect=RuntimeError("gateway down"))

        with patch("helperbot.commands.create_subject.SubjectProvisioner", return_value=provisioner):
            with pytest.raises(RuntimeError):
                await handler(interaction, "Biology", "#00FF00", "🧬")

        interaction.response.defer.assert_awaited_once()
        interaction.followup.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_uses_fresh_provisioner_per_call(self, handler):
        interaction = make_interaction(make_guild())
        provisioner = MagicMock()
        provisioner.create_subject = AsyncMock(side_effect=DuplicateSubjectError("Biology"))

        with patch("helperbot.commands.create_subject.SubjectProvisioner", return_value=provisioner) as cls:
            await handler(interaction, "Biology", "#00FF00", "🧬")
            await handler(interaction, "Biology", "#00FF00", "🧬")

        assert cls.call_count == 2


class TestHelperCommands:
    """Tests for /become-helper and /whip-slaves delegation."""

    @pytest.mark.asyncio
    async def test_become_helper_runs_flow(self, config):
        from helperbot.commands import setup_helper_commands

        interaction = make_interaction(make_guild())
        flow = MagicMock()
        flow.run = AsyncMock()

        with patch("helperbot.commands.helper_commands.HelperEnrollmentFlow", return_value=flow) as cls:
            handler = capture_commands(setup_helper_commands, config)["become-helper"]
            await handler(interaction)

        cls.assert_called_once_with(interaction, config)
        flow.run.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_whip_slaves_pings_helpers(self, config):
        from helperbot.commands import setup_helper_commands

        interaction = make_interaction(make_guild())

        with patch("helperbot.commands.helper_commands.ping_helpers", new_callable=AsyncMock) as ping:
            handler = capture_commands(setup_helper_commands, config)["whip-slaves"]
            await handler(interaction)

        ping.assert_awaited_once_with(interaction, config)

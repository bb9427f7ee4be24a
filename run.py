"""
Subject Helper Bot
A Discord bot that lets members volunteer as subject helpers, lets moderators
create subjects, and pings helpers from subject forum threads.

Entry point for the application.
"""

from helperbot.config import load_config
from helperbot.bot import create_bot, run_bot
from helperbot.commands import setup_create_subject_command, setup_helper_commands
from helperbot.utils.logging import set_log_level
from helperbot.utils.startup_checks import run_startup_checks

# Build configuration from .env and config.yaml
config = load_config()
set_log_level(config.log_level)

# Exits with an error if critical checks fail (Discord token, database)
run_startup_checks(config, exit_on_critical=True)

bot = create_bot(config)
setup_create_subject_command(bot, config)
setup_helper_commands(bot, config)

if __name__ == "__main__":
    run_bot(bot)

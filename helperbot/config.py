"""
Configuration settings for the Subject Helper Bot.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml
from dotenv import load_dotenv

from .utils.logging import logger

# Project Paths
BASE_DIR = Path(__file__).parent.parent
CONFIG_YAML_PATH = BASE_DIR / "config.yaml"
DEFAULT_DATABASE_PATH = BASE_DIR / "data" / "helperbot.sqlite3"

# Subject channel/role conventions
DEFAULT_CATEGORY_NAME = "Subjects"
DEFAULT_HELPER_ROLE_SUFFIX = "-helper"

# Selection prompt
DEFAULT_SELECTION_TIMEOUT_SECONDS = 10.0
MAX_SELECT_OPTIONS = 25  # Discord limit per select menu

# Input validation
SUBJECT_NAME_MAX_LENGTH = 50
SUBJECT_NAME_PATTERN = r'^[\w\- ]+$'


@dataclass(frozen=True)
class BotConfig:
    """Explicit configuration passed to the bot, its commands and flows."""
    discord_bot_token: Optional[str] = None
    guild_id: Optional[int] = None
    database_path: Path = DEFAULT_DATABASE_PATH
    log_level: str = "INFO"
    category_name: str = DEFAULT_CATEGORY_NAME
    helper_role_suffix: str = DEFAULT_HELPER_ROLE_SUFFIX
    selection_timeout_seconds: float = DEFAULT_SELECTION_TIMEOUT_SECONDS


def load_yaml_settings(path: Path = CONFIG_YAML_PATH) -> dict:
    """Load bot settings from config.yaml.

    Returns:
        The parsed mapping, or an empty dict if the file is missing or invalid.
    """
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable {path.name}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path.name}: expected a mapping at the top level")
        return {}
    return data


def _parse_guild_id(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"DISCORD_GUILD_ID must be numeric, got {raw!r}")


def load_config(
    env: Optional[Mapping[str, str]] = None,
    yaml_path: Path = CONFIG_YAML_PATH,
) -> BotConfig:
    """Build the bot configuration from the environment and config.yaml.

    Environment values (loaded from .env when ``env`` is not given) hold
    secrets and deployment settings; config.yaml holds bot behaviour.

    Args:
        env: Mapping to read variables from. Defaults to ``os.environ``.
        yaml_path: Location of the optional YAML settings file.

    Returns:
        A frozen BotConfig.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    settings = load_yaml_settings(yaml_path)

    timeout = float(settings.get("selection_timeout_seconds", DEFAULT_SELECTION_TIMEOUT_SECONDS))
    if timeout <= 0:
        raise ValueError("selection_timeout_seconds must be positive")

    return BotConfig(
        discord_bot_token=env.get("DISCORD_BOT_TOKEN"),
        guild_id=_parse_guild_id(env.get("DISCORD_GUILD_ID")),
        database_path=Path(env.get("DATABASE_PATH") or DEFAULT_DATABASE_PATH),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        category_name=str(settings.get("category_name", DEFAULT_CATEGORY_NAME)),
        helper_role_suffix=str(settings.get("helper_role_suffix", DEFAULT_HELPER_ROLE_SUFFIX)),
        selection_timeout_seconds=timeout,
    )

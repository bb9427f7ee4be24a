"""
Validation of /create-subject options.

Options are checked in the order name, color, emoji and the first failure is
reported. Nothing here touches Discord state.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import discord
import emoji as emoji_lib

from ..config import SUBJECT_NAME_MAX_LENGTH, SUBJECT_NAME_PATTERN
from .errors import SubjectValidationError

_BARE_HEX_PATTERN = re.compile(r'^[0-9a-fA-F]{6}$')
_NON_PRESET_COLOUR_ATTRS = {"from_rgb", "from_hsv", "from_str", "random"}


@dataclass(frozen=True)
class SubjectOptions:
    """Validated options for creating a subject."""
    name: str
    color: discord.Colour
    emoji: str


def _require_string(options: Mapping[str, Any], field: str) -> str:
    value = options.get(field)
    if value is None:
        raise SubjectValidationError(field, f"{field} is required")
    if not isinstance(value, str):
        raise SubjectValidationError(field, f"{field} must be a string")
    value = value.strip()
    if not value:
        raise SubjectValidationError(field, f"{field} must be a non-empty string")
    return value


def _colour_preset(token: str) -> Optional[discord.Colour]:
    """Look up a discord.py colour preset such as ``green`` or ``dark_blue``."""
    attr = token.lower().replace(" ", "_").replace("-", "_")
    if attr.startswith("_") or attr in _NON_PRESET_COLOUR_ATTRS:
        return None
    factory = getattr(discord.Colour, attr, None)
    if not callable(factory):
        return None
    try:
        colour = factory()
    except TypeError:
        return None
    return colour if isinstance(colour, discord.Colour) else None


def parse_color(token: str) -> discord.Colour:
    """Parse a colour token into a discord.Colour.

    Accepts ``#RRGGBB``, ``0xRRGGBB``, bare ``RRGGBB``, ``rgb(r, g, b)`` and
    discord.py preset names.

    Raises:
        ValueError: If the token is not a recognised colour.
    """
    if _BARE_HEX_PATTERN.match(token):
        token = f"#{token}"
    try:
        return discord.Colour.from_str(token)
    except ValueError:
        preset = _colour_preset(token)
        if preset is None:
            raise
        return preset


def validate_subject_options(options: Mapping[str, Any]) -> SubjectOptions:
    """Validate raw /create-subject options.

    Args:
        options: Mapping of option name to raw value.

    Returns:
        The validated SubjectOptions.

    Raises:
        SubjectValidationError: Naming the first offending field.
    """
    name = _require_string(options, "name")
    if len(name) > SUBJECT_NAME_MAX_LENGTH:
        raise SubjectValidationError("name", f"name must be at most {SUBJECT_NAME_MAX_LENGTH} characters")
    if not re.match(SUBJECT_NAME_PATTERN, name):
        raise SubjectValidationError(
            "name", "name may only contain letters, numbers, spaces, hyphens and underscores"
        )

    color_token = _require_string(options, "color")
    try:
        color = parse_color(color_token)
    except ValueError:
        raise SubjectValidationError(
            "color", "color must be a valid color token such as #00FF00, rgb(0, 255, 0) or green"
        )

    emoji = _require_string(options, "emoji")
    if not emoji_lib.is_emoji(emoji):
        raise SubjectValidationError("emoji", "emoji must be a single emoji")

    return SubjectOptions(name=name, color=color, emoji=emoji)

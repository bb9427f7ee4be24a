"""
Text utilities for the Subject Helper Bot.
"""

import re

SELECT_LABEL_MAX_LENGTH = 100  # Discord limit for select option labels


def truncate_label(text: str, max_length: int = SELECT_LABEL_MAX_LENGTH) -> str:
    """Truncate text to max_length characters, ending with an ellipsis if cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def normalize_subject_name(name: str) -> str:
    """Normalize a subject name for comparison across channel and role names.

    Discord lowercases forum names and turns spaces into hyphens, while role
    names keep their spaces, so both sides are reduced to lowercase words
    joined by single hyphens.

    Examples:
        >>> normalize_subject_name("Computer Science")
        'computer-science'
        >>> normalize_subject_name("computer-science")
        'computer-science'
    """
    return "-".join(part for part in re.split(r'[\s\-]+', name.lower()) if part)


def format_error_message(title: str, error: str, include_traceback: bool = True) -> str:
    """Format an error message consistently for Discord.

    Args:
        title: The error title (e.g., "Invalid Input").
        error: The error message or traceback.
        include_traceback: If True, wraps error in a code block.

    Returns:
        A consistently formatted error message.
    """
    if include_traceback:
        return f"❌ **{title}**\n```\n{error}\n```"
    return f"❌ **{title}:** {error}"

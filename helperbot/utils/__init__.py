"""
Utility modules for the Subject Helper Bot.
"""

from .logging import get_logger, set_log_level
from .text_utils import truncate_label, normalize_subject_name, format_error_message
from .message_templates import MessageTemplates
from .database import UserPointsStore

__all__ = [
    "get_logger",
    "set_log_level",
    "truncate_label",
    "normalize_subject_name",
    "format_error_message",
    "MessageTemplates",
    "UserPointsStore",
]

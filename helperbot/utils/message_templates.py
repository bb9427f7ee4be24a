"""
Message templates for Discord messages.

This module provides centralized message templates to improve maintainability
and enable potential localization in the future.
"""


class MessageTemplates:
    """Centralized message templates for Discord messages."""

    # /create-subject
    SUBJECT_CREATED = "Subject {forum_mention} and role **{role_name}** created!"
    SUBJECT_EXISTS = "Subject already exists!"

    # /become-helper
    SELECT_PROMPT = "Please select a subject to become a helper in"
    SELECT_PLACEHOLDER = "Select a subject to become a helper"
    NO_SUBJECTS = "There are no subjects to help with yet. Ask a moderator to create one!"
    NOT_YOUR_MENU = "This menu isn't for you. Run `/become-helper` to get your own."
    SELECTION_TIMED_OUT = "⏰ No subject selected in time, so nothing was changed."
    SELECTION_CANCELLED = "Selection cancelled, nothing was changed."
    ROLE_GONE = "That subject's helper role no longer exists."
    ALREADY_HELPER = "You already have the role {role_name}! So I won't add it again."
    HELPER_WELCOME = (
        "Congrats on becoming a helper in {subject}! Thanks for helping out the community <3.\n"
        "You have been promoted to {role_name} and will be pinged whenever someone "
        "posts in the {subject} forum channel."
    )
    HELPER_ANNOUNCEMENT = "Congrats to {display_name} for becoming a helper in {subject}!"

    # /whip-slaves
    PING_HELPERS = "{role_mention}, get to work!"
    NOT_A_HELPER_THREAD = "Helpers can only be pinged from inside a subject forum thread."

    # Generic
    GENERIC_FAILURE = "Something went wrong while handling that command. Please try again later."

    @classmethod
    def subject_created(cls, forum_mention: str, role_name: str) -> str:
        """Format the subject creation confirmation."""
        return cls.SUBJECT_CREATED.format(forum_mention=forum_mention, role_name=role_name)

    @classmethod
    def already_helper(cls, role_name: str) -> str:
        """Format the already-has-role notice."""
        return cls.ALREADY_HELPER.format(role_name=role_name)

    @classmethod
    def helper_welcome(cls, subject: str, role_name: str) -> str:
        """Format the private welcome message for a new helper."""
        return cls.HELPER_WELCOME.format(subject=subject, role_name=role_name)

    @classmethod
    def helper_announcement(cls, display_name: str, subject: str) -> str:
        """Format the public new-helper announcement."""
        return cls.HELPER_ANNOUNCEMENT.format(display_name=display_name, subject=subject)

    @classmethod
    def ping_helpers(cls, role_mention: str) -> str:
        """Format the helper ping."""
        return cls.PING_HELPERS.format(role_mention=role_mention)

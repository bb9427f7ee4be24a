"""
Errors raised by the subject workflows.

These are the expected, user-facing failures. Handlers catch them and reply
with the message; anything else is left to the command tree's error handler.
"""


class SubjectError(Exception):
    """Base class for user-facing subject errors."""


class SubjectValidationError(SubjectError):
    """A command option failed validation.

    Attributes:
        field: Name of the first offending option.
        message: The expected constraint, phrased for the requester.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DuplicateSubjectError(SubjectError):
    """A channel matching the subject name already exists in the category."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Subject already exists: {name}")

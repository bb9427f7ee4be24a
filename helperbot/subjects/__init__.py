"""
Subject workflows: validation, provisioning, helper enrollment and pings.
"""

from .errors import SubjectError, SubjectValidationError, DuplicateSubjectError
from .validation import SubjectOptions, validate_subject_options
from .category import CategoryResolver
from .helper_roles import HelperRoleOption, list_helper_roles, thread_helper_role, is_helper_thread
from .provisioner import ProvisionedSubject, SubjectProvisioner
from .selection import SelectionOutcome, SelectionResult, HelperRoleSelectView
from .enrollment import HelperEnrollmentFlow
from .notification import ping_helpers

__all__ = [
    "SubjectError",
    "SubjectValidationError",
    "DuplicateSubjectError",
    "SubjectOptions",
    "validate_subject_options",
    "CategoryResolver",
    "HelperRoleOption",
    "list_helper_roles",
    "thread_helper_role",
    "is_helper_thread",
    "ProvisionedSubject",
    "SubjectProvisioner",
    "SelectionOutcome",
    "SelectionResult",
    "HelperRoleSelectView",
    "HelperEnrollmentFlow",
    "ping_helpers",
]

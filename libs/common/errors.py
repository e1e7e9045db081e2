"""Domain error taxonomy shared by every repository.

Repositories raise these instead of returning sentinel values; the HTTP layer
maps them to responses in ``libs.common.error_handler``.
"""

from typing import Any, Optional


class StudioError(Exception):
    """Base class for data-layer failures."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StudioError):
    """The referenced identity does not exist."""

    code = "not_found"

    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class ValidationFailure(StudioError):
    """Input is malformed or breaks a domain rule."""

    def __init__(self, code: str, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class PermissionDenied(StudioError):
    """The caller lacks the permission required for a mutation."""

    code = "permission_denied"

    def __init__(self, permission: str, caller_id: Optional[str] = None):
        super().__init__(f"Permission '{permission}' required")
        self.permission = permission
        self.caller_id = caller_id


class VersionConflict(StudioError):
    """Optimistic concurrency check failed on update."""

    code = "version_conflict"

    def __init__(self, entity: str, record_id: str, expected: int, actual: int):
        super().__init__(
            f"{entity} {record_id} is at version {actual}, expected {expected}"
        )
        self.entity = entity
        self.record_id = record_id
        self.expected = expected
        self.actual = actual


class TransientUnavailable(StudioError):
    """The backing store could not be reached. Safe to retry."""

    code = "unavailable"

    def __init__(self, message: str = "Storage temporarily unavailable"):
        super().__init__(message)

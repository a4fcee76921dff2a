"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised when a caller violates an operation's contract (e.g. a page
    limit below 1). Never silently corrected.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenReason(str, Enum):
    """Stable reason codes for rejected mutations.

    Clients map each value to a different UI message, so values must
    never change once released.
    """

    NOT_AUTHOR = "not_author"
    COMMENT_DELETED = "comment_deleted"
    EDIT_WINDOW_ELAPSED = "edit_window_elapsed"
    NOT_DELETED = "not_deleted"
    RESTORE_WINDOW_ELAPSED = "restore_window_elapsed"


FORBIDDEN_MESSAGES: dict[ForbiddenReason, str] = {
    ForbiddenReason.NOT_AUTHOR: "You are not the author of this comment.",
    ForbiddenReason.COMMENT_DELETED: "This comment has been deleted.",
    ForbiddenReason.EDIT_WINDOW_ELAPSED: "You can no longer edit this comment.",
    ForbiddenReason.NOT_DELETED: "This comment has not been deleted.",
    ForbiddenReason.RESTORE_WINDOW_ELAPSED: (
        "The grace period for restoring this comment has passed."
    ),
}


class ForbiddenError(DomainError):
    """Raised when an ownership or time-window rule rejects a mutation."""

    def __init__(self, reason: ForbiddenReason, resource_id: str | None = None):
        self.reason = reason
        self.resource_id = resource_id
        self.message = FORBIDDEN_MESSAGES[reason]
        super().__init__(self.message)

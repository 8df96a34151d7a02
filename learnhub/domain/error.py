"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MaxDepthExceededError(ValidationError):
    """Raised when a reply would nest deeper than allowed."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum comment nesting depth of {max_depth} exceeded")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action on content they don't control."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}".strip()
        )


class EditWindowExpiredError(DomainError):
    """Raised when a student edits a comment after the edit window closed."""

    def __init__(self, window_minutes: int):
        self.window_minutes = window_minutes
        super().__init__(f"Edit window expired ({window_minutes} minutes)")


class ContentDeletedException(DomainError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit a deleted {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

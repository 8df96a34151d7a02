"""Base class for domain services."""

import logfire

from learnhub.domain.error import NotFoundError


class Service:
    """Base class for all domain services.

    Services own the business rules that span several entities: threads,
    identity stamps, notifications and conversations.
    """

    @staticmethod
    def not_found(resource: str, identifier: object, **attributes) -> NotFoundError:
        """Log a failed lookup and build the error to raise for it.

        Usage:
            raise self.not_found("Comment", comment_id)
        """
        logfire.warn(
            f"{resource} not found", identifier=str(identifier), **attributes
        )
        return NotFoundError(resource, str(identifier))

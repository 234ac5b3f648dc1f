"""Domain layer errors.

The interface layer maps each of these to an HTTP status; see
``roster.interface.error``.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a request carries no usable identity session."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class AuthorizationError(DomainError):
    """Raised when the caller lacks the role or ownership an operation needs."""

    def __init__(self, action: str, identity_id: str):
        self.action = action
        self.identity_id = identity_id
        super().__init__(f"Identity {identity_id} is not authorized to {action}")


class ValidationError(DomainError):
    """Domain validation error (malformed email, disallowed role, short password)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state.

    Reserved: upserts resolve every collision the current operations can
    hit, so nothing raises it yet. The interface still maps it to 409.
    """

    pass


class TransientError(DomainError):
    """Raised when persistence or the identity platform fails for infrastructure reasons.

    Callers may retry the same operation; every operation that raises this
    is safe to repeat.
    """

    pass

"""Errors raised by repositories, services and orchestrators.

Nothing below the HTTP layer recovers from these; they propagate unchanged
and the routers translate them into status codes.
"""


class StorefrontError(Exception):
    """Base class for storefront errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    """No row matches the requested identity."""

    status_code = 404

    def __init__(self, entity_name: str, entity_id: int) -> None:
        super().__init__(f"{entity_name} {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(StorefrontError):
    """Malformed input or a constraint violation reported by the store."""

    status_code = 422

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PersistenceError(StorefrontError):
    """The store could not complete the unit of work."""

    status_code = 503


class PermissionDeniedError(StorefrontError):
    """The request principal lacks the role an operation requires."""

    status_code = 403

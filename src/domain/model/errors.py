"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class DuplicateError(ValidationError):
    """Entity with the same unique key already exists."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class AuthenticationError(DomainError):
    """Credentials or session token were rejected.

    The message never says which check failed.
    """

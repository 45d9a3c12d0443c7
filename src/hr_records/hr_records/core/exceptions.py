class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a command references an unknown identity."""


class InvalidTransitionError(DomainError):
    """Raised when a leave request is decided while not pending."""


class StorageCorruptionError(DomainError):
    """Persisted aggregate could not be decoded.

    Recovered by falling back to the seed dataset; reported, never raised to callers.
    """

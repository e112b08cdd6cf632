class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownPersonError(ValidationError):
    """Raised when a punch names a person the directory does not know."""


class PunchCooldownError(ValidationError):
    """Raised when the same person punches again inside the kiosk cooldown."""


class OutOfOrderPunchError(ValidationError):
    """Raised under the reject policy when an out-punch precedes its in-punch."""


class StorageError(DomainError):
    """Raised when the backing key-value store cannot be read or written."""

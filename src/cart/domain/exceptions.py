"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class RequestValidationError(ValidationError):
    """The incoming request is malformed.

    ``errors`` maps a field path (``orderItems[0].quantity``) to a message,
    so every problem in the request is reported at once.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Invalid request ({details})")


class InvalidPriceError(ValidationError):
    """A monetary amount is negative or out of range."""


class InvalidQuantityError(ValidationError):
    """A quantity is not positive or does not match the cart."""


class InvalidSpendPointError(ValidationError):
    """Spend point is negative or larger than the order total."""


class InsufficientPointError(ValidationError):
    """Spend point is larger than the member's point balance."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderItemNotFoundError(EntityNotFoundError):
    """A requested product is not in the requester's cart."""


class OrderNotFoundError(EntityNotFoundError):
    """No order exists with the requested id."""


class ForbiddenError(DomainException):
    """The entity exists but belongs to another member."""


class AuthenticationError(DomainException):
    """Credentials are missing, malformed or wrong."""

"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Two families matter to callers:

- ``ValidationError`` and its subclasses are *hard* errors: the caller
  tried something the model forbids (adding an expired product, asking
  for more stock than exists).
- ``CheckoutRejected`` and its subclasses are *soft* outcomes: an ordinary
  checkout that cannot go through (not enough money).  The checkout engine
  turns these into a rejected receipt instead of letting them escape.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """Requested quantity is not positive or exceeds available stock."""


class ExpiredProductError(ValidationError):
    """A perishable item past its expiration was added to a cart."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutRejected(DomainException):
    """Checkout validation failed; nothing was committed."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InsufficientFundsError(CheckoutRejected):
    """Customer balance does not cover subtotal plus shipping."""


class StockUnavailableError(CheckoutRejected):
    """Stock dropped below the carted quantity before checkout."""

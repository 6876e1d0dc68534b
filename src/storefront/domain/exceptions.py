"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

The cart itself never raises for well-formed input: unknown ids, a
quantity at its ceiling or floor and duplicate adds are all no-ops.  These
exceptions are reserved for malformed records and for use-case checks
performed before the cart is touched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidCouponError(ValidationError):
    """A coupon code did not resolve to a known discount."""

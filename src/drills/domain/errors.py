"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidValueObjectError(DomainError, ValueError):
    """Raised when a value object is built with values that violate its invariants."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Invalid {kind}: {reason}")
        self.kind = kind
        self.reason = reason


# ============================================================================
#                           Stack related errors
# ============================================================================


class EmptyStackError(DomainError):
    """Raised when reading from or removing the top of an empty stack."""

    def __init__(self) -> None:
        super().__init__("Empty stack")


# ============================================================================
#                           Coupon related errors
# ============================================================================


class InvalidCouponError(InvalidValueObjectError):
    """Raised when a coupon has an empty code or a discount outside (0, 1)."""

    def __init__(self, code: object, reason: str) -> None:
        super().__init__("coupon", f"{code!r} {reason}")
        self.code = code


# ============================================================================
#                           Remote data errors
# ============================================================================


class FetchDataError(DomainError):
    """Raised when a simulated network fetch fails.

    The `reasons` attribute carries the human-readable failure reason.
    """

    def __init__(self, reasons: str) -> None:
        super().__init__(reasons)
        self.reasons = reasons

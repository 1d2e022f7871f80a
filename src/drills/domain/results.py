"""Tagged results for operations that report invalid input without raising.

Validators and calculators return either `Ok(value)` or `Invalid(reason)`.
The reason text is human readable and always contains the word "invalid",
so callers that only care about the message can match on `str(result)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        """Always True for `Ok`."""
        return True

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Invalid:
    """Rejected input carrying the reason(s) it was rejected.

    Attributes:
        reason: Message shown to users, e.g. "Invalid username; Invalid age".
        reasons: The individual reasons, in the order they were detected.
    """

    reason: str
    reasons: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.reasons:
            object.__setattr__(self, "reasons", (self.reason,))

    @classmethod
    def of(cls, *reasons: str) -> Invalid:
        """Build an `Invalid` from one or more reasons, joined in order."""
        return cls(reason="; ".join(reasons), reasons=tuple(reasons))

    @property
    def is_ok(self) -> bool:
        """Always False for `Invalid`."""
        return False

    def __str__(self) -> str:
        return self.reason


Result: TypeAlias = "Ok[T] | Invalid"

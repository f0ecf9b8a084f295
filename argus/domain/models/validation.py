"""Validation result value object.

Business-rule checks return a ValidationResult instead of raising, so
callers can tell an expected rejection apart from an infrastructure
fault (which propagates as an exception).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a business-rule check.

    Attributes:
        valid: Whether the check passed.
        reason: Human-readable message surfaced to the end user when invalid.

    Example:
        >>> ValidationResult.ok()
        ValidationResult(valid=True, reason=None)
        >>> ValidationResult.fail("Mandat introuvable").valid
        False
    """

    valid: bool
    reason: str | None = None

    def __post_init__(self) -> None:
        if not self.valid and not self.reason:
            raise ValueError("invalid result requires a reason")

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> ValidationResult:
        """Build a passing result."""
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: str) -> ValidationResult:
        """Build a failing result with a user-facing reason."""
        return cls(valid=False, reason=reason)

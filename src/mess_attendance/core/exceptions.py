from __future__ import annotations

from datetime import date


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "error"


class ValidationError(DomainError):
    """Raised when input data is malformed or incomplete."""

    code = "invalid-format"


class PolicyError(DomainError):
    """Raised when a well-formed request violates the marking window."""


class DeadlinePassedError(PolicyError):
    code = "deadline-passed"

    def __init__(self, day: date):
        self.day = day
        super().__init__(f"Deadline to mark for {day.isoformat()} has passed.")


class TooFarInAdvanceError(PolicyError):
    code = "too-far-advance"

    def __init__(self, day: date, advance_days: int):
        self.day = day
        self.advance_days = advance_days
        super().__init__(f"Cannot mark attendance more than {advance_days} days in advance.")


class StoreUnavailableError(DomainError):
    """Raised when the attendance store fails transiently; safe to retry."""

    code = "transient"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "forbidden"

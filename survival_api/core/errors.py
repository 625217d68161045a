"""Errors raised by the survival analysis service."""

from typing import Any, Sequence


class SurvivalAnalysisError(Exception):
    """Base class for errors surfaced to callers."""

    def __init__(self, message: str = "Survival analysis error"):
        self.message = message
        super().__init__(self.message)


class PassengerValidationError(SurvivalAnalysisError):
    """Passenger details were rejected before any computation."""


class MissingFieldError(PassengerValidationError):
    """One or more mandatory passenger fields are absent or blank."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__("Missing required passenger information")


class InvalidFieldError(PassengerValidationError):
    """A categorical passenger field holds a value outside its choices."""

    def __init__(self, field: str, value: Any, allowed: Sequence[str]):
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field}: {value!r}. Must be one of {', '.join(allowed)}"
        )


class AnalysisFailedError(SurvivalAnalysisError):
    """Unexpected failure while deriving features or scoring."""

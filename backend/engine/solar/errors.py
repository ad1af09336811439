"""Error taxonomy for the solar sizing engine.

Every error is a :class:`ValueError` subclass so callers that only care
about "bad input" can catch one type, while the API layer can still tell
the kinds apart.
"""

from __future__ import annotations

from typing import Any


class SolarEngineError(ValueError):
    """Base class for all calculation errors."""


class DomainError(SolarEngineError):
    """A required divisor evaluates to zero; the result is undefined."""


class InvalidInputError(SolarEngineError):
    """A numeric field is missing, non-finite or non-positive."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field} {reason}, got {value!r}")


class InvalidEnumError(SolarEngineError):
    """A value is not one of the recognised enumeration members."""

    def __init__(self, field: str, value: Any, allowed: list[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"{field} must be one of {', '.join(allowed)}, got {value!r}"
        )

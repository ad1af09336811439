"""Input and result checks shared by the sizing calculations."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

from .errors import DomainError, InvalidInputError


def require_finite(field: str, value: Any) -> float:
    """Return *value* as a float, raising if it is missing or not a real number."""
    if value is None:
        raise InvalidInputError(field, value, "is required")
    # bool is an int subclass but never a meaningful quantity here
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidInputError(field, value, "must be a real number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    return value


def require_positive(field: str, value: Any) -> float:
    """Return *value* as a float, raising unless it is finite and > 0."""
    value = require_finite(field, value)
    if value <= 0:
        raise InvalidInputError(field, value, "must be > 0")
    return value


def require_fraction(field: str, value: Any) -> float:
    """Return *value* as a float, raising unless it lies in (0, 1]."""
    value = require_positive(field, value)
    if value > 1:
        raise InvalidInputError(field, value, "must be <= 1")
    return value


def finite_result(name: str, value: float) -> float:
    """Return *value*, raising :class:`DomainError` if it overflowed to inf/NaN."""
    if not math.isfinite(value):
        raise DomainError(f"{name} is not representable ({value}); inputs are out of range")
    return value

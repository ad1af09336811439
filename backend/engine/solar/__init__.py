"""
Solar sizing engine.

Pure calculations for residential PV quotes: forward production estimate
from installed capacity, reverse capacity estimate from a monthly
consumption target, and module-count / area dimensioning.
"""

from .errors import (
    DomainError,
    InvalidEnumError,
    InvalidInputError,
    SolarEngineError,
)
from .production import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    CapacityInput,
    CapacityResult,
    ProductionInput,
    ProductionResult,
    estimate_production,
    estimate_required_capacity,
)
from .dimensioning import (
    DimensioningInput,
    DimensioningResult,
    InstallationSurface,
    estimate_dimensioning,
    module_count_for,
)

__all__ = [
    # errors
    "SolarEngineError",
    "DomainError",
    "InvalidInputError",
    "InvalidEnumError",
    # production
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "ProductionInput",
    "ProductionResult",
    "CapacityInput",
    "CapacityResult",
    "estimate_production",
    "estimate_required_capacity",
    # dimensioning
    "InstallationSurface",
    "DimensioningInput",
    "DimensioningResult",
    "estimate_dimensioning",
    "module_count_for",
]

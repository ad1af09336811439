"""
Forward and reverse energy estimates for a PV installation.

The model is the rule of thumb used for residential quotes:

    E_day [kWh] = P_installed [kWp] * HSP [h/day] * eta

where HSP (peak sun hours) is the number of equivalent hours per day at
standard test irradiance (1000 W/m^2) and eta is the overall system
derating (inverter, wiring, thermal and soiling losses).  The reverse
estimate solves the same relation for the installed power needed to cover
a monthly consumption target.

Both calculations are pure: no rounding, no clamping, no state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import DomainError, InvalidInputError
from .validation import (
    finite_result,
    require_finite,
    require_fraction,
    require_positive,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Calendar factors
# ---------------------------------------------------------------------------
DAYS_PER_MONTH: int = 30
DAYS_PER_YEAR: int = 365
MONTHS_PER_YEAR: int = 12


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProductionInput:
    installed_capacity_kwp: float
    peak_sun_hours: float       # h/day
    system_efficiency: float    # fraction, (0, 1]


@dataclass(frozen=True)
class ProductionResult:
    daily_energy_kwh: float
    monthly_energy_kwh: float
    yearly_energy_kwh: float
    efficiency_used: float
    peak_sun_hours_used: float


@dataclass(frozen=True)
class CapacityInput:
    monthly_energy_target_kwh: float
    peak_sun_hours: float
    system_efficiency: float


@dataclass(frozen=True)
class CapacityResult:
    required_capacity_kwp: float
    daily_energy_kwh: float
    yearly_energy_kwh: float
    efficiency_used: float
    peak_sun_hours_used: float


# ---------------------------------------------------------------------------
# Calculations
# ---------------------------------------------------------------------------

def estimate_production(params: ProductionInput) -> ProductionResult:
    """Estimate the energy delivered by an installation of known capacity.

    Parameters
    ----------
    params : ProductionInput
        Installed capacity (kWp), peak sun hours (h/day) and system
        efficiency (fraction).

    Returns
    -------
    ProductionResult
        Daily, 30-day month and 365-day year energy (kWh), plus the
        parameters that produced them.

    Raises
    ------
    InvalidInputError
        If any field is missing, non-finite or non-positive, or the
        efficiency exceeds 1.
    DomainError
        If an energy figure overflows the float range.
    """
    capacity = require_positive("installed_capacity_kwp", params.installed_capacity_kwp)
    psh = require_positive("peak_sun_hours", params.peak_sun_hours)
    efficiency = require_fraction("system_efficiency", params.system_efficiency)

    daily = finite_result("daily_energy_kwh", capacity * psh * efficiency)
    logger.debug(
        "production: %.4f kWp x %.2f h x %.3f -> %.4f kWh/day",
        capacity, psh, efficiency, daily,
    )

    return ProductionResult(
        daily_energy_kwh=daily,
        monthly_energy_kwh=finite_result("monthly_energy_kwh", daily * DAYS_PER_MONTH),
        yearly_energy_kwh=finite_result("yearly_energy_kwh", daily * DAYS_PER_YEAR),
        efficiency_used=efficiency,
        peak_sun_hours_used=psh,
    )


def estimate_required_capacity(params: CapacityInput) -> CapacityResult:
    """Estimate the installed capacity needed to meet a monthly energy target.

    ``required_kwp = target / (HSP * 30 * eta)``.  Feeding the result back
    into :func:`estimate_production` with the same HSP and efficiency
    reproduces the target monthly energy.

    Raises
    ------
    DomainError
        If ``peak_sun_hours * system_efficiency`` is zero, or a result
        overflows the float range.
    InvalidInputError
        If the target is missing, non-finite or non-positive, if either
        divisor factor is negative or non-finite, or if the efficiency
        exceeds 1.
    """
    target = require_positive("monthly_energy_target_kwh", params.monthly_energy_target_kwh)
    psh = require_finite("peak_sun_hours", params.peak_sun_hours)
    efficiency = require_finite("system_efficiency", params.system_efficiency)

    if psh < 0:
        raise InvalidInputError("peak_sun_hours", psh, "must be >= 0")
    if efficiency < 0:
        raise InvalidInputError("system_efficiency", efficiency, "must be >= 0")
    if efficiency > 1:
        raise InvalidInputError("system_efficiency", efficiency, "must be <= 1")

    divisor = psh * DAYS_PER_MONTH * efficiency
    if divisor == 0:
        raise DomainError(
            f"Required capacity is undefined: peak_sun_hours ({psh}) x "
            f"system_efficiency ({efficiency}) is zero"
        )

    required = finite_result("required_capacity_kwp", target / divisor)
    logger.debug(
        "required capacity: %.4f kWh/month / %.4f -> %.4f kWp",
        target, divisor, required,
    )

    return CapacityResult(
        required_capacity_kwp=required,
        daily_energy_kwh=target / DAYS_PER_MONTH,
        yearly_energy_kwh=finite_result("yearly_energy_kwh", target * MONTHS_PER_YEAR),
        efficiency_used=efficiency,
        peak_sun_hours_used=psh,
    )

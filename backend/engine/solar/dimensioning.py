"""
Physical layout of a PV array: module count and occupied area.

Modules are indivisible, so the count is always rounded up: 5 kWp built
from 550 W modules needs ceil(9.09) = 10 modules.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Any

from .errors import InvalidEnumError
from .validation import finite_result, require_positive

logger = logging.getLogger(__name__)

# Quotients this close to an integer are float noise, not a partial module
_COUNT_REL_TOL: float = 1e-9


class InstallationSurface(str, enum.Enum):
    CERAMIC = "ceramic"      # ceramic-tile roof
    METALLIC = "metallic"    # metal-sheet roof
    CARPORT = "carport"
    GROUND = "ground"        # ground-mounted structure

    @classmethod
    def parse(cls, value: Any) -> InstallationSurface:
        """Resolve a member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidEnumError(
            "installation_surface", value, [s.value for s in cls]
        )


@dataclass(frozen=True)
class DimensioningInput:
    capacity_kwp: float
    module_height_m: float
    module_width_m: float
    module_power_w: float
    installation_surface: InstallationSurface | str


@dataclass(frozen=True)
class DimensioningResult:
    module_count: int
    module_area_m2: float
    total_area_m2: float
    module_power_w: float
    installation_surface: InstallationSurface


def module_count_for(capacity_kwp: float, module_power_w: float) -> int:
    """Whole modules of *module_power_w* needed to reach *capacity_kwp*.

    Raises :class:`DomainError` if the module requirement overflows.
    """
    quotient = finite_result("module_count", capacity_kwp * 1000.0 / module_power_w)
    nearest = round(quotient)
    if nearest > 0 and math.isclose(quotient, nearest, rel_tol=_COUNT_REL_TOL):
        return int(nearest)
    return math.ceil(quotient)


def estimate_dimensioning(params: DimensioningInput) -> DimensioningResult:
    """Size the module array for a target capacity.

    Raises
    ------
    InvalidInputError
        If any numeric field is missing, non-finite or non-positive.
    InvalidEnumError
        If ``installation_surface`` is not a recognised surface.
    DomainError
        If the module count or an area overflows the float range.
    """
    capacity = require_positive("capacity_kwp", params.capacity_kwp)
    height = require_positive("module_height_m", params.module_height_m)
    width = require_positive("module_width_m", params.module_width_m)
    power = require_positive("module_power_w", params.module_power_w)
    surface = InstallationSurface.parse(params.installation_surface)

    module_area = finite_result("module_area_m2", height * width)
    count = module_count_for(capacity, power)
    logger.debug(
        "dimensioning: %.4f kWp / %.0f W -> %d modules on %s",
        capacity, power, count, surface.value,
    )

    return DimensioningResult(
        module_count=count,
        module_area_m2=module_area,
        total_area_m2=finite_result("total_area_m2", count * module_area),
        module_power_w=power,
        installation_surface=surface,
    )

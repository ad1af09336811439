"""Caller-side orchestration around the solar sizing engine.

The engine returns full-precision records; this module turns them into API
payloads, attaches rounded display values and decides which capacity feeds
the dimensioning step.
"""

import logging
from dataclasses import asdict

from engine.solar import (
    CapacityInput,
    CapacityResult,
    DimensioningInput,
    DimensioningResult,
    ProductionInput,
    ProductionResult,
    estimate_dimensioning,
    estimate_production,
    estimate_required_capacity,
)

from app.schemas.calculator import (
    CapacityRequest,
    CapacityResponse,
    CapacitySource,
    DimensioningRequest,
    DimensioningResponse,
    PlanRequest,
    PlanResponse,
    ProductionRequest,
    ProductionResponse,
)

logger = logging.getLogger(__name__)


class MissingCapacityError(Exception):
    """Neither an installed capacity nor a consumption target was given."""


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

def production_response(result: ProductionResult) -> ProductionResponse:
    return ProductionResponse(
        **asdict(result),
        display={
            "daily_kwh": round(result.daily_energy_kwh, 1),
            "monthly_kwh": round(result.monthly_energy_kwh, 1),
            "yearly_kwh": round(result.yearly_energy_kwh, 0),
            "efficiency_pct": round(result.efficiency_used * 100, 1),
            "peak_sun_hours": round(result.peak_sun_hours_used, 1),
        },
    )


def capacity_response(result: CapacityResult) -> CapacityResponse:
    return CapacityResponse(
        **asdict(result),
        display={
            "required_capacity_kwp": round(result.required_capacity_kwp, 2),
            "daily_kwh": round(result.daily_energy_kwh, 1),
            "yearly_kwh": round(result.yearly_energy_kwh, 0),
            "efficiency_pct": round(result.efficiency_used * 100, 1),
            "peak_sun_hours": round(result.peak_sun_hours_used, 1),
        },
    )


def dimensioning_response(result: DimensioningResult) -> DimensioningResponse:
    return DimensioningResponse(**asdict(result))


# ---------------------------------------------------------------------------
# Capacity source selection
# ---------------------------------------------------------------------------

def select_dimensioning_capacity(
    production_input: ProductionInput | None,
    capacity_result: CapacityResult | None,
    prefer: CapacitySource = "consumption",
) -> tuple[float, CapacitySource]:
    """Pick the capacity that sizes the module array.

    With both estimates available, *prefer* decides; the default gives the
    consumption-derived (reverse) capacity precedence over the installed
    capacity typed in for the forward estimate.  With only one available,
    that one is used regardless of *prefer*.
    """
    if production_input is None and capacity_result is None:
        raise MissingCapacityError(
            "Provide installed_capacity_kwp or monthly_energy_target_kwh"
        )
    if capacity_result is not None and (prefer == "consumption" or production_input is None):
        return capacity_result.required_capacity_kwp, "consumption"
    return production_input.installed_capacity_kwp, "production"


# ---------------------------------------------------------------------------
# Calculations
# ---------------------------------------------------------------------------

def calculate_production(body: ProductionRequest) -> ProductionResponse:
    result = estimate_production(
        ProductionInput(
            installed_capacity_kwp=body.installed_capacity_kwp,
            peak_sun_hours=body.peak_sun_hours,
            system_efficiency=body.system_efficiency,
        )
    )
    return production_response(result)


def calculate_capacity(body: CapacityRequest) -> CapacityResponse:
    result = estimate_required_capacity(
        CapacityInput(
            monthly_energy_target_kwh=body.monthly_energy_target_kwh,
            peak_sun_hours=body.peak_sun_hours,
            system_efficiency=body.system_efficiency,
        )
    )
    return capacity_response(result)


def calculate_dimensioning(body: DimensioningRequest) -> DimensioningResponse:
    result = estimate_dimensioning(
        DimensioningInput(
            capacity_kwp=body.capacity_kwp,
            module_height_m=body.module_height_m,
            module_width_m=body.module_width_m,
            module_power_w=body.module_power_w,
            installation_surface=body.installation_surface,
        )
    )
    return dimensioning_response(result)


def calculate_plan(body: PlanRequest) -> PlanResponse:
    """Run whichever estimates the request allows, then dimension the array."""
    production_input: ProductionInput | None = None
    production: ProductionResult | None = None
    capacity: CapacityResult | None = None

    if body.installed_capacity_kwp is not None:
        production_input = ProductionInput(
            installed_capacity_kwp=body.installed_capacity_kwp,
            peak_sun_hours=body.peak_sun_hours,
            system_efficiency=body.system_efficiency,
        )
        production = estimate_production(production_input)

    if body.monthly_energy_target_kwh is not None:
        capacity = estimate_required_capacity(
            CapacityInput(
                monthly_energy_target_kwh=body.monthly_energy_target_kwh,
                peak_sun_hours=body.peak_sun_hours,
                system_efficiency=body.system_efficiency,
            )
        )

    capacity_kwp, source = select_dimensioning_capacity(
        production_input, capacity, prefer=body.capacity_source
    )
    logger.info("Dimensioning %.3f kWp from %s estimate", capacity_kwp, source)

    dimensioning = estimate_dimensioning(
        DimensioningInput(
            capacity_kwp=capacity_kwp,
            module_height_m=body.module_height_m,
            module_width_m=body.module_width_m,
            module_power_w=body.module_power_w,
            installation_surface=body.installation_surface,
        )
    )

    return PlanResponse(
        production=production_response(production) if production else None,
        capacity=capacity_response(capacity) if capacity else None,
        dimensioning=dimensioning_response(dimensioning),
        capacity_source_used=source,
        capacity_kwp_used=capacity_kwp,
    )

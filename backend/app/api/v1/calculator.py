"""Solar calculator endpoints: production, required capacity, dimensioning."""

from fastapi import APIRouter, HTTPException, status

from app.config import settings
from app.schemas.calculator import (
    CalculatorDefaultsResponse,
    CapacityRequest,
    CapacityResponse,
    DimensioningRequest,
    DimensioningResponse,
    PlanRequest,
    PlanResponse,
    ProductionRequest,
    ProductionResponse,
)
from app.services.calculator_service import (
    MissingCapacityError,
    calculate_capacity,
    calculate_dimensioning,
    calculate_plan,
    calculate_production,
)

from engine.solar import DAYS_PER_MONTH, DAYS_PER_YEAR, InstallationSurface

router = APIRouter()


@router.get(
    "/defaults",
    response_model=CalculatorDefaultsResponse,
    summary="Calculator input bounds",
)
async def calculator_defaults():
    return CalculatorDefaultsResponse(
        peak_sun_hours={
            "min": settings.peak_sun_hours_min,
            "max": settings.peak_sun_hours_max,
            "step": settings.peak_sun_hours_step,
            "default": settings.peak_sun_hours_default,
        },
        system_efficiency={
            "min": settings.efficiency_min,
            "max": settings.efficiency_max,
            "step": settings.efficiency_step,
            "default": settings.efficiency_default,
        },
        installation_surfaces=list(InstallationSurface),
        days_per_month=DAYS_PER_MONTH,
        days_per_year=DAYS_PER_YEAR,
    )


@router.post(
    "/production",
    response_model=ProductionResponse,
    summary="Energy production from installed capacity",
    description="kWh/day = kWp × peak sun hours × efficiency; month = 30 days, year = 365 days.",
)
async def production(body: ProductionRequest):
    return calculate_production(body)


@router.post(
    "/capacity",
    response_model=CapacityResponse,
    summary="Required capacity from monthly consumption",
)
async def capacity(body: CapacityRequest):
    return calculate_capacity(body)


@router.post(
    "/dimensioning",
    response_model=DimensioningResponse,
    summary="Module count and area for a capacity",
)
async def dimensioning(body: DimensioningRequest):
    return calculate_dimensioning(body)


@router.post(
    "/plan",
    response_model=PlanResponse,
    summary="Production and/or capacity estimate followed by dimensioning",
    description="When both an installed capacity and a consumption target are given, "
    "capacity_source chooses which one sizes the array (default: consumption).",
)
async def plan(body: PlanRequest):
    try:
        return calculate_plan(body)
    except MissingCapacityError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )

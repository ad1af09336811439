from typing import Literal

from pydantic import BaseModel, Field

from app.config import settings
from engine.solar import InstallationSurface

CapacitySource = Literal["consumption", "production"]


def _peak_sun_hours_field():
    return Field(
        default=settings.peak_sun_hours_default,
        ge=settings.peak_sun_hours_min,
        le=settings.peak_sun_hours_max,
        description="Peak sun hours (h/day)",
    )


def _efficiency_field():
    return Field(
        default=settings.efficiency_default,
        ge=settings.efficiency_min,
        le=settings.efficiency_max,
        description="System efficiency as a fraction",
    )


# --- Requests ---

class ProductionRequest(BaseModel):
    installed_capacity_kwp: float = Field(gt=0, description="Installed capacity (kWp)")
    peak_sun_hours: float = _peak_sun_hours_field()
    system_efficiency: float = _efficiency_field()


class CapacityRequest(BaseModel):
    monthly_energy_target_kwh: float = Field(gt=0, description="Monthly consumption (kWh)")
    peak_sun_hours: float = _peak_sun_hours_field()
    system_efficiency: float = _efficiency_field()


class ModuleSpec(BaseModel):
    module_height_m: float = Field(gt=0)
    module_width_m: float = Field(gt=0)
    module_power_w: float = Field(gt=0)
    installation_surface: InstallationSurface


class DimensioningRequest(ModuleSpec):
    capacity_kwp: float = Field(gt=0)


class PlanRequest(ModuleSpec):
    installed_capacity_kwp: float | None = Field(default=None, gt=0)
    monthly_energy_target_kwh: float | None = Field(default=None, gt=0)
    peak_sun_hours: float = _peak_sun_hours_field()
    system_efficiency: float = _efficiency_field()
    capacity_source: CapacitySource = Field(
        default="consumption",
        description="Which estimate sizes the array when both are available",
    )


# --- Responses ---

class ProductionDisplay(BaseModel):
    daily_kwh: float
    monthly_kwh: float
    yearly_kwh: float
    efficiency_pct: float
    peak_sun_hours: float


class ProductionResponse(BaseModel):
    daily_energy_kwh: float
    monthly_energy_kwh: float
    yearly_energy_kwh: float
    efficiency_used: float
    peak_sun_hours_used: float
    display: ProductionDisplay


class CapacityDisplay(BaseModel):
    required_capacity_kwp: float
    daily_kwh: float
    yearly_kwh: float
    efficiency_pct: float
    peak_sun_hours: float


class CapacityResponse(BaseModel):
    required_capacity_kwp: float
    daily_energy_kwh: float
    yearly_energy_kwh: float
    efficiency_used: float
    peak_sun_hours_used: float
    display: CapacityDisplay


class DimensioningResponse(BaseModel):
    module_count: int
    module_area_m2: float
    total_area_m2: float
    module_power_w: float
    installation_surface: InstallationSurface


class PlanResponse(BaseModel):
    production: ProductionResponse | None = None
    capacity: CapacityResponse | None = None
    dimensioning: DimensioningResponse
    capacity_source_used: CapacitySource
    capacity_kwp_used: float


class SliderBounds(BaseModel):
    min: float
    max: float
    step: float
    default: float


class CalculatorDefaultsResponse(BaseModel):
    peak_sun_hours: SliderBounds
    system_efficiency: SliderBounds
    installation_surfaces: list[InstallationSurface]
    days_per_month: int
    days_per_year: int

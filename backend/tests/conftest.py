"""Shared test fixtures for the solar sizing engine and API tests."""

from __future__ import annotations

import pytest

from engine.solar import (
    CapacityInput,
    DimensioningInput,
    InstallationSurface,
    ProductionInput,
)


# ======================================================================
# Engine inputs
# ======================================================================

@pytest.fixture
def residential_production() -> ProductionInput:
    """5.5 kWp rooftop, 5.5 h/day of peak sun, 85 % system efficiency."""
    return ProductionInput(
        installed_capacity_kwp=5.5,
        peak_sun_hours=5.5,
        system_efficiency=0.85,
    )


@pytest.fixture
def residential_consumption() -> CapacityInput:
    """Household using 350 kWh/month under the same sun and losses."""
    return CapacityInput(
        monthly_energy_target_kwh=350.0,
        peak_sun_hours=5.5,
        system_efficiency=0.85,
    )


@pytest.fixture
def module_550w() -> dict:
    """Common 550 W module, 2.0 m x 1.2 m."""
    return {
        "module_height_m": 2.0,
        "module_width_m": 1.2,
        "module_power_w": 550.0,
        "installation_surface": InstallationSurface.CERAMIC,
    }


@pytest.fixture
def residential_dimensioning(module_550w) -> DimensioningInput:
    return DimensioningInput(capacity_kwp=2.4955, **module_550w)

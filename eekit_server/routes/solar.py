"""Solar routes: array, inverter, battery bank and consumption sizing."""

import logging

from fastapi import APIRouter, HTTPException

from eekit_server.models import (
    BatteryBankRequest,
    CalculationResponse,
    InverterRequest,
    MonthlyRequest,
    SolarArrayRequest,
)
from eekit.solar import battery_bank, inverter_count, monthly_consumption, solar_array

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/solar")


def _array(request: SolarArrayRequest):
    return solar_array(
        request.energy_consumption,
        request.irradiation,
        request.efficiency,
        request.panel_power,
        request.system_losses,
    )


@router.post("/array", response_model=CalculationResponse)
async def solar_array_endpoint(request: SolarArrayRequest):
    """PV array power, panel count and recommended inverter band."""
    try:
        return CalculationResponse.from_result(_array(request))
    except Exception:
        logger.warning("Solar array sizing failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Solar array sizing failed.")


@router.post("/inverter", response_model=CalculationResponse)
async def inverter_endpoint(request: InverterRequest):
    """Number of inverters for the array's sizing band."""
    try:
        array = _array(request.array)
        result = inverter_count(array, request.max_power, request.unit.value)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Inverter sizing failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Inverter sizing failed.")


@router.post("/battery", response_model=CalculationResponse)
async def battery_endpoint(request: BatteryBankRequest):
    try:
        result = battery_bank(
            request.daily_load,
            request.autonomy_days,
            request.dod,
            request.system_voltage,
            request.battery_ah,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Battery bank sizing failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Battery bank sizing failed.")


@router.post("/monthly", response_model=CalculationResponse)
async def monthly_endpoint(request: MonthlyRequest):
    """Average consumption and annual cost from monthly bills."""
    try:
        result = monthly_consumption(request.usage, request.tariff)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Monthly consumption calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Monthly consumption calculation failed.")

"""Electrical routes: three-phase power, star/delta, transformer, motor, PF correction."""

import logging

from fastapi import APIRouter, HTTPException

from eekit_server.models import (
    CalculationResponse,
    MotorRequest,
    PowerFactorRequest,
    StarDeltaRequest,
    ThreePhaseRequest,
    TransformerRequest,
)
from eekit.electrical import (
    motor_sizing,
    power_factor_correction,
    star_delta_transform,
    three_phase_power,
    transformer_sizing,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/three-phase", response_model=CalculationResponse)
async def three_phase_endpoint(request: ThreePhaseRequest):
    """Balanced three-phase kVA, kW and kVAR from line values."""
    try:
        result = three_phase_power(
            request.voltage,
            request.current,
            request.pf,
            request.efficiency,
            request.connection.value,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Three-phase calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Three-phase calculation failed.")


@router.post("/star-delta", response_model=CalculationResponse)
async def star_delta_endpoint(request: StarDeltaRequest):
    try:
        result = star_delta_transform(request.direction.value, request.r1, request.r2, request.r3)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Star/delta transform failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Star/delta transform failed.")


@router.post("/transformer", response_model=CalculationResponse)
async def transformer_endpoint(request: TransformerRequest):
    """Transformer kVA rating and winding currents."""
    try:
        result = transformer_sizing(
            request.phase.value,
            request.load,
            request.load_unit.value,
            request.primary_v,
            request.secondary_v,
            request.pf,
            request.load_type.value,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Transformer sizing failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Transformer sizing failed.")


@router.post("/motor", response_model=CalculationResponse)
async def motor_endpoint(request: MotorRequest):
    """Motor full-load current, starting current and torque."""
    try:
        result = motor_sizing(
            request.power,
            request.unit.value,
            request.voltage,
            request.phase.value,
            request.pf,
            request.efficiency,
            request.start.value,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Motor sizing failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Motor sizing failed.")


@router.post("/power-factor", response_model=CalculationResponse)
async def power_factor_endpoint(request: PowerFactorRequest):
    """Capacitor bank to raise a load's power factor."""
    try:
        result = power_factor_correction(
            request.power_kw,
            request.old_pf,
            request.new_pf,
            request.voltage,
            request.frequency,
            request.phase.value,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Power factor correction failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Power factor correction failed.")

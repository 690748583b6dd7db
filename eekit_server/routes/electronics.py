"""Electronics routes: Ohm's law, LED, divider, 555, op-amp, filters, PCB traces."""

import logging

from fastapi import APIRouter, HTTPException

from eekit_server.models import (
    BatteryLifeRequest,
    CalculationResponse,
    CapacitorCodeRequest,
    ComparatorRequest,
    DividerRequest,
    FilterRequest,
    LedRequest,
    OhmsLawRequest,
    OpAmpRequest,
    PcbTraceRequest,
    RCTimeRequest,
    Timer555Request,
)
from eekit.components import engineering_notation, format_ohms
from eekit.electronics import (
    battery_life,
    capacitor_code,
    comparator_output,
    led_forward_voltage,
    led_resistor,
    opamp_gain,
    pcb_trace_width,
    rc_filter,
    rc_time_constant,
    timer_555,
    voltage_divider,
)
from eekit.ohms_law import solve_ohms_law

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ohms-law", response_model=CalculationResponse)
async def ohms_law_endpoint(request: OhmsLawRequest):
    """Resolve V, I, R and P from any two of them."""
    try:
        result = solve_ohms_law(request.voltage, request.current, request.resistance, request.power)
        if not result.resolved:
            return CalculationResponse(result=None)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Ohm's law calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Ohm's law calculation failed. Provide two positive values.")


@router.post("/led-resistor", response_model=CalculationResponse)
async def led_resistor_endpoint(request: LedRequest):
    """Series resistor for an LED, with the next E12 value."""
    try:
        forward_v = request.forward_v
        if forward_v is None and request.color is not None:
            forward_v = led_forward_voltage(request.color.value)
        result = led_resistor(request.supply_v, forward_v, request.current_ma)
        display = format_ohms(result.nearest) if result else None
        return CalculationResponse.from_result(result, display=display)
    except Exception:
        logger.warning("LED resistor calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="LED resistor calculation failed.")


@router.post("/voltage-divider", response_model=CalculationResponse)
async def voltage_divider_endpoint(request: DividerRequest):
    try:
        result = voltage_divider(request.vin, request.r1, request.r2, request.r1_unit, request.r2_unit)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Voltage divider calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Voltage divider calculation failed.")


@router.post("/capacitor-code", response_model=CalculationResponse)
async def capacitor_code_endpoint(request: CapacitorCodeRequest):
    """Decode a 3-digit ceramic capacitor marking."""
    try:
        result = capacitor_code(request.code)
        display = result.display if result else None
        return CalculationResponse.from_result(result, display=display)
    except Exception:
        logger.warning("Capacitor code decode failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Capacitor code decode failed.")


@router.post("/timer-555", response_model=CalculationResponse)
async def timer_555_endpoint(request: Timer555Request):
    """NE555 astable or monostable timing."""
    try:
        result = timer_555(
            request.mode.value,
            request.r1,
            request.r2,
            request.c,
            request.r1_unit,
            request.r2_unit,
            request.c_unit,
        )
        display = result.description if result else None
        return CalculationResponse.from_result(result, display=display)
    except Exception:
        logger.warning("555 timer calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="555 timer calculation failed.")


@router.post("/battery-life", response_model=CalculationResponse)
async def battery_life_endpoint(request: BatteryLifeRequest):
    try:
        hours = battery_life(
            request.capacity,
            request.current,
            request.efficiency,
            request.capacity_unit,
            request.current_unit,
        )
        if hours is None:
            return CalculationResponse(result=None)
        return CalculationResponse.from_result({"hours": hours, "days": hours / 24})
    except Exception:
        logger.warning("Battery life calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Battery life calculation failed.")


@router.post("/rc-time", response_model=CalculationResponse)
async def rc_time_endpoint(request: RCTimeRequest):
    try:
        result = rc_time_constant(request.r, request.c, request.r_unit, request.c_unit)
        display = engineering_notation(result.tau, "s") if result else None
        return CalculationResponse.from_result(result, display=display)
    except Exception:
        logger.warning("RC time constant calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="RC time constant calculation failed.")


@router.post("/opamp", response_model=CalculationResponse)
async def opamp_endpoint(request: OpAmpRequest):
    """Closed-loop gain for the common op-amp configurations."""
    try:
        result = opamp_gain(
            request.config.value,
            request.r1,
            request.r2,
            request.r1_unit,
            request.r2_unit,
            request.v1,
            request.v2,
        )
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Op-amp calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Op-amp calculation failed.")


@router.post("/comparator", response_model=CalculationResponse)
async def comparator_endpoint(request: ComparatorRequest):
    try:
        result = comparator_output(request.v_plus, request.v_minus, request.vcc, request.vee)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("Comparator calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Comparator calculation failed.")


@router.post("/filter", response_model=CalculationResponse)
async def filter_endpoint(request: FilterRequest):
    """RC low-pass/high-pass cutoff or two-stage band-pass."""
    try:
        result = rc_filter(
            request.filter_type.value,
            request.r,
            request.c,
            request.r_unit,
            request.c_unit,
            request.r2,
            request.c2,
            request.r2_unit,
            request.c2_unit,
        )
        display = result.error if result else None
        return CalculationResponse.from_result(result, display=display)
    except Exception:
        logger.warning("RC filter calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="RC filter calculation failed.")


@router.post("/pcb-trace", response_model=CalculationResponse)
async def pcb_trace_endpoint(request: PcbTraceRequest):
    """IPC-2221 minimum trace width."""
    try:
        result = pcb_trace_width(request.current, request.temp_rise, request.thickness_mm, request.layer.value)
        return CalculationResponse.from_result(result)
    except Exception:
        logger.warning("PCB trace width calculation failed", exc_info=True)
        raise HTTPException(status_code=400, detail="PCB trace width calculation failed.")

"""Resistor routes: color bands to value and value to color bands."""

import logging

from fastapi import APIRouter, HTTPException

from eekit_server.models import (
    CalculationResponse,
    ResistorBandsResponse,
    ResistorDecodeRequest,
    ResistorEncodeRequest,
    ResistorEncodeResponse,
)
from eekit.components import format_ohms
from eekit.resistor import band_colors, calculate_4band, calculate_5band, tolerance_color, value_to_bands
from eekit.values import scale

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resistor")


@router.post("/decode", response_model=CalculationResponse)
async def decode_resistor(request: ResistorDecodeRequest):
    """Read a 4-band (b3 omitted) or 5-band resistor."""
    try:
        tolerance_color(request.tolerance)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        if request.b3 is None:
            reading = calculate_4band(request.b1, request.b2, request.multiplier, request.tolerance)
        else:
            reading = calculate_5band(request.b1, request.b2, request.b3, request.multiplier, request.tolerance)
        return CalculationResponse.from_result(reading, display=reading.display)
    except Exception:
        logger.warning("Resistor decode failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Resistor decode failed.")


@router.post("/encode", response_model=ResistorEncodeResponse)
async def encode_resistor(request: ResistorEncodeRequest):
    """Find the color bands for a resistance."""
    try:
        tolerance_color(request.tolerance)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        bands = value_to_bands(scale(request.value, request.unit), request.bands, request.tolerance)
        if bands is None:
            return ResistorEncodeResponse(result=None)

        ohms = bands.ohms
        return ResistorEncodeResponse(
            result=ResistorBandsResponse(
                b1=bands.b1,
                b2=bands.b2,
                b3=bands.b3,
                multiplier=bands.multiplier,
                tolerance=bands.tolerance,
                bands=bands.bands,
                ohms=ohms,
                display=format_ohms(ohms),
                colors=band_colors(bands),
            )
        )
    except Exception:
        logger.warning("Resistor encode failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Resistor encode failed.")

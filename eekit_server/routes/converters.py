"""Converter routes: SI prefixes, imperial units and number bases."""

import logging

from fastapi import APIRouter, HTTPException

from eekit_server.models import (
    BaseConversionRequest,
    CalculationResponse,
    ImperialRequest,
    PrefixRequest,
)
from eekit.conversion import convert_base, convert_imperial, convert_prefix, format_prefix_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert")


@router.post("/prefix", response_model=CalculationResponse)
async def prefix_endpoint(request: PrefixRequest):
    """SI prefix, area and volume conversion."""
    try:
        value = convert_prefix(request.value, request.from_unit, request.to_unit)
        if value is None:
            return CalculationResponse(result=None)
        return CalculationResponse.from_result(value, display=format_prefix_result(value))
    except Exception:
        logger.warning("Prefix conversion failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Prefix conversion failed.")


@router.post("/imperial", response_model=CalculationResponse)
async def imperial_endpoint(request: ImperialRequest):
    try:
        value = convert_imperial(request.value, request.from_unit, request.to_unit, request.category.value)
        return CalculationResponse.from_result(value)
    except ValueError as e:
        logger.warning("Imperial conversion rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.warning("Imperial conversion failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Imperial conversion failed.")


@router.post("/base", response_model=CalculationResponse)
async def base_endpoint(request: BaseConversionRequest):
    """One integer in binary, octal, decimal and hexadecimal; empty input clears all views."""
    try:
        return CalculationResponse.from_result(convert_base(request.text, request.base))
    except Exception:
        logger.warning("Base conversion failed", exc_info=True)
        raise HTTPException(status_code=400, detail="Base conversion failed.")

"""FastAPI route definitions for the fitment endpoint."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.dependencies import get_fitment_service
from ..core.errors import FitmentError, MalformedRequestError, MissingFieldsError
from ..core.logging import logger
from ..models.fitment import ErrorResponse, FitmentQuery, FitmentResult
from ..services.fitment import FitmentService

router = APIRouter()


def parse_fitment_query(body: bytes) -> FitmentQuery:
    """Deserialize and validate the request body.

    Raises:
        MalformedRequestError: body is not a JSON object with usable fields.
        MissingFieldsError: year, make or model is absent or empty.
    """
    try:
        payload = json.loads(body) if body else {}
    except ValueError as e:
        raise MalformedRequestError(f"Body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedRequestError("Body must be a JSON object")

    try:
        query = FitmentQuery.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise MalformedRequestError(f"Invalid field types: {fields}") from e

    missing = query.missing_fields()
    if missing:
        logger.info(f"Fitment request missing fields: {', '.join(missing)}")
        raise MissingFieldsError(missing)

    return query


@router.options("/fitment")
async def fitment_preflight() -> dict[str, str]:
    """CORS preflight acknowledgement."""
    return {"message": "Preflight call successful"}


@router.post(
    "/fitment",
    response_model=FitmentResult,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def fitment(
    request: Request,
    service: Annotated[FitmentService, Depends(get_fitment_service)],
) -> Any:
    """
    Wheel and tire fitment for a vehicle.

    Body: ``{"year", "make", "model", "trim"?}``. Returns OEM specs plus
    upgrade options keyed by wheel diameter ("20", "22", "24"), exactly as
    produced by the completion model.
    """
    query = parse_fitment_query(await request.body())
    try:
        data = await service.lookup(query)
    except FitmentError:
        raise
    except Exception as e:
        raise FitmentError(str(e)) from e
    # Returned as-is; response_model documents the expected shape only
    return JSONResponse(content=data)

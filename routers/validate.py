"""Validate endpoint: confirm an address is deliverable with USPS."""

from fastapi import APIRouter, Depends, HTTPException

from auth import require_api_key
from config import USPS_USER_ID
from exceptions import ParseError, RemoteError, UnconfirmedMatch
from models import ValidateRequest, ValidateResponse
from services.validator import validate_address_string

router = APIRouter(
    prefix="/api", tags=["validate"], dependencies=[Depends(require_api_key)]
)


@router.post("/validate", response_model=ValidateResponse)
async def validate_address(req: ValidateRequest) -> ValidateResponse:
    usps_id = req.usps_id or USPS_USER_ID
    try:
        match = await validate_address_string(req.address, usps_id)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnconfirmedMatch as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "match": exc.match.model_dump()},
        ) from exc
    except RemoteError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ValidateResponse(input=req.address, match=match)

"""Parse endpoint: show the fragments and the USPS candidate for an address."""

from fastapi import APIRouter, Depends, HTTPException

from auth import require_api_key
from exceptions import ParseError
from models import ParseRequest, ParseResponse
from services.parser import parse_location
from services.validator import build_candidate

router = APIRouter(
    prefix="/api", tags=["parse"], dependencies=[Depends(require_api_key)]
)


@router.post("/parse", response_model=ParseResponse)
def parse_address(req: ParseRequest) -> ParseResponse:
    try:
        fragments = parse_location(req.address)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ParseResponse(
        input=req.address,
        fragments=fragments,
        candidate=build_candidate(fragments),
    )

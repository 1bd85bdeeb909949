"""Shared Pydantic models for parsed fragments, USPS records and payloads."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class ParsedAddressFragments(BaseModel):
    """Street-level pieces pulled out of a free-form address.

    Every field is optional; sparse input simply leaves fields unset.
    """
    house_number: Optional[str] = None
    street_prefix: Optional[str] = None
    street_name: Optional[str] = None
    street_type: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None


class AddressCandidate(BaseModel):
    """The address submitted to USPS.  Built once per call, never mutated."""
    model_config = ConfigDict(frozen=True)

    street1: str
    street2: Optional[str] = None
    city: str
    state: str
    zip: str


# ---------------------------------------------------------------------------
# USPS
# ---------------------------------------------------------------------------

class ClosestMatch(BaseModel):
    """USPS's closest match for a submitted address.

    Returned whether or not the address was confirmed; ``dpv_confirmation``
    tells the two apart.
    """
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    zip4: Optional[str] = None
    urbanization: Optional[str] = None
    delivery_point: Optional[str] = None
    carrier_route: Optional[str] = None
    footnotes: Optional[str] = None
    dpv_confirmation: Optional[str] = None
    dpv_cmra: Optional[str] = None
    dpv_footnotes: Optional[str] = None
    business: Optional[str] = None
    central_delivery_point: Optional[str] = None
    vacant: Optional[str] = None
    return_text: Optional[str] = None


# ---------------------------------------------------------------------------
# Parse endpoint
# ---------------------------------------------------------------------------

class ParseRequest(BaseModel):
    address: str = Field(..., max_length=1000)


class ParseResponse(BaseModel):
    input: str
    fragments: ParsedAddressFragments
    candidate: AddressCandidate


# ---------------------------------------------------------------------------
# Validate endpoint
# ---------------------------------------------------------------------------

class ValidateRequest(BaseModel):
    """A raw address plus an optional USPS Web Tools user ID.

    When ``usps_id`` is omitted the server's ``USPS_USER_ID`` is used.
    """
    address: str = Field(..., max_length=1000)
    usps_id: Optional[str] = Field(None, max_length=256)


class ValidateResponse(BaseModel):
    input: str
    match: ClosestMatch

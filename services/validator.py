"""Parse a free-form address and confirm it with USPS."""

import logging
from typing import Callable

from config import DPV_CONFIRMED, USPS_SERVER, USPS_TTL_MS
from exceptions import UnconfirmedMatch
from models import AddressCandidate, ClosestMatch, ParsedAddressFragments
from services.parser import AddressParser, parse_location
from services.usps import USPSClient, VerificationClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., VerificationClient]


def build_candidate(fragments: ParsedAddressFragments) -> AddressCandidate:
    """Assemble the USPS candidate from parsed *fragments*.

    Absent street pieces become empty strings but keep their separator,
    so "123 Main St" without a prefix yields ``"123  Main St"``.  USPS
    tolerates the extra whitespace.
    """
    street1 = " ".join(
        value or ""
        for value in (
            fragments.house_number,
            fragments.street_prefix,
            fragments.street_name,
            fragments.street_type,
        )
    )
    return AddressCandidate(
        street1=street1,
        city=fragments.city or "",
        state=fragments.state or "",
        zip=fragments.postal_code or "",
    )


async def validate_address_string(
    address_string: str,
    usps_id: str,
    *,
    parser: AddressParser = parse_location,
    client_factory: ClientFactory = USPSClient,
) -> ClosestMatch:
    """Parse *address_string* and verify it against USPS with *usps_id*.

    Returns the closest match when USPS confirms it deliverable (DPV
    ``"Y"``).  Raises :class:`~exceptions.ParseError` for untokenizable
    input, :class:`~exceptions.RemoteError` when the call fails and
    :class:`~exceptions.UnconfirmedMatch` carrying the match otherwise.
    """
    candidate = build_candidate(parser(address_string))

    client = client_factory(server=USPS_SERVER, user_id=usps_id, ttl=USPS_TTL_MS)
    match = await client.verify(candidate)

    if match.dpv_confirmation == DPV_CONFIRMED:
        logger.debug("USPS confirmed %r", candidate.street1)
        return match
    logger.debug(
        "USPS did not confirm %r (dpv_confirmation=%r)",
        candidate.street1,
        match.dpv_confirmation,
    )
    raise UnconfirmedMatch(match)

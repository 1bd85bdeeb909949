"""USPS Web Tools address verification client."""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Protocol

import httpx

from exceptions import RemoteError
from models import AddressCandidate, ClosestMatch

logger = logging.getLogger(__name__)


class VerificationClient(Protocol):
    async def verify(self, candidate: AddressCandidate) -> ClosestMatch: ...


# USPS response element -> ClosestMatch field.  USPS puts the primary
# street line in Address2 and the secondary (apt, suite) in Address1.
RESPONSE_FIELDS: dict[str, str] = {
    "Address2": "street1",
    "Address1": "street2",
    "City": "city",
    "State": "state",
    "Zip5": "zip",
    "Zip4": "zip4",
    "Urbanization": "urbanization",
    "DeliveryPoint": "delivery_point",
    "CarrierRoute": "carrier_route",
    "Footnotes": "footnotes",
    "DPVConfirmation": "dpv_confirmation",
    "DPVCMRA": "dpv_cmra",
    "DPVFootnotes": "dpv_footnotes",
    "Business": "business",
    "CentralDeliveryPoint": "central_delivery_point",
    "Vacant": "vacant",
    "ReturnText": "return_text",
}


def build_verify_xml(user_id: str, candidate: AddressCandidate) -> str:
    """Render an ``AddressValidateRequest`` document for *candidate*."""
    root = ET.Element("AddressValidateRequest", USERID=user_id)
    ET.SubElement(root, "Revision").text = "1"
    address = ET.SubElement(root, "Address", ID="0")
    ET.SubElement(address, "Address1").text = candidate.street2 or ""
    ET.SubElement(address, "Address2").text = candidate.street1
    ET.SubElement(address, "City").text = candidate.city
    ET.SubElement(address, "State").text = candidate.state
    ET.SubElement(address, "Zip5").text = candidate.zip
    ET.SubElement(address, "Zip4").text = ""
    return ET.tostring(root, encoding="unicode")


def _raise_for_error(element: Optional[ET.Element]) -> None:
    if element is None:
        return
    number = (element.findtext("Number") or "").strip() or None
    description = (element.findtext("Description") or "").strip() or None
    logger.warning("USPS returned error %s: %s", number, description)
    raise RemoteError(
        f"USPS error {number}: {description}",
        number=number,
        description=description,
    )


def parse_verify_response(content: str) -> ClosestMatch:
    """Turn an ``AddressValidateResponse`` body into a :class:`ClosestMatch`.

    Raises :class:`RemoteError` for malformed XML, a missing ``Address``
    element or any ``Error`` element USPS sends back.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise RemoteError(f"Malformed USPS response: {exc}") from exc

    if root.tag == "Error":
        _raise_for_error(root)

    address = root.find("Address")
    if address is None:
        raise RemoteError("USPS response has no Address element")
    _raise_for_error(address.find("Error"))

    fields: dict[str, str] = {}
    for child in address:
        key = RESPONSE_FIELDS.get(child.tag)
        if key is not None:
            fields[key] = (child.text or "").strip()
    return ClosestMatch(**fields)


class USPSClient:
    """Single-use client for the USPS ``Verify`` API.

    *ttl* is the request timeout in milliseconds.  *transport* lets tests
    swap in an :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        server: str,
        user_id: str,
        ttl: int,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.server = server
        self.user_id = user_id
        self.ttl = ttl
        self._transport = transport

    async def verify(self, candidate: AddressCandidate) -> ClosestMatch:
        params = {"API": "Verify", "XML": build_verify_xml(self.user_id, candidate)}
        logger.debug("USPS Verify request for %r", candidate.street1)
        try:
            async with httpx.AsyncClient(
                timeout=self.ttl / 1000, transport=self._transport
            ) as client:
                resp = await client.get(self.server, params=params)
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("USPS request failed: %s", exc)
            raise RemoteError(f"USPS request failed: {exc}") from exc
        return parse_verify_response(resp.text)

"""Address parsing service using the usaddress library."""

import logging
import re
from typing import Protocol

import usaddress

from exceptions import ParseError
from models import ParsedAddressFragments

logger = logging.getLogger(__name__)


class AddressParser(Protocol):
    def __call__(self, raw: str) -> ParsedAddressFragments: ...


# Map the usaddress tags we consume to fragment field names.
TAG_NAMES: dict[str, str] = {
    "AddressNumber": "house_number",
    "StreetNamePreDirectional": "street_prefix",
    "StreetName": "street_name",
    "StreetNamePostType": "street_type",
    "PlaceName": "city",
    "StateName": "state",
    "ZipCode": "postal_code",
}


def _clean(raw: str) -> str:
    """Drop parenthesized text and collapse runs of whitespace.

    Parenthesized text is typically wayfinding notes (e.g. "(EAST)",
    "(UPPER LEVEL)") that confuse usaddress.
    """
    cleaned = re.sub(r"\([^)]*\)", "", raw)
    # Strip any remaining unmatched parentheses (e.g. "123 Main) St").
    cleaned = cleaned.replace("(", "").replace(")", "")
    return re.sub(r"\s{2,}", " ", cleaned).strip()


def _merge_repeated(parsed_string: list[tuple[str, str]]) -> dict[str, str]:
    """Fold raw (token, label) pairs into one value per label.

    Used when usaddress refuses to tag because a label repeats.  An
    ``IntersectionSeparator`` sitting between two ``AddressNumber``
    tokens marks a dual address ("1804 & 1810"), which is joined with a
    hyphen; every other repeat is joined with a space.
    """
    tagged: dict[str, str] = {}
    prev_label: str | None = None
    separator_before = False
    for token, label in parsed_string:
        token = token.strip(" ,;")
        if label == "IntersectionSeparator" and prev_label == "AddressNumber":
            separator_before = True
            prev_label = label
            continue

        if label in tagged:
            if label == "AddressNumber" and separator_before:
                tagged[label] += f"-{token}"
            else:
                tagged[label] += f" {token}"
        else:
            tagged[label] = token

        separator_before = False
        prev_label = label
    return tagged


def parse_location(raw: str) -> ParsedAddressFragments:
    """Parse *raw* into :class:`ParsedAddressFragments`.

    Tolerant of missing or reordered parts: anything usaddress does not
    label is left as ``None``.  Raises :class:`ParseError` only when
    *raw* is not text at all.
    """
    if not isinstance(raw, str):
        raise ParseError(f"Cannot tokenize address of type {type(raw).__name__}")

    cleaned = _clean(raw)
    try:
        tagged, _ = usaddress.tag(cleaned)
    except usaddress.RepeatedLabelError as exc:
        logger.debug("Repeated labels in %r; merging raw tokens", cleaned)
        tagged = _merge_repeated(exc.parsed_string)

    fields = {
        TAG_NAMES[label]: value
        for label, value in tagged.items()
        if label in TAG_NAMES and value
    }
    return ParsedAddressFragments(**fields)

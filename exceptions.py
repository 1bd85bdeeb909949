"""Errors raised while validating an address."""

from typing import Optional

from models import ClosestMatch


class AddressValidationError(Exception):
    """Base class for every failure surfaced by the validator."""


class ParseError(AddressValidationError, ValueError):
    """The input could not be tokenized into address fragments."""


class RemoteError(AddressValidationError):
    """The USPS call failed: transport, timeout, HTTP status or an
    ``<Error>`` element in the response.

    ``number`` and ``description`` are filled in when USPS itself
    reported the error.
    """

    def __init__(
        self,
        message: str,
        number: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.number = number
        self.description = description


class UnconfirmedMatch(AddressValidationError):
    """USPS returned a closest match whose DPV code is not ``"Y"``.

    The full match is kept on ``match`` so callers can read the DPV
    footnotes and return text to find out why.
    """

    def __init__(self, match: ClosestMatch) -> None:
        super().__init__(
            f"Address not confirmed deliverable "
            f"(dpv_confirmation={match.dpv_confirmation!r})"
        )
        self.match = match

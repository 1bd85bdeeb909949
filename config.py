"""Runtime configuration read from the environment."""

import os

# Fixed USPS Web Tools production endpoint.
USPS_SERVER = "http://production.shippingapis.com/ShippingAPI.dll"

# Request time-to-live for the USPS client, in milliseconds.
USPS_TTL_MS = 10_000

# DPV confirmation code that marks an address as deliverable.
DPV_CONFIRMED = "Y"

# Read once at import time so the service fails fast if the key is
# missing and avoids re-reading os.environ on every request.
API_KEY: str = os.environ.get("API_KEY", "").strip()

# Default credential used when a request does not carry its own.
USPS_USER_ID: str = os.environ.get("USPS_USER_ID", "").strip()

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

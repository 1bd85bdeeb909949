"""API-key authentication dependency."""

import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from config import API_KEY

_header = APIKeyHeader(name="X-API-Key", auto_error=False)

_MAX_KEY_LENGTH = 256

if not API_KEY:
    raise RuntimeError(
        "API_KEY environment variable is not set or empty. "
        "The service cannot start without a configured API key."
    )


async def require_api_key(
    api_key: str | None = Security(_header),
) -> str:
    """Validate the X-API-Key header against the configured key.

    Returns the validated key on success.  Raises 401 when the header
    is missing and 403 when the key is too long or does not match.
    """
    if api_key is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Provide an X-API-Key header.",
        )
    if len(api_key) > _MAX_KEY_LENGTH or not secrets.compare_digest(
        api_key, API_KEY
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key.",
        )
    return api_key

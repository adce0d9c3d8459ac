"""FastAPI dependency for the caller's identity.

Authentication is terminated upstream (gateway / web frontend session);
the authenticated user ID reaches this service in the X-User-Id header.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, status
from loguru import logger


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Get the authenticated user ID.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        logger.warning("Request rejected: missing X-User-Id header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return x_user_id.strip()

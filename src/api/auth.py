import secrets

from fastapi import Depends, status, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.config.config import config

security = HTTPBearer(auto_error=False)


async def verify_token(credentials: HTTPAuthorizationCredentials = Depends(security)):
    """
    Verify the bearer token on JSON API routes when API_TOKEN is configured.

    Args:
        credentials: Bearer token credentials

    Returns:
        True if authenticated or no token is configured

    Raises:
        HTTPException: 401 if the token is missing or wrong
    """
    if not config.api_token:
        return True

    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please provide a valid Bearer token."
        )

    if not secrets.compare_digest(credentials.credentials, config.api_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token."
        )

    return True

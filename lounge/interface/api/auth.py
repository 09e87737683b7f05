"""Cookie authentication helpers for routes."""

from fastapi import HTTPException, status

from lounge.domain.service import JWTService
from lounge.util.jwt import JWTError, TokenPayload


def require_user(
    jwt_service: JWTService,
    auth_token: str | None,
    detail: str = "Authentication required",
) -> TokenPayload:
    """Verify the session cookie of an authenticated request.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if not auth_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

    try:
        return jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def require_admin(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Verify the session cookie and the admin role.

    Raises:
        HTTPException: 401 if unauthenticated, 403 if not an admin
    """
    payload = require_user(jwt_service, auth_token, "Admin authentication required")
    if not payload.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return payload

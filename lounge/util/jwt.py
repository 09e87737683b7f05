"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, field_validator

from lounge.config import AuthSettings
from lounge.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload issued by the portal's login service."""

    user_id: str
    username: str
    role: UserRole = UserRole.GUEST
    exp: datetime

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """Validate that the subject is a UUID."""
        UUID(v)
        return v

    @property
    def is_admin(self) -> bool:
        """Whether the token carries the administrative role."""
        return self.role == UserRole.ADMIN


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, username: str, role: UserRole, settings: AuthSettings
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Portal username
        role: Portal role
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "username": username,
        "role": role.value,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Signature fine but claims malformed
        raise JWTError("Invalid token payload")

"""JWT token domain service."""

import logfire

from lounge.config import AuthSettings
from lounge.domain.value import UserRole
from lounge.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, username: str, role: UserRole = UserRole.GUEST
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Portal username
            role: Portal role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            token = create_token(user_id, username, role, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug(
                "JWT token verified", user_id=payload.user_id, role=payload.role.value
            )
            return payload

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Decode a token without raising.

        Convenience for routes that authenticate optionally.

        Args:
            token: JWT token string (optional)

        Returns:
            Payload if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError:
            # Invalid or expired token, treat as unauthenticated
            return None

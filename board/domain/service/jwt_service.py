"""Auth token domain service."""

import logfire

from board.config import AuthSettings
from board.domain.value import UserId
from board.util.jwt import JWTError, decode_token, encode_token

from .base import Service


class JWTService(Service):
    """Issues and resolves the tokens that identify a viewer.

    Routes only ever need the viewer's ID, and an unusable token must
    behave like an anonymous request, so resolution never raises.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, username: str) -> str:
        """Issue a token for a user."""
        return encode_token(user_id, username, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the user a token belongs to.

        Args:
            token: Raw cookie value, if the request carried one

        Returns:
            The user's ID, or None for a missing, expired or invalid token
        """
        if not token:
            return None

        with logfire.span("jwt_service.resolve_viewer"):
            try:
                claims = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Ignoring unusable auth token", reason=str(e))
                return None
            return UserId(claims.sub)

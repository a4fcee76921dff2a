"""Resolves the acting user from the auth cookie."""

import logfire

from discuss.config import AuthSettings
from discuss.domain.value import UserId
from discuss.util.jwt import JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Verifies access tokens issued by the auth service."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Return the token's user id, or None when absent or invalid.

        Routes answer 401 themselves on None, so an invalid token is
        logged and treated the same as a missing one.
        """
        if not token:
            return None

        with logfire.span("jwt_service.get_user_id_from_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected auth token", error=str(e))
                return None
            return UserId(payload.user_id)

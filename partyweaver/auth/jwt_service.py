"""Session token service.

Issues and validates the HS256 bearer tokens handed out after a sign-in link
is redeemed.
"""

from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

import jwt

from partyweaver.auth.dtos import UserDTO
from partyweaver.config.settings import settings


class SessionTokenError(Exception):
    """Raised when a session token cannot be decoded."""


class TokenExpiredError(SessionTokenError):
    """Raised when a session token has expired."""


class JWTConfig(Protocol):
    secret_key: str
    algorithm: str
    access_token_expire_minutes: int


class JWTService:
    ISSUER = "party-weaver"

    def __init__(self, config: JWTConfig = settings) -> None:
        self._config = config

    def create_access_token(self, user: UserDTO, expires_delta: timedelta | None = None) -> str:
        if expires_delta is None:
            expires_delta = timedelta(minutes=self._config.access_token_expire_minutes)
        now = datetime.now(UTC)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + expires_delta,
            "iss": self.ISSUER,
        }
        return jwt.encode(payload, self._config.secret_key, algorithm=self._config.algorithm)

    def decode_access_token(self, token: str) -> UserDTO:
        """Decode a token into the user it was issued for.

        Raises:
            TokenExpiredError: If the token has expired.
            SessionTokenError: If the token is malformed or the signature is invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                issuer=self.ISSUER,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise SessionTokenError(f"Invalid token: {e}") from e

        try:
            return UserDTO(id=UUID(payload["sub"]), email=payload["email"])
        except (KeyError, ValueError) as e:
            raise SessionTokenError("Token is missing required claims") from e

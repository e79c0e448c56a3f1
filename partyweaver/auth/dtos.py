from dataclasses import dataclass
from uuid import UUID


class InvalidSignInLinkError(Exception):
    """Raised when a sign-in token is unknown, already used or expired."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired sign-in link")


@dataclass(frozen=True)
class UserDTO:
    """DTO for an authenticated user."""

    id: UUID
    email: str

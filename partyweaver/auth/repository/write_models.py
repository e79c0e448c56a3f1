"""Write model for passwordless sign-in."""

import logging
import secrets
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from partyweaver.auth.dtos import InvalidSignInLinkError, UserDTO
from partyweaver.auth.repository.orm_models import SignInLink
from partyweaver.config.database import async_session_manager
from partyweaver.config.settings import settings
from partyweaver.models.user import User

logger = logging.getLogger(__name__)


class SignInWriteModel(ABC):
    @abstractmethod
    async def create_sign_in_link(self, email: str) -> str:
        """Store a single-use sign-in token for ``email`` and return it."""
        raise NotImplementedError

    @abstractmethod
    async def redeem_sign_in_link(self, token: str) -> UserDTO:
        """Consume a sign-in token, creating the user on first sign-in.

        Raises:
            InvalidSignInLinkError: If the token is unknown, used or expired.
        """
        raise NotImplementedError


class SqlSignInWriteModel(SignInWriteModel):
    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        expire_minutes: int | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.expire_minutes = expire_minutes or settings.sign_in_link_expire_minutes

    async def create_sign_in_link(self, email: str) -> str:
        token = secrets.token_urlsafe(32)
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            session.add(
                SignInLink(
                    email=email.lower(),
                    token=token,
                    expires_at=datetime.now(UTC) + timedelta(minutes=self.expire_minutes),
                )
            )
            await session.flush()
        return token

    async def redeem_sign_in_link(self, token: str) -> UserDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            now = datetime.now(UTC)
            # At most one caller can claim the link
            result = await session.execute(
                update(SignInLink)
                .where(
                    SignInLink.token == token,
                    SignInLink.used_at.is_(None),
                    SignInLink.expires_at > now,
                )
                .values(used_at=now)
                .returning(SignInLink.email)
                .execution_options(synchronize_session=False)
            )
            email = result.scalar_one_or_none()
            if email is None:
                raise InvalidSignInLinkError()

            user = await self._get_or_create_user(session, email)
            user.last_sign_in_at = now
            await session.flush()

            return UserDTO(id=user.uuid, email=user.email)

    @staticmethod
    async def _get_or_create_user(session: AsyncSession, email: str) -> User:
        result = await session.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is not None:
            return user

        try:
            async with session.begin_nested():
                user = User(email=email, is_active=True)
                session.add(user)
        except IntegrityError:
            # Another sign-in created the user first
            logger.info(f"User {email} was created concurrently, reusing it")
            result = await session.execute(select(User).where(User.email == email))
            user = result.scalar_one()
        return user

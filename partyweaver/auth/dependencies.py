from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from partyweaver.auth.dtos import UserDTO
from partyweaver.auth.jwt_service import JWTService, SessionTokenError
from partyweaver.auth.repository.write_models import SignInWriteModel, SqlSignInWriteModel

bearer_scheme = HTTPBearer(auto_error=False)


def get_jwt_service() -> JWTService:
    """Dependency to get the session token service."""
    return JWTService()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserDTO:
    """Resolve the signed-in user from the bearer token. Override in tests."""
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return jwt_service.decode_access_token(credentials.credentials)
    except SessionTokenError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_sign_in_write_model() -> SignInWriteModel:
    """Dependency to get sign-in write model instance."""
    return SqlSignInWriteModel()

from uuid import UUID

from pydantic import BaseModel, EmailStr


class SignInRequest(BaseModel):
    email: EmailStr


class SignInResponse(BaseModel):
    message: str


class VerifySignInRequest(BaseModel):
    token: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CurrentUserResponse(BaseModel):
    id: UUID
    email: str

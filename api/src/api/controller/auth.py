from typing import Annotated, Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, StringConstraints

from storage.service import auth as auth_service
from storage.service import user as user_service
from api.response import success

router = APIRouter(prefix="/auth", tags=["auth"])


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


# passwords are hashed exactly as sent, only email and username are trimmed
Email = Annotated[EmailStr, BeforeValidator(_strip)]
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class RegisterRequest(BaseModel):
    email: Email
    password: str = Field(min_length=6, max_length=72)
    username: Username


class LoginRequest(BaseModel):
    email: Email
    password: str


class RefreshRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str = Field(alias="refreshToken")


@router.post("/register")
async def register(req: RegisterRequest):
    user = user_service.register_user(req.email, req.password, req.username)
    return success(user.to_dict(), status_code=201)


@router.post("/login")
async def login(req: LoginRequest, request: Request):
    result = auth_service.login(req.email, req.password, request.app.state.settings)
    return success(result)


@router.post("/refresh")
async def refresh(req: RefreshRequest, request: Request):
    result = auth_service.refresh_access_token(req.refresh_token, request.app.state.settings)
    return success(result)


@router.post("/logout")
async def logout():
    # tokens are stateless; the client drops them
    return success(message="Logged out")

from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from api.controller.auth import Username
from storage.service import user as user_service
from api.response import success

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_id(request: Request) -> str:
    return request.state.user_id


class UpdateProfileRequest(BaseModel):
    username: Optional[Username] = None
    password: Optional[str] = Field(None, min_length=6, max_length=72)


@router.get("/me")
async def get_me(request: Request):
    user = user_service.get_profile(_get_user_id(request))
    return success(user.to_dict())


@router.patch("/me")
async def update_me(req: UpdateProfileRequest, request: Request):
    user = user_service.update_profile(_get_user_id(request), username=req.username, password=req.password)
    return success(user.to_dict())

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from storage.entity.dto import HolidayPatch
from storage.errors import Forbidden, ValidationFailed
from storage.service import holiday as holiday_service
from storage.service.auth import Identity
from api.response import success

router = APIRouter(prefix="/holidays", tags=["holidays"])


def _get_user(request: Request) -> Identity:
    return request.state.user


def require_admin(request: Request) -> Identity:
    user = _get_user(request)
    if not user.is_admin:
        raise Forbidden("Only admin users can manage holidays")
    return user


class CreateHolidayRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=100)
    holiday_date: date = Field(alias="date")
    description: Optional[str] = None
    is_recurring: bool = Field(True, alias="isRecurring")


class UpdateHolidayRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    holiday_date: Optional[date] = Field(None, alias="date")
    description: Optional[str] = None
    is_recurring: Optional[bool] = Field(None, alias="isRecurring")

    def to_patch(self) -> HolidayPatch:
        patch = HolidayPatch()
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None and name != "description":
                raise ValidationFailed(f"{type(self).model_fields[name].alias or name} cannot be null")
            setattr(patch, "date" if name == "holiday_date" else name, value)
        return patch


@router.get("")
async def list_holidays(
    year: Optional[int] = Query(None, ge=1900, le=2100),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    holidays = holiday_service.list_holidays(year=year, month=month)
    return success([h.to_dict() for h in holidays])


@router.post("")
async def create_holiday(req: CreateHolidayRequest, admin: Identity = Depends(require_admin)):
    holiday = holiday_service.create_holiday(
        req.title, req.holiday_date, description=req.description, is_recurring=req.is_recurring,
    )
    return success(holiday.to_dict(), status_code=201)


@router.put("/{holiday_id}")
async def update_holiday(holiday_id: UUID, req: UpdateHolidayRequest, admin: Identity = Depends(require_admin)):
    holiday = holiday_service.update_holiday(str(holiday_id), req.to_patch())
    return success(holiday.to_dict())

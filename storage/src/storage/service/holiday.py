"""Holiday service. Admin checks happen in the controller."""

from datetime import date
from typing import List, Optional

from loguru import logger

from storage.entity.dto import Holiday, HolidayPatch
from storage.errors import HolidayNotFound, ValidationFailed
from storage.repository import get_repositories
from storage.util import generate_id


def _holiday_repo():
    return get_repositories().holidays


def list_holidays(year: Optional[int] = None, month: Optional[int] = None) -> List[Holiday]:
    return _holiday_repo().list_holidays(year=year, month=month)


def create_holiday(
    title: str,
    holiday_date: date,
    description: Optional[str] = None,
    is_recurring: bool = True,
) -> Holiday:
    if not title or not holiday_date:
        raise ValidationFailed("Title and date are required")
    holiday = Holiday(
        holiday_id=generate_id(),
        title=title,
        date=holiday_date,
        description=description,
        is_recurring=is_recurring,
    )
    holiday = _holiday_repo().create_holiday(holiday)
    logger.info("Holiday created holiday_id={} date={}", holiday.holiday_id, holiday.date)
    return holiday


def update_holiday(holiday_id: str, patch: HolidayPatch) -> Holiday:
    if not _holiday_repo().get_holiday(holiday_id):
        raise HolidayNotFound()
    if patch.is_empty():
        raise ValidationFailed("No fields to update")
    holiday = _holiday_repo().update_holiday(holiday_id, patch)
    if not holiday:
        raise HolidayNotFound()
    logger.info("Holiday updated holiday_id={} fields={}", holiday_id, sorted(patch.changes()))
    return holiday

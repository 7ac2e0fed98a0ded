"""SQLAlchemy-backed holiday repository."""

from typing import List, Optional
from sqlalchemy import extract
from storage.entity.holiday import HolidayEntity
from storage.entity.dto import Holiday, HolidayPatch
from storage.database.base import get_db
from .base import HolidayRepository


def _entity_to_dto(entity: HolidayEntity) -> Holiday:
    return Holiday(
        holiday_id=entity.holiday_id,
        title=entity.title,
        date=entity.date,
        description=entity.description,
        is_recurring=bool(entity.is_recurring),
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


class SqlHolidayRepository(HolidayRepository):
    def list_holidays(self, year: Optional[int] = None, month: Optional[int] = None) -> List[Holiday]:
        with get_db() as session:
            query = session.query(HolidayEntity)
            if year:
                query = query.filter(extract("year", HolidayEntity.date) == year)
            if month:
                query = query.filter(extract("month", HolidayEntity.date) == month)
            query = query.order_by(HolidayEntity.date.asc())
            return [_entity_to_dto(row) for row in query.all()]

    def get_holiday(self, holiday_id: str) -> Optional[Holiday]:
        with get_db() as session:
            row = session.get(HolidayEntity, holiday_id)
            return _entity_to_dto(row) if row else None

    def create_holiday(self, holiday: Holiday) -> Holiday:
        with get_db() as session:
            entity = HolidayEntity(
                holiday_id=holiday.holiday_id,
                title=holiday.title,
                date=holiday.date,
                description=holiday.description,
                is_recurring=holiday.is_recurring,
            )
            session.add(entity)
            session.flush()
            return _entity_to_dto(entity)

    def update_holiday(self, holiday_id: str, patch: HolidayPatch) -> Optional[Holiday]:
        with get_db() as session:
            entity = session.get(HolidayEntity, holiday_id)
            if not entity:
                return None
            patch.apply_to(entity)
            session.flush()
            return _entity_to_dto(entity)

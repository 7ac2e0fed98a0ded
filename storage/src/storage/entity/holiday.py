from sqlalchemy import Column, String, Text, Date, Boolean
from .base import Base, BaseEntity


class HolidayEntity(Base, BaseEntity):
    __tablename__ = "holidays"

    holiday_id = Column(String, primary_key=True)
    title = Column(String(100), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_recurring = Column(Boolean, nullable=False, default=True)

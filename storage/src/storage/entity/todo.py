from sqlalchemy import Column, String, Text, Date, Boolean, ForeignKey, Index
from .base import Base, BaseEntity


class TodoEntity(Base, BaseEntity):
    __tablename__ = "todos"

    todo_id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default="active")
    is_completed = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(String, nullable=True)

    __table_args__ = (
        Index("ix_todos_user_status", "user_id", "status"),
    )

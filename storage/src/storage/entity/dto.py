"""Plain data objects passed between repositories, services and controllers."""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Dict, Optional


class _Unset:
    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET: Any = _Unset()

TODO_STATUSES = ("active", "completed", "deleted")
ROLES = ("user", "admin")


def _date_str(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class User:
    user_id: str
    email: str
    username: str
    password_hash: str = field(default="", repr=False)
    role: str = "user"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> Dict[str, Any]:
        # password_hash never leaves the storage layer
        return {
            "userId": self.user_id,
            "email": self.email,
            "username": self.username,
            "role": self.role,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Todo:
    todo_id: str
    user_id: str
    title: str
    content: Optional[str] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    status: str = "active"
    is_completed: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None

    @property
    def is_deleted(self) -> bool:
        return self.status == "deleted"

    @property
    def is_done(self) -> bool:
        """Completed view: either the status or the flag says so."""
        return self.status == "completed" or self.is_completed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "todoId": self.todo_id,
            "userId": self.user_id,
            "title": self.title,
            "content": self.content,
            "startDate": _date_str(self.start_date),
            "dueDate": _date_str(self.due_date),
            "status": self.status,
            "isCompleted": self.is_completed,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "deletedAt": self.deleted_at,
        }


@dataclass
class Holiday:
    holiday_id: str
    title: str
    date: date
    description: Optional[str] = None
    is_recurring: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "holidayId": self.holiday_id,
            "title": self.title,
            "date": _date_str(self.date),
            "description": self.description,
            "isRecurring": self.is_recurring,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


class _Patch:
    """Partial update: fields left as UNSET are not touched, None clears."""

    def changes(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, target):
        for key, value in self.changes().items():
            setattr(target, key, value)
        return target


@dataclass
class TodoPatch(_Patch):
    title: Any = UNSET
    content: Any = UNSET
    start_date: Any = UNSET
    due_date: Any = UNSET
    status: Any = UNSET
    is_completed: Any = UNSET
    deleted_at: Any = UNSET


@dataclass
class UserPatch(_Patch):
    username: Any = UNSET
    password_hash: Any = UNSET


@dataclass
class HolidayPatch(_Patch):
    title: Any = UNSET
    date: Any = UNSET
    description: Any = UNSET
    is_recurring: Any = UNSET


@dataclass
class TodoQuery:
    status: Optional[str] = None
    search: Optional[str] = None
    sort_by: str = "createdAt"
    order: str = "desc"


@dataclass
class TrashQuery:
    search: Optional[str] = None
    sort_by: str = "deletedAt"
    order: str = "desc"

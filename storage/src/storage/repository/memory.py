"""In-memory repositories, used by the test-suite and STORAGE_BACKEND=memory.

Rows are kept as DTO copies behind a lock; nothing handed out aliases the
stored objects.
"""

from dataclasses import replace
from threading import Lock
from typing import Dict, Iterable, List, Optional

from storage.entity.dto import (
    Holiday, HolidayPatch, Todo, TodoPatch, TodoQuery, TrashQuery, User, UserPatch,
)
from storage.errors import EmailExists
from storage.util import get_utc_iso8601_timestamp
from .base import HolidayRepository, TodoRepository, UserRepository

_SORT_ATTRS = {
    "createdAt": "created_at",
    "dueDate": "due_date",
    "deletedAt": "deleted_at",
}


def _matches(todo: Todo, search: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in (todo.title or "").lower() or needle in (todo.content or "").lower()


def _sorted(todos: Iterable[Todo], sort_by: str, order: str, default: str) -> List[Todo]:
    attr = _SORT_ATTRS.get(sort_by, _SORT_ATTRS[default])
    rows = sorted(todos, key=lambda t: t.todo_id)
    present = [t for t in rows if getattr(t, attr) is not None]
    missing = [t for t in rows if getattr(t, attr) is None]
    present.sort(key=lambda t: getattr(t, attr), reverse=(order != "asc"))
    return present + missing


class MemoryUserRepository(UserRepository):
    def __init__(self):
        self._rows: Dict[str, User] = {}
        self._lock = Lock()

    def create_user(self, user: User) -> User:
        with self._lock:
            if any(u.email == user.email for u in self._rows.values()):
                raise EmailExists()
            now = get_utc_iso8601_timestamp()
            stored = replace(user, created_at=now, updated_at=now)
            self._rows[stored.user_id] = stored
            return replace(stored)

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            row = self._rows.get(user_id)
            return replace(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for row in self._rows.values():
                if row.email == email:
                    return replace(row)
            return None

    def update_user(self, user_id: str, patch: UserPatch) -> Optional[User]:
        with self._lock:
            row = self._rows.get(user_id)
            if not row:
                return None
            updated = patch.apply_to(replace(row))
            updated.updated_at = get_utc_iso8601_timestamp()
            self._rows[user_id] = updated
            return replace(updated)


class MemoryTodoRepository(TodoRepository):
    def __init__(self):
        self._rows: Dict[str, Todo] = {}
        self._lock = Lock()

    def create_todo(self, todo: Todo) -> Todo:
        with self._lock:
            now = get_utc_iso8601_timestamp()
            stored = replace(todo, created_at=now, updated_at=now)
            self._rows[stored.todo_id] = stored
            return replace(stored)

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            row = self._rows.get(todo_id)
            return replace(row) if row else None

    def list_todos(self, user_id: str, query: TodoQuery) -> List[Todo]:
        with self._lock:
            rows = [t for t in self._rows.values() if t.user_id == user_id]
        if query.status == "active":
            rows = [t for t in rows if t.status == "active" and not t.is_completed]
        elif query.status == "completed":
            rows = [t for t in rows if not t.is_deleted and t.is_done]
        elif query.status == "deleted":
            rows = [t for t in rows if t.is_deleted]
        else:
            rows = [t for t in rows if not t.is_deleted]
        rows = [t for t in rows if _matches(t, query.search)]
        return [replace(t) for t in _sorted(rows, query.sort_by, query.order, default="createdAt")]

    def list_deleted_todos(self, user_id: str, query: TrashQuery) -> List[Todo]:
        with self._lock:
            rows = [t for t in self._rows.values() if t.user_id == user_id and t.is_deleted]
        rows = [t for t in rows if _matches(t, query.search)]
        return [replace(t) for t in _sorted(rows, query.sort_by, query.order, default="deletedAt")]

    def update_todo(self, todo_id: str, patch: TodoPatch) -> Optional[Todo]:
        with self._lock:
            row = self._rows.get(todo_id)
            if not row:
                return None
            updated = patch.apply_to(replace(row))
            updated.updated_at = get_utc_iso8601_timestamp()
            self._rows[todo_id] = updated
            return replace(updated)

    def purge_todo(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            row = self._rows.pop(todo_id, None)
            return replace(row) if row else None


class MemoryHolidayRepository(HolidayRepository):
    def __init__(self):
        self._rows: Dict[str, Holiday] = {}
        self._lock = Lock()

    def list_holidays(self, year: Optional[int] = None, month: Optional[int] = None) -> List[Holiday]:
        with self._lock:
            rows = list(self._rows.values())
        if year:
            rows = [h for h in rows if h.date.year == year]
        if month:
            rows = [h for h in rows if h.date.month == month]
        rows.sort(key=lambda h: h.date)
        return [replace(h) for h in rows]

    def get_holiday(self, holiday_id: str) -> Optional[Holiday]:
        with self._lock:
            row = self._rows.get(holiday_id)
            return replace(row) if row else None

    def create_holiday(self, holiday: Holiday) -> Holiday:
        with self._lock:
            now = get_utc_iso8601_timestamp()
            stored = replace(holiday, created_at=now, updated_at=now)
            self._rows[stored.holiday_id] = stored
            return replace(stored)

    def update_holiday(self, holiday_id: str, patch: HolidayPatch) -> Optional[Holiday]:
        with self._lock:
            row = self._rows.get(holiday_id)
            if not row:
                return None
            updated = patch.apply_to(replace(row))
            updated.updated_at = get_utc_iso8601_timestamp()
            self._rows[holiday_id] = updated
            return replace(updated)

"""Repository contract shared by the SQL and in-memory implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from storage.entity.dto import (
    Holiday, HolidayPatch, Todo, TodoPatch, TodoQuery, TrashQuery, User, UserPatch,
)


class UserRepository(ABC):
    @abstractmethod
    def create_user(self, user: User) -> User:
        """Insert a user. Raises EmailExists on a duplicate email."""

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    def update_user(self, user_id: str, patch: UserPatch) -> Optional[User]:
        ...


class TodoRepository(ABC):
    @abstractmethod
    def create_todo(self, todo: Todo) -> Todo:
        ...

    @abstractmethod
    def get_todo(self, todo_id: str) -> Optional[Todo]:
        """Fetch by id regardless of owner; ownership is checked by the caller."""

    @abstractmethod
    def list_todos(self, user_id: str, query: TodoQuery) -> List[Todo]:
        ...

    @abstractmethod
    def list_deleted_todos(self, user_id: str, query: TrashQuery) -> List[Todo]:
        ...

    @abstractmethod
    def update_todo(self, todo_id: str, patch: TodoPatch) -> Optional[Todo]:
        ...

    @abstractmethod
    def purge_todo(self, todo_id: str) -> Optional[Todo]:
        """Remove the row; returns what was removed."""


class HolidayRepository(ABC):
    @abstractmethod
    def list_holidays(self, year: Optional[int] = None, month: Optional[int] = None) -> List[Holiday]:
        ...

    @abstractmethod
    def get_holiday(self, holiday_id: str) -> Optional[Holiday]:
        ...

    @abstractmethod
    def create_holiday(self, holiday: Holiday) -> Holiday:
        ...

    @abstractmethod
    def update_holiday(self, holiday_id: str, patch: HolidayPatch) -> Optional[Holiday]:
        ...

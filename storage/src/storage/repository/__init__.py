"""Repository registry.

Services look repositories up here on every call, so the backend can be
swapped (SQL for the server, in-memory for tests) without touching them.
"""

from dataclasses import dataclass
from typing import Optional

from .base import HolidayRepository, TodoRepository, UserRepository


@dataclass
class Repositories:
    users: UserRepository
    todos: TodoRepository
    holidays: HolidayRepository


_repositories: Optional[Repositories] = None


def sql_repositories() -> Repositories:
    from .user import SqlUserRepository
    from .todo import SqlTodoRepository
    from .holiday import SqlHolidayRepository
    return Repositories(SqlUserRepository(), SqlTodoRepository(), SqlHolidayRepository())


def memory_repositories() -> Repositories:
    from .memory import MemoryUserRepository, MemoryTodoRepository, MemoryHolidayRepository
    return Repositories(MemoryUserRepository(), MemoryTodoRepository(), MemoryHolidayRepository())


def set_repositories(repositories: Optional[Repositories]) -> None:
    global _repositories
    _repositories = repositories


def get_repositories() -> Repositories:
    if _repositories is None:
        raise RuntimeError("Repositories are not configured, call set_repositories() first")
    return _repositories

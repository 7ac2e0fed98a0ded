"""Todo service: lifecycle transitions and ownership checks.

Every operation on a single todo fetches it by id first, then compares the
owner with the caller: a missing id is TodoNotFound, someone else's todo is
Forbidden.
"""

from datetime import date
from typing import List, Optional

from loguru import logger

from storage.entity.dto import Todo, TodoPatch, TodoQuery, TrashQuery
from storage.errors import (
    Forbidden, InvalidDateRange, TodoIsDeleted, TodoNotDeleted, TodoNotFound, ValidationFailed,
)
from storage.repository import get_repositories
from storage.util import generate_id, get_utc_iso8601_timestamp


def _todo_repo():
    return get_repositories().todos


def _check_date_range(start_date: Optional[date], due_date: Optional[date]) -> None:
    if start_date and due_date and due_date < start_date:
        raise InvalidDateRange()


def _get_owned(user_id: str, todo_id: str) -> Todo:
    todo = _todo_repo().get_todo(todo_id)
    if not todo:
        raise TodoNotFound()
    if todo.user_id != user_id:
        raise Forbidden()
    return todo


def create_todo(
    user_id: str,
    title: str,
    content: Optional[str] = None,
    start_date: Optional[date] = None,
    due_date: Optional[date] = None,
) -> Todo:
    _check_date_range(start_date, due_date)
    todo = Todo(
        todo_id=generate_id(),
        user_id=user_id,
        title=title,
        content=content,
        start_date=start_date,
        due_date=due_date,
        status="active",
        is_completed=False,
    )
    todo = _todo_repo().create_todo(todo)
    logger.info("Todo created todo_id={} user_id={}", todo.todo_id, user_id)
    return todo


def list_todos(
    user_id: str,
    status: Optional[str] = None,
    search: Optional[str] = None,
    sort_by: str = "createdAt",
    order: str = "desc",
) -> List[Todo]:
    query = TodoQuery(status=status, search=search, sort_by=sort_by, order=order)
    return _todo_repo().list_todos(user_id, query)


def get_todo(user_id: str, todo_id: str) -> Todo:
    return _get_owned(user_id, todo_id)


def update_todo(user_id: str, todo_id: str, patch: TodoPatch) -> Todo:
    """Update title, content and dates; the status is left alone."""
    existing = _get_owned(user_id, todo_id)
    changes = patch.changes()
    if "start_date" in changes or "due_date" in changes:
        start_date = changes.get("start_date", existing.start_date)
        due_date = changes.get("due_date", existing.due_date)
        _check_date_range(start_date, due_date)
    content_only = TodoPatch(
        title=patch.title,
        content=patch.content,
        start_date=patch.start_date,
        due_date=patch.due_date,
    )
    if content_only.is_empty():
        raise ValidationFailed("No fields to update")
    todo = _todo_repo().update_todo(todo_id, content_only)
    if not todo:
        raise TodoNotFound()
    logger.info("Todo updated todo_id={} fields={}", todo_id, sorted(content_only.changes()))
    return todo


def complete_todo(user_id: str, todo_id: str) -> Todo:
    existing = _get_owned(user_id, todo_id)
    if existing.is_deleted:
        raise TodoIsDeleted()
    todo = _todo_repo().update_todo(todo_id, TodoPatch(status="completed", is_completed=True))
    if not todo:
        raise TodoNotFound()
    logger.info("Todo completed todo_id={}", todo_id)
    return todo


def delete_todo(user_id: str, todo_id: str) -> Todo:
    """Soft delete. Deleting an already deleted todo re-stamps deleted_at."""
    _get_owned(user_id, todo_id)
    patch = TodoPatch(status="deleted", deleted_at=get_utc_iso8601_timestamp())
    todo = _todo_repo().update_todo(todo_id, patch)
    if not todo:
        raise TodoNotFound()
    logger.info("Todo moved to trash todo_id={}", todo_id)
    return todo


def restore_todo(user_id: str, todo_id: str) -> Todo:
    existing = _get_owned(user_id, todo_id)
    if not existing.is_deleted:
        raise TodoNotDeleted()
    todo = _todo_repo().update_todo(todo_id, TodoPatch(status="active", deleted_at=None))
    if not todo:
        raise TodoNotFound()
    logger.info("Todo restored todo_id={}", todo_id)
    return todo


def list_trash(
    user_id: str,
    search: Optional[str] = None,
    sort_by: str = "deletedAt",
    order: str = "desc",
) -> List[Todo]:
    return _todo_repo().list_deleted_todos(user_id, TrashQuery(search=search, sort_by=sort_by, order=order))


def purge_todo(user_id: str, todo_id: str) -> Todo:
    existing = _get_owned(user_id, todo_id)
    if not existing.is_deleted:
        raise TodoNotDeleted("Cannot permanently delete a todo that is not in the trash")
    removed = _todo_repo().purge_todo(todo_id)
    if not removed:
        raise TodoNotFound()
    logger.info("Todo purged todo_id={}", todo_id)
    return removed

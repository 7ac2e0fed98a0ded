"""SQLAlchemy-backed todo repository."""

from typing import List, Optional
from sqlalchemy import and_, or_
from storage.entity.todo import TodoEntity
from storage.entity.dto import Todo, TodoPatch, TodoQuery, TrashQuery
from storage.database.base import get_db
from .base import TodoRepository

_SORT_COLUMNS = {
    "createdAt": TodoEntity.created_at,
    "dueDate": TodoEntity.due_date,
    "deletedAt": TodoEntity.deleted_at,
}


def _entity_to_dto(entity: TodoEntity) -> Todo:
    return Todo(
        todo_id=entity.todo_id,
        user_id=entity.user_id,
        title=entity.title,
        content=entity.content,
        start_date=entity.start_date,
        due_date=entity.due_date,
        status=entity.status,
        is_completed=bool(entity.is_completed),
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        deleted_at=entity.deleted_at,
    )


def _apply_search(query, search: Optional[str]):
    if search:
        # % and _ in the search text are literals, not wildcards
        query = query.filter(or_(
            TodoEntity.title.icontains(search, autoescape=True),
            TodoEntity.content.icontains(search, autoescape=True),
        ))
    return query


def _apply_order(query, sort_by: str, order: str, default: str):
    column = _SORT_COLUMNS.get(sort_by, _SORT_COLUMNS[default])
    ordered = column.asc() if order == "asc" else column.desc()
    # tie-break on todo_id so paging through equal timestamps is stable
    return query.order_by(ordered.nullslast(), TodoEntity.todo_id.asc())


class SqlTodoRepository(TodoRepository):
    def create_todo(self, todo: Todo) -> Todo:
        with get_db() as session:
            entity = TodoEntity(
                todo_id=todo.todo_id,
                user_id=todo.user_id,
                title=todo.title,
                content=todo.content,
                start_date=todo.start_date,
                due_date=todo.due_date,
                status=todo.status,
                is_completed=todo.is_completed,
                deleted_at=todo.deleted_at,
            )
            session.add(entity)
            session.flush()
            return _entity_to_dto(entity)

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        with get_db() as session:
            row = session.get(TodoEntity, todo_id)
            return _entity_to_dto(row) if row else None

    def list_todos(self, user_id: str, query: TodoQuery) -> List[Todo]:
        with get_db() as session:
            q = session.query(TodoEntity).filter_by(user_id=user_id)
            if query.status == "active":
                q = q.filter(TodoEntity.status == "active", TodoEntity.is_completed.is_(False))
            elif query.status == "completed":
                q = q.filter(
                    TodoEntity.status != "deleted",
                    or_(TodoEntity.status == "completed", TodoEntity.is_completed.is_(True)),
                )
            elif query.status == "deleted":
                q = q.filter(TodoEntity.status == "deleted")
            else:
                q = q.filter(TodoEntity.status != "deleted")
            q = _apply_search(q, query.search)
            q = _apply_order(q, query.sort_by, query.order, default="createdAt")
            return [_entity_to_dto(row) for row in q.all()]

    def list_deleted_todos(self, user_id: str, query: TrashQuery) -> List[Todo]:
        with get_db() as session:
            q = session.query(TodoEntity).filter(and_(TodoEntity.user_id == user_id, TodoEntity.status == "deleted"))
            q = _apply_search(q, query.search)
            q = _apply_order(q, query.sort_by, query.order, default="deletedAt")
            return [_entity_to_dto(row) for row in q.all()]

    def update_todo(self, todo_id: str, patch: TodoPatch) -> Optional[Todo]:
        with get_db() as session:
            entity = session.get(TodoEntity, todo_id)
            if not entity:
                return None
            patch.apply_to(entity)
            session.flush()
            return _entity_to_dto(entity)

    def purge_todo(self, todo_id: str) -> Optional[Todo]:
        with get_db() as session:
            entity = session.get(TodoEntity, todo_id)
            if not entity:
                return None
            removed = _entity_to_dto(entity)
            session.delete(entity)
            session.flush()
            return removed

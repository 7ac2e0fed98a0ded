from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Request

from storage.service import todo as todo_service
from api.response import success

router = APIRouter(prefix="/trash", tags=["trash"])


def _get_user_id(request: Request) -> str:
    return request.state.user_id


@router.get("")
async def list_trash(
    request: Request,
    search: Optional[str] = Query(None, min_length=1),
    sort_by: Literal["deletedAt", "dueDate", "createdAt"] = Query("deletedAt", alias="sortBy"),
    order: Literal["asc", "desc"] = Query("desc"),
):
    user_id = _get_user_id(request)
    todos = todo_service.list_trash(
        user_id, search=search.strip() if search else None, sort_by=sort_by, order=order,
    )
    return success([t.to_dict() for t in todos])


@router.delete("/{todo_id}")
async def purge_todo(todo_id: UUID, request: Request):
    user_id = _get_user_id(request)
    removed = todo_service.purge_todo(user_id, str(todo_id))
    return success({"todoId": removed.todo_id}, message="Todo permanently deleted")

from datetime import date
from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from storage.entity.dto import TodoPatch
from storage.errors import ValidationFailed
from storage.service import todo as todo_service
from api.response import success

router = APIRouter(prefix="/todos", tags=["todos"])


def _get_user_id(request: Request) -> str:
    return request.state.user_id


class CreateTodoRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    content: Optional[str] = None
    start_date: Optional[date] = Field(None, alias="startDate")
    due_date: Optional[date] = Field(None, alias="dueDate")


class UpdateTodoRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    start_date: Optional[date] = Field(None, alias="startDate")
    due_date: Optional[date] = Field(None, alias="dueDate")

    def to_patch(self) -> TodoPatch:
        patch = TodoPatch()
        for name in self.model_fields_set:
            setattr(patch, name, getattr(self, name))
        return patch


@router.post("")
async def create_todo(req: CreateTodoRequest, request: Request):
    user_id = _get_user_id(request)
    todo = todo_service.create_todo(
        user_id, req.title, content=req.content,
        start_date=req.start_date, due_date=req.due_date,
    )
    return success(todo.to_dict(), status_code=201)


@router.get("")
async def list_todos(
    request: Request,
    status: Optional[Literal["active", "completed", "deleted"]] = Query(None),
    search: Optional[str] = Query(None, min_length=1),
    sort_by: Literal["dueDate", "createdAt"] = Query("createdAt", alias="sortBy"),
    order: Literal["asc", "desc"] = Query("desc"),
):
    user_id = _get_user_id(request)
    todos = todo_service.list_todos(
        user_id, status=status, search=search.strip() if search else None,
        sort_by=sort_by, order=order,
    )
    return success([t.to_dict() for t in todos])


@router.get("/{todo_id}")
async def get_todo(todo_id: UUID, request: Request):
    user_id = _get_user_id(request)
    todo = todo_service.get_todo(user_id, str(todo_id))
    return success(todo.to_dict())


@router.put("/{todo_id}")
async def update_todo(todo_id: UUID, req: UpdateTodoRequest, request: Request):
    user_id = _get_user_id(request)
    if "title" in req.model_fields_set and req.title is None:
        raise ValidationFailed("Title cannot be empty")
    patch = req.to_patch()
    if patch.is_empty():
        raise ValidationFailed("No fields to update")
    todo = todo_service.update_todo(user_id, str(todo_id), patch)
    return success(todo.to_dict())


@router.delete("/{todo_id}")
async def delete_todo(todo_id: UUID, request: Request):
    user_id = _get_user_id(request)
    todo = todo_service.delete_todo(user_id, str(todo_id))
    return success(todo.to_dict(), message="Todo moved to trash")


@router.patch("/{todo_id}/complete")
async def complete_todo(todo_id: UUID, request: Request):
    user_id = _get_user_id(request)
    todo = todo_service.complete_todo(user_id, str(todo_id))
    return success(todo.to_dict())


@router.patch("/{todo_id}/restore")
async def restore_todo(todo_id: UUID, request: Request):
    user_id = _get_user_id(request)
    todo = todo_service.restore_todo(user_id, str(todo_id))
    return success(todo.to_dict(), message="Todo restored")

"""Todos API router"""
from typing import Dict
from fastapi import APIRouter, Depends, HTTPException, Response, status
from todo_api.application.dto.todo_dto import TodoCreateDTO, TodoResponseDTO
from todo_api.application.use_cases.todo_use_cases import TodoUseCases
from todo_api.domain.exceptions import TodoNotFoundError
from todo_api.presentation.api.v1.dependencies import (
    get_todo_create_data,
    get_todo_id,
    get_todo_use_cases,
)

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=Dict[str, TodoResponseDTO])
def get_all_todos(
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Get all todos

    The response is an object keyed by the stringified todo id.
    """
    return use_cases.get_todos_by_id()


@router.post("/create", response_model=TodoResponseDTO)
def create_todo(
    todo_data: TodoCreateDTO = Depends(get_todo_create_data),
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Create a new todo"""
    return use_cases.create_todo(todo_data)


@router.put("/update", response_model=TodoResponseDTO)
def mark_todo_done(
    todo_id: int = Depends(get_todo_id),
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Mark todo as done

    Marking an already finished todo again returns it unchanged.
    """
    try:
        return use_cases.mark_todo_done(todo_id)
    except TodoNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_todo(
    todo_id: int = Depends(get_todo_id),
    use_cases: TodoUseCases = Depends(get_todo_use_cases),
):
    """Delete todo permanently"""
    try:
        use_cases.delete_todo(todo_id)
    except TodoNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

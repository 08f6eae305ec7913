"""API dependencies"""
import re
from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.application.dto.todo_dto import TodoCreateDTO
from todo_api.application.use_cases.todo_use_cases import TodoUseCases

# Optional sign followed by decimal digits only
TODO_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_todo_repository(request: Request) -> TodoRepository:
    """Get the todo repository created with the application"""
    return request.app.state.todo_repository


def get_todo_use_cases(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoUseCases:
    """Get todo use cases instance bound to the application repository"""
    return TodoUseCases(repository)


async def get_todo_create_data(request: Request) -> TodoCreateDTO:
    """
    Decode the create request body as JSON

    The body is parsed whatever its ``Content-Type`` header says.

    Raises:
        HTTPException: 400 if the body is not a JSON object with a string title
    """
    body = await request.body()
    try:
        return TodoCreateDTO.model_validate_json(body)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object",
        )


def get_todo_id(request: Request) -> int:
    """
    Parse the ``id`` query parameter

    When ``id`` is repeated the first value is used.

    Args:
        request: Incoming request

    Returns:
        Todo id as integer

    Raises:
        HTTPException: 400 if the parameter is missing, empty or not an integer
    """
    values = request.query_params.getlist("id")
    todo_id = values[0] if values else None
    if not todo_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'id' is required",
        )

    if not TODO_ID_PATTERN.fullmatch(todo_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid todo id '{todo_id}'",
        )

    return int(todo_id)

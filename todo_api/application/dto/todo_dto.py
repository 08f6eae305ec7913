"""Todo DTOs"""
from typing import Optional
from pydantic import BaseModel


class TodoCreateDTO(BaseModel):
    """DTO for creating a todo

    A missing or null title is stored as an empty string.
    """
    title: Optional[str] = ""


class TodoResponseDTO(BaseModel):
    """DTO for todo response"""
    id: int
    title: str
    done: bool

    model_config = {"from_attributes": True}

"""Todo repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional
from todo_api.domain.entities.todo import Todo


class TodoRepository(ABC):
    """Interface for todo repository"""

    @abstractmethod
    def create(self, title: str) -> Todo:
        """Create a new todo with the next id"""
        pass

    @abstractmethod
    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get todo by ID"""
        pass

    @abstractmethod
    def get_all(self) -> List[Todo]:
        """Get all todos ordered by id"""
        pass

    @abstractmethod
    def mark_done(self, todo_id: int) -> Todo:
        """Mark todo as done

        Raises:
            TodoNotFoundError: If no todo has this id
        """
        pass

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """Delete todo permanently

        Raises:
            TodoNotFoundError: If no todo has this id
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored todos"""
        pass

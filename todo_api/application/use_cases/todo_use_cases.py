"""Todo use cases"""
import logging
from typing import Dict, List
from todo_api.domain.entities.todo import Todo
from todo_api.domain.exceptions import TodoNotFoundError
from todo_api.domain.repositories.todo_repository import TodoRepository
from todo_api.application.dto.todo_dto import TodoCreateDTO, TodoResponseDTO

logger = logging.getLogger(__name__)


class TodoUseCases:
    """Use cases for todo operations"""

    def __init__(self, todo_repository: TodoRepository):
        self.todo_repository = todo_repository

    def get_all_todos(self) -> List[TodoResponseDTO]:
        """Get all todos ordered by id"""
        todos = self.todo_repository.get_all()
        return [self._todo_to_dto(todo) for todo in todos]

    def get_todos_by_id(self) -> Dict[str, TodoResponseDTO]:
        """Get all todos keyed by their stringified id"""
        return {str(todo.id): todo for todo in self.get_all_todos()}

    def create_todo(self, todo_data: TodoCreateDTO) -> TodoResponseDTO:
        """Create a new todo"""
        created_todo = self.todo_repository.create(todo_data.title or "")
        logger.debug(f"Created todo {created_todo.id}")
        return self._todo_to_dto(created_todo)

    def mark_todo_done(self, todo_id: int) -> TodoResponseDTO:
        """Mark todo as done

        Raises:
            TodoNotFoundError: If the todo does not exist
        """
        try:
            todo = self.todo_repository.mark_done(todo_id)
        except TodoNotFoundError:
            logger.info(f"Cannot mark todo {todo_id} done: not found")
            raise
        logger.debug(f"Marked todo {todo_id} done")
        return self._todo_to_dto(todo)

    def delete_todo(self, todo_id: int) -> None:
        """Delete todo

        Raises:
            TodoNotFoundError: If the todo does not exist
        """
        try:
            self.todo_repository.delete(todo_id)
        except TodoNotFoundError:
            logger.info(f"Cannot delete todo {todo_id}: not found")
            raise
        logger.debug(f"Deleted todo {todo_id}")

    def _todo_to_dto(self, todo: Todo) -> TodoResponseDTO:
        """Convert Todo entity to TodoResponseDTO"""
        return TodoResponseDTO(
            id=todo.id,
            title=todo.title,
            done=todo.done,
        )

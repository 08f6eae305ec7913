"""Todo repository implementation"""
import threading
from dataclasses import replace
from typing import Dict, List, Optional
from todo_api.domain.entities.todo import Todo
from todo_api.domain.exceptions import TodoNotFoundError
from todo_api.domain.repositories.todo_repository import TodoRepository


class TodoRepositoryImpl(TodoRepository):
    """Todo repository implementation with in-memory storage

    A single lock guards both the mapping and the id counter. Every method
    holds it for its whole critical section and hands out copies, so callers
    never see or share the stored instances.
    """

    def __init__(self):
        self._todos: Dict[int, Todo] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def next_id(self) -> int:
        """Id the next created todo will receive"""
        with self._lock:
            return self._next_id

    def create(self, title: str) -> Todo:
        """Create a new todo"""
        with self._lock:
            todo = Todo(id=self._next_id, title=title, done=False)
            self._todos[todo.id] = todo
            self._next_id += 1
            return replace(todo)

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get todo by ID"""
        with self._lock:
            todo = self._todos.get(todo_id)
            return replace(todo) if todo is not None else None

    def get_all(self) -> List[Todo]:
        """Get all todos"""
        with self._lock:
            return [replace(todo) for todo in self._todos.values()]

    def mark_done(self, todo_id: int) -> Todo:
        """Mark todo as done"""
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                raise TodoNotFoundError(todo_id)

            todo.done = True
            return replace(todo)

    def delete(self, todo_id: int) -> None:
        """Delete todo"""
        with self._lock:
            if todo_id not in self._todos:
                raise TodoNotFoundError(todo_id)

            del self._todos[todo_id]

    def count(self) -> int:
        """Number of stored todos"""
        with self._lock:
            return len(self._todos)

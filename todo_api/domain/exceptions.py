"""Domain errors"""


class TodoError(LookupError):
    """Base error for todo operations"""


class TodoNotFoundError(TodoError):
    """Raised when an operation targets an id that is not in the store"""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"Todo with ID '{todo_id}' not found")

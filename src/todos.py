"""Todo lifecycle: add, complete and soft-delete.

Each operation loads the full list from Storage, validates, mutates in
memory and saves the full list back. Validation always runs before any
write, so a rejected operation never touches the document.

Transitions:
    pending -> done      (complete)
    pending -> deleted   (soft_delete)
Done todos cannot be deleted and neither flag is ever reset.
"""
import logging
from datetime import datetime
from typing import Callable, Iterable, List

from errors import (
    AlreadyDeletedError,
    AlreadyDoneError,
    CannotDeleteCompletedError,
    NotFoundError,
    ValidationError,
)
from models import DEADLINE_FORMAT, Todo
from storage import Storage

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


# -------------------- guards --------------------
def parse_deadline(text: str) -> datetime:
    """Parse 'YYYY/MM/DD HH:MM:SS' as naive local time."""
    try:
        return datetime.strptime(text.strip(), DEADLINE_FORMAT)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid deadline {text.strip()!r}; expected YYYY/MM/DD HH:MM:SS (e.g. 2025/01/01 12:00:00)."
        ) from exc


def next_id(todos: Iterable[Todo]) -> int:
    return max((t.id for t in todos), default=0) + 1


def find_todo(todos: Iterable[Todo], todo_id: int) -> Todo:
    """First todo with a matching id, in stored order."""
    for todo in todos:
        if todo.id == todo_id:
            return todo
    raise NotFoundError(todo_id)


def ensure_completable(todo: Todo) -> None:
    if todo.is_done:
        raise AlreadyDoneError(todo.id)


def ensure_deletable(todo: Todo) -> None:
    if todo.is_done:
        raise CannotDeleteCompletedError(todo.id)
    if todo.is_deleted:
        raise AlreadyDeletedError(todo.id)


# -------------------- operations --------------------
class TodoList:
    def __init__(self, storage: Storage, clock: Clock = datetime.now):
        self.storage = storage
        self._clock = clock

    def all(self) -> List[Todo]:
        return self.storage.load()

    def add(self, description: str, deadline_input: str) -> Todo:
        task = description.strip()
        if not task:
            raise ValidationError("Task description required.")
        limit = parse_deadline(deadline_input)
        todos = self.storage.load()
        now = self._clock()
        todo = Todo(
            id=next_id(todos),
            task=task,
            limit=limit,
            created_at=now,
            updated_at=now,
        )
        todos.append(todo)
        self.storage.save(todos)
        log.info("Added todo %d: %s", todo.id, todo.task)
        return todo

    def complete(self, todo_id: int) -> Todo:
        todos = self.storage.load()
        try:
            todo = find_todo(todos, todo_id)
            ensure_completable(todo)
        except (NotFoundError, AlreadyDoneError) as exc:
            log.debug("Rejected complete(%d): %s", todo_id, exc)
            raise
        todo.is_done = True
        todo.updated_at = self._clock()
        self.storage.save(todos)
        log.info("Completed todo %d", todo.id)
        return todo

    def soft_delete(self, todo_id: int) -> Todo:
        todos = self.storage.load()
        try:
            todo = find_todo(todos, todo_id)
            ensure_deletable(todo)
        except (NotFoundError, CannotDeleteCompletedError, AlreadyDeletedError) as exc:
            log.debug("Rejected delete(%d): %s", todo_id, exc)
            raise
        now = self._clock()
        todo.is_deleted = True
        todo.deleted_at = now
        todo.updated_at = now
        self.storage.save(todos)
        log.info("Deleted todo %d", todo.id)
        return todo

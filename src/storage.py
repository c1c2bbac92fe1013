"""Persistence for the todo list: one pretty-printed JSON array on disk.

The whole collection is read on every load and rewritten on every save;
there is exactly one writer, so no locking is attempted.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from errors import StorageError
from models import Todo

log = logging.getLogger(__name__)

DEFAULT_TODO_FILE = Path('todos.json')


class Storage:
    def __init__(self, path: Union[str, Path] = DEFAULT_TODO_FILE):
        self.path = Path(path)

    def load(self) -> List[Todo]:
        """Load all todos in stored order.

        Missing file -> empty list. Unreadable or malformed -> StorageError.
        """
        if not self.path.exists():
            log.debug("No todo file at %s; starting empty", self.path)
            return []
        try:
            text = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"{self.path} is not valid JSON: {exc}") from exc
        if data is None:  # the original tool writes null for an empty list
            return []
        if not isinstance(data, list):
            raise StorageError(f"{self.path} must contain a JSON array of todos.")
        todos = [Todo.from_dict(raw) for raw in data]
        log.debug("Loaded %d todos from %s", len(todos), self.path)
        return todos

    def save(self, todos: List[Todo]) -> None:
        """Persist the full list (pretty-printed, stable key order)."""
        payload = json.dumps([t.to_dict() for t in todos], indent=2, ensure_ascii=False)
        try:
            # encode before opening; the 'w' open truncates the old document
            data = (payload + '\n').encode('utf-8')
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except (OSError, UnicodeEncodeError) as exc:
            raise StorageError(f"Could not save todos: {exc}") from exc
        log.debug("Saved %d todos to %s", len(todos), self.path)

"""Error types raised by the store and lifecycle operations.

Every error's str() is the message shown to the user; the CLI catches
TodoError at the loop boundary and keeps running.
"""


class TodoError(Exception):
    """Base class for all recoverable todo errors."""


class ValidationError(TodoError):
    """Bad user input: deadline format, empty description, bad arguments."""


class StorageError(TodoError):
    """The todo document could not be read, parsed or written."""


class _IdError(TodoError):
    message = "Todo {id}."

    def __init__(self, todo_id: int):
        super().__init__(self.message.format(id=todo_id))
        self.todo_id = todo_id


class NotFoundError(_IdError):
    message = "Todo id {id} not found."


class AlreadyDoneError(_IdError):
    message = "Todo {id} is already done."


class AlreadyDeletedError(_IdError):
    message = "Todo {id} is already deleted."


class CannotDeleteCompletedError(_IdError):
    message = "Todo {id} is done; completed todos cannot be deleted."

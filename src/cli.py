"""Command-line interface loop for the todo tracker.

Commands are case-sensitive and each has a short alias. Every
TodoError is reported here and the loop keeps going; only 'exit',
end of input or Ctrl-C leave it.
"""
import logging
from typing import Callable, List, Optional

import display
from errors import StorageError, TodoError, ValidationError
from todos import TodoList

log = logging.getLogger(__name__)

PROMPT = "> "
GREETING = "Todo CLI - type 'help' or 'h' for commands."
GOODBYE = "Goodbye."

COMMAND_ALIASES = {
    'help': 'help', 'h': 'help',
    'add': 'add', 'a': 'add',
    'list': 'list', 'l': 'list',
    'done': 'done', 'd': 'done',
    'delete': 'delete', 'del': 'delete',
    'exit': 'exit', 'e': 'exit',
}

HELP_LINES = (
    "Commands:",
    "  add(a) <task...>      Add a task (prompts for the deadline)",
    "  list(l)               List all tasks",
    "  done(d) <id>          Mark a task as done",
    "  delete(del) <id>      Delete a pending task",
    "  help(h)               Show this help",
    "  exit(e)               Exit",
)


def parse_id(tokens: List[str]) -> int:
    """The single integer id argument of done/delete."""
    if not tokens:
        raise ValidationError("Id required.")
    if len(tokens) > 1:
        raise ValidationError("Exactly one id expected.")
    try:
        return int(tokens[0])
    except ValueError:
        raise ValidationError(f"Invalid id: {tokens[0]!r}; ids are numbers.") from None


class CLI:
    def __init__(self, todos: TodoList,
                 prompt: Callable[[str], str] = input,
                 out: Callable[[str], None] = print):
        self.todos = todos
        self._prompt = prompt
        self._out = out

    def run(self) -> None:
        """Main REPL loop; returns on exit, end of input or Ctrl-C."""
        exit_message: Optional[str] = None
        self._out(GREETING)
        try:
            while True:
                line = self._prompt(PROMPT)
                if not self.handle_line(line):
                    exit_message = GOODBYE
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. " + GOODBYE
        finally:
            if exit_message:
                self._out(exit_message)

    # -------------------- command dispatch --------------------
    def handle_line(self, line: str) -> bool:
        """Run one input line; False means the user asked to exit."""
        tokens = line.split()
        if not tokens:
            return True
        command = COMMAND_ALIASES.get(tokens[0])
        if command is None:
            self._out(f"Unknown command: {tokens[0]}. Type 'help' for instructions.")
            return True
        if command == 'exit':
            return False
        try:
            getattr(self, f'_cmd_{command}')(tokens[1:])
        except StorageError as exc:
            log.warning("Storage failure during %s: %s", command, exc)
            self._out(str(exc))
        except TodoError as exc:
            self._out(str(exc))
        return True

    # ---- individual command helpers ----
    def _cmd_help(self, args: List[str]) -> None:
        for line in HELP_LINES:
            self._out(line)

    def _cmd_add(self, args: List[str]) -> None:
        if not args:
            raise ValidationError("Usage: add <task...>")
        description = ' '.join(args)
        self._out("Enter the deadline (e.g. 2025/01/01 12:00:00)")
        deadline = self._prompt(PROMPT)
        todo = self.todos.add(description, deadline)
        self._out(f"Added: {todo.task}")

    def _cmd_list(self, args: List[str]) -> None:
        if args:
            raise ValidationError("Usage: list")
        display.show(self.todos.all(), out=self._out)

    def _cmd_done(self, args: List[str]) -> None:
        todo = self.todos.complete(parse_id(args))
        self._out(f"Done: {todo.task}")

    def _cmd_delete(self, args: List[str]) -> None:
        todo = self.todos.soft_delete(parse_id(args))
        self._out(f"Deleted: {todo.task}")

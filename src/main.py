"""Main entry point for the todo tracker."""
import logging

from settings import LOG_FORMAT, Settings
from storage import Storage
from todos import TodoList
from cli import CLI


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    todos = TodoList(Storage(settings.todo_file))
    CLI(todos).run()

if __name__ == "__main__":
    main()

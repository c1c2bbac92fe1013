from datetime import datetime, timedelta

import pytest

from storage import Storage
from todos import TodoList


class FakeClock:
    """Deterministic clock: each call advances one minute."""

    def __init__(self, start=datetime(2025, 1, 1, 9, 0, 0)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(minutes=1)
        return current


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path / "todos.json")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def todo_list(storage, clock):
    return TodoList(storage, clock=clock)

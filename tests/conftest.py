"""
Shared pytest fixtures for the todo-app test suite.
"""
import io

import pytest

from todo_app.config import Settings
from todo_app.tasks import TaskListStore

from .fakes import FakeConfirmer, FakeNotifier


@pytest.fixture
def confirmer():
    return FakeConfirmer(answer=True)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def store(confirmer, notifier):
    """Store seeded with the default tasks."""
    return TaskListStore(confirm=confirmer, notify=notifier)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def settings():
    """Production-like settings, no environment involved."""
    return Settings()

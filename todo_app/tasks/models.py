"""
Todo App - Task List Models

A task is just its text label. There is no id: two tasks with the same
text are the same task as far as the store is concerned.
"""
from enum import Enum
from typing import Callable, Tuple


Task = str

# Answers a yes/no question; blocks until the user decides.
ConfirmCallback = Callable[[str], bool]

# Shows a message to the user; no answer expected.
NotifyCallback = Callable[[str], None]


DEFAULT_TASKS: Tuple[Task, ...] = (
    "Visit Ann",
    "Call Dad",
    "Go to the Gym",
    "Wash the dishes",
    "Shop for the party",
)


class TaskAction(str, Enum):
    """Store operations, as recorded in log events."""
    ADD = "add"
    REMOVE = "remove"
    MARK_DONE = "mark_done"


def removal_prompt(task: Task) -> str:
    """Question asked before a task is removed."""
    return f'Are you sure that you want to remove the following task? \n "{task}"'


def done_message(task: Task) -> str:
    """Notification shown when a task is marked as done."""
    return f'The task: "{task}" is done'

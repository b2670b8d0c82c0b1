"""
Todo App - Task List

In-memory task list with a confirmation gate on removal.
"""
from .models import (
    Task,
    TaskAction,
    ConfirmCallback,
    NotifyCallback,
    DEFAULT_TASKS,
    removal_prompt,
    done_message,
)
from .store import TaskListStore

__all__ = [
    "Task",
    "TaskAction",
    "ConfirmCallback",
    "NotifyCallback",
    "DEFAULT_TASKS",
    "removal_prompt",
    "done_message",
    "TaskListStore",
]

"""
Todo App - Task List Store

In-memory ordered list of tasks for one UI session.
"""
from typing import Iterable, Iterator, List, Optional

from .models import (
    Task,
    TaskAction,
    ConfirmCallback,
    NotifyCallback,
    DEFAULT_TASKS,
    removal_prompt,
    done_message,
)
from ..config.logging import get_logger


logger = get_logger("tasks")


def _ignore(message: str) -> None:
    pass


class TaskListStore:
    """
    Ordered collection of tasks.

    Removal is gated by ``confirm``: the store asks and waits for the answer
    before touching the list. ``notify`` receives user-facing messages.

    Usage:
        store = TaskListStore(confirm=ask_user, notify=print)
        store.add("Buy milk")
        store.remove("Call Dad")  # asks first
    """

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        *,
        confirm: ConfirmCallback,
        notify: Optional[NotifyCallback] = None,
    ):
        self._tasks: List[Task] = list(DEFAULT_TASKS if tasks is None else tasks)
        self._confirm = confirm
        self._notify = notify or _ignore

    # ==================== READ ====================

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the current tasks, in insertion order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task: object) -> bool:
        return task in self._tasks

    def __repr__(self) -> str:
        return f"TaskListStore({self._tasks!r})"

    # ==================== OPERATIONS ====================

    def add(self, task: Task) -> None:
        """Append a task to the end of the list. Duplicates and empty text are accepted."""
        logger.info(
            "Adding task: %s", task,
            extra={"extra_data": {"action": TaskAction.ADD.value, "task": task}},
        )
        self._tasks.append(task)

    def remove(self, task: Task) -> int:
        """
        Remove every entry equal to ``task`` once the user confirms.

        Returns:
            Number of entries removed (0 when declined or nothing matched)
        """
        confirmed = bool(self._confirm(removal_prompt(task)))

        removed = 0
        if confirmed:
            remaining = [t for t in self._tasks if t != task]
            removed = len(self._tasks) - len(remaining)
            self._tasks = remaining

        logger.info(
            "Removing Task: %s", task,
            extra={"extra_data": {
                "action": TaskAction.REMOVE.value,
                "task": task,
                "confirmed": confirmed,
                "removed": removed,
            }},
        )
        return removed

    def mark_as_done(self, task: Task) -> None:
        """Tell the user the task is done. The list itself is left as is."""
        logger.info(
            "Marking task as done: %s", task,
            extra={"extra_data": {"action": TaskAction.MARK_DONE.value, "task": task}},
        )
        self._notify(done_message(task))

"""
Todo App - Interfaces
"""
from .console import (
    TaskConsole,
    ConsoleConfirmer,
    ConsoleNotifier,
    CommandError,
    create_session,
    parse_command,
    resolve_task,
)

__all__ = [
    "TaskConsole",
    "ConsoleConfirmer",
    "ConsoleNotifier",
    "CommandError",
    "create_session",
    "parse_command",
    "resolve_task",
]

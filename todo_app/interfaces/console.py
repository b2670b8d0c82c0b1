"""
Todo App - Console Interface

Interactive task list over stdin/stdout. One session owns one store.
"""
import sys
from typing import Callable, Dict, Optional, TextIO, Tuple

from ..tasks import Task, TaskListStore
from ..config.logging import get_logger, log_error


logger = get_logger("console")

InputFn = Callable[[str], str]

TITLE = "todo-list"

HELP_TEXT = """Commands:
  list            show tasks
  add <text>      add a task
  remove <task>   remove a task (asks first)
  done <task>     mark a task as done
  help            show this help
  quit            leave

<task> is the task text, or #N for the N-th task in the list."""

YES_ANSWERS = ("y", "yes")


class CommandError(Exception):
    """Raised for a command the console can't carry out (shown to the user)."""


# ==================== CAPABILITIES ====================

class ConsoleConfirmer:
    """Blocking yes/no prompt. Anything but y/yes (or end of input) means no."""

    def __init__(self, input_fn: InputFn = input, output: Optional[TextIO] = None):
        self.input_fn = input_fn
        self.output = output or sys.stdout

    def __call__(self, question: str) -> bool:
        print(question, file=self.output)
        try:
            answer = self.input_fn("[y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS


class ConsoleNotifier:
    """Prints notifications."""

    def __init__(self, output: Optional[TextIO] = None):
        self.output = output or sys.stdout

    def __call__(self, message: str) -> None:
        print(f"* {message}", file=self.output)


# ==================== PARSING ====================

def parse_command(line: str) -> Tuple[str, str]:
    """Split a console line into (command, argument)."""
    name, _, arg = line.strip().partition(" ")
    return name.lower(), arg.strip()


def resolve_task(store: TaskListStore, arg: str) -> Task:
    """
    Turn a command argument into task text.

    ``#N`` picks the N-th task (1-based); anything else is taken literally.
    """
    if not arg:
        raise CommandError("Task text is required.")

    if arg.startswith("#") and arg[1:].isdigit():
        position = int(arg[1:])
        tasks = store.tasks
        if not 1 <= position <= len(tasks):
            raise CommandError(f"No task #{position} (list has {len(tasks)}).")
        return tasks[position - 1]

    return arg


# ==================== SESSION ====================

class TaskConsole:
    """Line-oriented front end for a TaskListStore."""

    def __init__(
        self,
        store: TaskListStore,
        input_fn: InputFn = input,
        output: Optional[TextIO] = None,
    ):
        self.store = store
        self.input_fn = input_fn
        self.output = output or sys.stdout

        self._handlers: Dict[str, Callable[[str], None]] = {
            "list": self._handle_list,
            "ls": self._handle_list,
            "add": self._handle_add,
            "remove": self._handle_remove,
            "rm": self._handle_remove,
            "done": self._handle_done,
            "help": self._handle_help,
        }

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def render(self) -> None:
        """Print the numbered task list."""
        tasks = self.store.tasks
        if not tasks:
            self._print("(no tasks)")
            return
        for position, task in enumerate(tasks, start=1):
            self._print(f"{position:>3}. {task}")

    def handle(self, line: str) -> bool:
        """
        Execute one console line.

        Returns:
            False when the session should end
        """
        if not line.strip():
            return True

        name, arg = parse_command(line)
        if name in ("quit", "exit"):
            return False

        handler = self._handlers.get(name)
        if handler is None:
            self._print(f"Unknown command: {name}. Type 'help' for commands.")
            return True

        try:
            handler(arg)
        except CommandError as e:
            self._print(str(e))
        except Exception as e:
            log_error(logger, e, context=f"console command '{name}'", line=line)
            self._print("Internal error while handling the command.")

        return True

    def run(self) -> None:
        """Read commands until quit, end of input or Ctrl-C."""
        logger.info("Console session started")
        self._print(f"{TITLE} - type 'help' for commands.")
        self.render()

        while True:
            # Ctrl-C may arrive at any prompt, including a confirmation
            try:
                line = self.input_fn("> ")
                if not self.handle(line):
                    break
            except EOFError:
                logger.info("Console EOF received, exiting")
                break
            except KeyboardInterrupt:
                logger.info("Console interrupted, exiting")
                self._print()
                break

        logger.info("Console session finished", extra={"extra_data": {"tasks": len(self.store)}})

    # ==================== HANDLERS ====================

    def _handle_list(self, arg: str) -> None:
        self.render()

    def _handle_add(self, arg: str) -> None:
        if not arg:
            raise CommandError("Usage: add <text>")
        self.store.add(arg)
        self.render()

    def _handle_remove(self, arg: str) -> None:
        task = resolve_task(self.store, arg)
        removed = self.store.remove(task)
        if removed:
            self._print(f"Removed {removed} task(s).")
        self.render()

    def _handle_done(self, arg: str) -> None:
        task = resolve_task(self.store, arg)
        self.store.mark_as_done(task)

    def _handle_help(self, arg: str) -> None:
        self._print(HELP_TEXT)


def create_session(
    input_fn: InputFn = input,
    output: Optional[TextIO] = None,
) -> TaskConsole:
    """Build a console session with a freshly seeded store."""
    output = output or sys.stdout
    store = TaskListStore(
        confirm=ConsoleConfirmer(input_fn=input_fn, output=output),
        notify=ConsoleNotifier(output=output),
    )
    return TaskConsole(store, input_fn=input_fn, output=output)

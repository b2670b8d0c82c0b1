"""
Deterministic stand-ins for the user side of the task list.
"""


class FakeConfirmer:
    """Answers every question with ``answer`` and records what was asked."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.questions = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


class FakeNotifier:
    """Records notifications."""

    def __init__(self):
        self.messages = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


def scripted(*lines):
    """input() replacement that replays ``lines`` then raises EOFError."""
    remaining = list(lines)
    prompts = []

    def _input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    _input.prompts = prompts
    return _input

"""
Task list runner

Starts the interactive console task list.
"""
import logging
import sys

from dotenv import load_dotenv

# Load .env file
load_dotenv()

from todo_app.config import get_settings, setup_logging_from_settings  # noqa: E402
from todo_app.interfaces import create_session  # noqa: E402

logger = logging.getLogger("todo.runner")


def main():
    settings = get_settings()
    # Keep stdout for the prompt: logs go to stderr (and LOG_FILE if set)
    setup_logging_from_settings(settings, stream=sys.stderr)

    logger.info("Starting task list (env=%s)", settings.app_env)
    create_session().run()


if __name__ == "__main__":
    main()

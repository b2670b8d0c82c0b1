"""
Web API runner

Serves todo_app.api.app with uvicorn. Settings come from the environment
(and .env); see todo_app/config/settings.py.
"""
import logging

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from todo_app.config import get_settings, setup_logging_from_settings  # noqa: E402

logger = logging.getLogger("todo.runner")


def main():
    settings = get_settings()
    setup_logging_from_settings(settings)

    logger.info(
        "Serving Movie Web API on %s:%s (env=%s, origins=%s)",
        settings.api.host,
        settings.api.port,
        settings.app_env,
        ",".join(settings.api.cors_origins),
    )

    # uvicorn handles SIGINT/SIGTERM with a graceful shutdown
    uvicorn.run(
        "todo_app.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.logging.level.lower(),
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()

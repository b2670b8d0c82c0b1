"""
Todo App API Layer

Read-only movie catalog and random weather forecasts.

Run:
    python run_api.py
    # or
    uvicorn todo_app.api.app:app --reload

Endpoints:
    GET  /health              - Health check
    GET  /                    - API info

    GET  /movies              - List movies
    GET  /movies/{id}         - Get movie (null if unknown)

    GET  /weatherforecast     - Five-day random forecast

Docs (APP_ENV=development only):
    GET  /openapi/v1.json
    GET  /swagger
"""

from .app import create_app, app
from .movies import router as movies_router
from .weather import router as weather_router

__all__ = [
    "create_app",
    "app",
    "movies_router",
    "weather_router",
]

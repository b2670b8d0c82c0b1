"""
Todo App - Configuration Settings
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


DEFAULT_CORS_ORIGINS = ["http://localhost:5135"]

# Names understood by both logging and uvicorn
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    return level if level in LOG_LEVELS else default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    json_logs: bool = True
    file: Optional[Path] = None


@dataclass
class ApiSettings:
    """HTTP API configuration."""
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    https_redirect: bool = False


@dataclass
class Settings:
    """Main settings container."""
    app_env: str = "production"
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    api: ApiSettings = field(default_factory=ApiSettings)

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in ("development", "dev")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (.env is loaded by the runners)."""
        app_env = os.environ.get("APP_ENV", "production")
        dev = app_env.lower() in ("development", "dev")

        log_file = os.environ.get("LOG_FILE")
        logging_settings = LoggingSettings(
            level=_env_log_level("LOG_LEVEL", "DEBUG" if dev else "INFO"),
            json_logs=_env_bool("LOG_JSON", not dev),
            file=Path(log_file) if log_file else None,
        )

        api_settings = ApiSettings(
            host=os.environ.get("API_HOST", "0.0.0.0"),
            port=_env_int("PORT", _env_int("API_PORT", 8000)),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            https_redirect=_env_bool("HTTPS_REDIRECT", False),
        )

        return cls(app_env=app_env, logging=logging_settings, api=api_settings)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (read from the environment on first use)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None

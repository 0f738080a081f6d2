from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_DB_FILE = "./database/database.json"


@dataclass(frozen=True, slots=True)
class Settings:
    db_file: Path
    api_key: str
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    rate_limit_per_minute: int = 120
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000


def _getenv(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def load_settings() -> Settings:
    """Read the service configuration from the environment."""

    origins_env = _getenv("API_CORS_ORIGINS")
    origins = [origin.strip() for origin in origins_env.split(",") if origin.strip()]
    if not origins:
        origins = ["*"]

    return Settings(
        db_file=Path(_getenv("DB_FILE", DEFAULT_DB_FILE)).expanduser(),
        api_key=_getenv("API_KEY") or _getenv("ADMIN_API_KEY"),
        cors_origins=origins,
        rate_limit_per_minute=int(_getenv("RATE_LIMIT_PER_MINUTE", "120")),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        host=_getenv("HOST", "0.0.0.0"),
        port=int(_getenv("PORT", "3000")),
    )

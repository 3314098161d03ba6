from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cors_origins: Tuple[str, ...]

    service_name: str
    version: str

    host: str
    port: int
    debug: bool


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    """
    Loads settings from environment variables, after reading a local .env if present.
    """
    load_dotenv()

    return Settings(
        env=os.getenv("SR_ENV", "dev"),
        log_level=os.getenv("SR_LOG_LEVEL", "INFO"),
        cors_origins=_split_origins(os.getenv("SR_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        service_name=os.getenv("SR_SERVICE_NAME", "sr-calculator"),
        version=os.getenv("SR_VERSION", "1.0.0"),
        host=os.getenv("SR_HOST", "127.0.0.1"),
        port=_env_int("SR_PORT", 3000),
        debug=_env_bool("SR_DEBUG", False),
    )

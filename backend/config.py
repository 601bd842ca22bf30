from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    port: int = 5000
    debug: bool = False


def _env(key: str) -> Optional[str]:
    # empty values count as unset
    value = os.getenv(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings() -> Settings:
    """
    Read .env (if present) and FI_* environment variables on top of the defaults.
    """
    load_dotenv()

    defaults = Settings()
    origins = _env("FI_CORS_ORIGINS")
    port = _env("FI_PORT")
    debug = _env("FI_DEBUG")

    return Settings(
        env=_env("FI_ENV") or defaults.env,
        log_level=(_env("FI_LOG_LEVEL") or defaults.log_level).upper(),
        cors_origins=(
            tuple(o.strip() for o in origins.split(",") if o.strip())
            if origins
            else defaults.cors_origins
        ),
        port=int(port) if port else defaults.port,
        debug=debug.lower() in _TRUTHY if debug else defaults.debug,
    )

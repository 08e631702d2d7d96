from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    rate_limit_enabled: bool
    analysis_rate_limit_requests: int
    analysis_rate_limit_window_seconds: int
    analysis_rate_limit_db_path: str
    trust_x_forwarded_for: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    max_input_chars: int
    min_cv_chars: int
    segmentation_mode: str
    default_target_market: str


settings = Settings(
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    analysis_rate_limit_requests=_get_env_int("ANALYSIS_RATE_LIMIT_REQUESTS", 10),
    analysis_rate_limit_window_seconds=_get_env_int("ANALYSIS_RATE_LIMIT_WINDOW_SECONDS", 15 * 60),
    analysis_rate_limit_db_path=(
        _get_env("ANALYSIS_RATE_LIMIT_DB_PATH", "data/analysis_rate_limit.db") or "data/analysis_rate_limit.db"
    ),
    trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", ["*"]),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    max_input_chars=_get_env_int("MAX_INPUT_CHARS", 15000),
    min_cv_chars=_get_env_int("MIN_CV_CHARS", 50),
    segmentation_mode=(_get_env("SEGMENTATION_MODE", "headings") or "headings").strip().lower(),
    default_target_market=_get_env("DEFAULT_TARGET_MARKET", "Global") or "Global",
)

if settings.segmentation_mode not in {"headings", "anchors"}:
    raise RuntimeError("SEGMENTATION_MODE must be either 'headings' or 'anchors'.")

if settings.analysis_rate_limit_requests < 1 or settings.analysis_rate_limit_window_seconds < 1:
    raise RuntimeError("ANALYSIS_RATE_LIMIT_REQUESTS and ANALYSIS_RATE_LIMIT_WINDOW_SECONDS must be positive.")

from __future__ import annotations

import logging
import os
from pathlib import Path

import redis
from dotenv import load_dotenv

from dulp.progress import DEFAULT_PROGRESS_KEY


def load_env(*, project_root: Path | None = None) -> None:
    """Load a repo `.env` without overriding variables already set in the environment."""

    root = project_root or Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_redis_url() -> str:
    return os.environ.get("DULP_REDIS_URL", "redis://localhost:6379/0")


def create_progress_store() -> redis.Redis:
    """Redis client for saved progress; values come back as `str`, not bytes."""

    return redis.Redis.from_url(get_redis_url(), decode_responses=True)


def get_progress_key() -> str:
    return os.environ.get("DULP_PROGRESS_KEY", DEFAULT_PROGRESS_KEY)


def get_levels_csv() -> Path | None:
    raw = os.environ.get("DULP_LEVELS_CSV", "").strip()
    return Path(raw) if raw else None


def get_log_level() -> int:
    name = os.environ.get("DULP_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

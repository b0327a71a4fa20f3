from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from tasklist.domain.enums import TaskFilter

def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: str = "logs"
    default_filter: TaskFilter = TaskFilter.ACTIVE
    seed_sample_tasks: bool = True


def load_settings() -> Settings:
    raw_filter = os.getenv("DEFAULT_FILTER", TaskFilter.ACTIVE.value).strip().lower()
    try:
        default_filter = TaskFilter(raw_filter)
    except ValueError:
        choices = ", ".join(item.value for item in TaskFilter)
        raise RuntimeError(f"DEFAULT_FILTER must be one of: {choices} (got {raw_filter!r}).") from None

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR", "logs"),
        default_filter=default_filter,
        seed_sample_tasks=os.getenv("SEED_SAMPLE_TASKS", "true").strip().lower() in _TRUE_VALUES,
    )


load_env()

SETTINGS = load_settings()

# src/todo_tactician/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every value has a default, so the tool runs with no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_PATH = Path("tasks.json")
DEFAULT_DATA_DIR = Path(".local/todo")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_path: Path

    # ---- Logging ----
    log_level: str
    data_dir: Path
    log_to_file: bool

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            tasks_path=_env_path(_k("TASKS_PATH"), DEFAULT_TASKS_PATH),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            data_dir=_env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
        )


def get_settings() -> Settings:
    return Settings.from_env()

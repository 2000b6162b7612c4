# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Components receive settings explicitly; nothing reads the environment on its own.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_PATH = Path("todos.txt")
DEFAULT_DATA_DIR = Path(".local/todolist")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool | None) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local paths ----
    data_dir: Path
    tasks_path: Path

    # ---- Terminal ----
    # None means "decide from the terminal" (see use_color).
    color: bool | None

    @staticmethod
    def from_env() -> "Settings":
        # Look for .env in the working directory, not next to the installed package.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "todolist") or "todolist",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            data_dir=_env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR),
            tasks_path=_env_path(_k("TASKS_PATH"), DEFAULT_TASKS_PATH),
            color=_env_bool(_k("COLOR"), None),
        )


def use_color(settings) -> bool:
    """Resolve the colour switch: explicit setting wins, otherwise only on a TTY."""
    forced = getattr(settings, "color", None)
    if forced is not None:
        return bool(forced)
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS

# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "TimeTracker"
COMPANY_NAME = "Pirxey"

DB_FILENAME = "time_tracker.db"
LOG_DIRNAME = "logs"


def _platform_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def _ensure(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def user_data_dir() -> Path:
    """
    Per-user directory holding the database and logs.

    ``TT_DATA_DIR`` wins when set; otherwise
    ``%APPDATA%\\Pirxey\\TimeTracker`` on Windows,
    ``~/Library/Application Support/Pirxey/TimeTracker`` on macOS and
    ``$XDG_DATA_HOME/Pirxey/TimeTracker`` (``~/.local/share``) elsewhere.
    """
    override = (os.getenv("TT_DATA_DIR") or "").strip()
    if override:
        return _ensure(Path(override).expanduser())
    try:
        return _ensure(_platform_base() / COMPANY_NAME / APP_NAME)
    except OSError:
        # Read-only or missing platform dir: fall back to the home directory
        return _ensure(Path.home() / f".{APP_NAME.lower()}")


def user_log_dir() -> Path:
    return _ensure(user_data_dir() / LOG_DIRNAME)


def default_db_path() -> Path:
    return user_data_dir() / DB_FILENAME

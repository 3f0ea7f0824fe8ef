# src/kiwi/config.py

"""Centralized settings.

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Paths are relative to the process working directory.
- Nothing is read from the environment; tests build Settings directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "kiwi"
DEFAULT_DATA_DIR = Path("data")
DEFAULT_DATA_FILE_NAME = "kiwi.txt"
DEFAULT_LOG_FILE_NAME = "kiwi.log"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    data_file: Path
    log_file: Path

    # ---- Console host behavior ----
    confirm_clear: bool = True
    offer_replace: bool = True

    @staticmethod
    def defaults(base_dir: str | Path | None = None) -> "Settings":
        data_dir = DEFAULT_DATA_DIR if base_dir is None else Path(base_dir) / DEFAULT_DATA_DIR
        return Settings(
            app_name=APP_NAME,
            log_level="WARNING",
            data_dir=data_dir,
            data_file=data_dir / DEFAULT_DATA_FILE_NAME,
            log_file=data_dir / DEFAULT_LOG_FILE_NAME,
        )


SETTINGS = Settings.defaults()


def get_settings() -> Settings:
    return SETTINGS

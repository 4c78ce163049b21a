"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

STORAGE_MODES = ("json", "database")


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtWise"
    JSON_FILENAME = "debts.json"
    DB_FILENAME = "debtwise.db"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("DEBTWISE_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("DEBTWISE_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()

        json_path = os.getenv("DEBTWISE_JSON_PATH")
        self.JSON_PATH = (
            Path(json_path).expanduser() if json_path else self.DATA_DIR / self.JSON_FILENAME
        )

        self.STORAGE_MODE = os.getenv("DEBTWISE_STORAGE_MODE", "json").strip().lower()
        if self.STORAGE_MODE not in STORAGE_MODES:
            raise ValueError(
                f"DEBTWISE_STORAGE_MODE must be one of {', '.join(STORAGE_MODES)}; "
                f"got {self.STORAGE_MODE!r}."
            )

        explicit_url = os.getenv("DEBTWISE_DATABASE_URL")
        self.DATABASE_URL = explicit_url or self._build_sqlite_url()
        # Mirroring only makes sense when someone pointed us at a real database.
        self.MIRROR_TO_DATABASE = _env_bool(
            "DEBTWISE_MIRROR_TO_DATABASE", default=bool(explicit_url)
        )

        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("DEBTWISE_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the JSON store, SQLite file and logs."""

        data_root = os.getenv("DEBTWISE_DATA_DIR", "data")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        engine_options: dict[str, Any] = {"pool_pre_ping": True}
        if self.DATABASE_URL.startswith("sqlite"):
            engine_options["connect_args"] = {"check_same_thread": False}
        return engine_options


class DevConfig(BaseConfig):
    """Development configuration using the local JSON file."""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Configuration used by the test suite and the Flask test client."""

    TESTING = True

"""Repository wiring for DebtWise."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import DebtRepository
from .infra.database import bootstrap_database
from .infra.repositories import (
    JSONDebtRepository,
    MirroredDebtRepository,
    SQLModelDebtRepository,
)
from .logging_config import get_logger

EXTENSION_KEY = "debtwise.repository"

logger = get_logger(__name__)


def build_repository(config: BaseConfig) -> DebtRepository:
    """Choose the storage backend described by *config*.

    ``database`` mode reads and writes the relational store only. ``json`` mode
    uses the JSON file and, when mirroring is enabled, copies writes to the
    database. An unreachable mirror is logged and left out.
    """

    if config.STORAGE_MODE == "database":
        _, session_factory = bootstrap_database(config)
        return SQLModelDebtRepository(session_factory)

    primary = JSONDebtRepository(config.JSON_PATH)
    if not config.MIRROR_TO_DATABASE:
        return primary

    try:
        _, session_factory = bootstrap_database(config)
    except Exception as exc:
        logger.warning("Database mirror unavailable, using JSON only: %s", exc)
        return primary
    return MirroredDebtRepository(primary, SQLModelDebtRepository(session_factory))


def init_repository(app: Flask, repository: DebtRepository | None = None) -> DebtRepository:
    """Attach the repository to *app*; an explicit *repository* wins over config."""

    if repository is None:
        repository = build_repository(app.config["DEBTWISE_CONFIG"])
    app.extensions[EXTENSION_KEY] = repository
    return repository


def get_repository() -> DebtRepository:
    """Return the repository bound to the current Flask app."""

    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:  # pragma: no cover - misconfigured app
        raise RuntimeError("Debt repository not initialized") from None

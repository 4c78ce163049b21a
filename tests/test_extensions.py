"""Tests for choosing the storage backend from configuration."""

from __future__ import annotations

from debtwise import create_app
from debtwise.config import BaseConfig
from debtwise.extensions import EXTENSION_KEY, build_repository
from debtwise.infra.repositories import (
    JSONDebtRepository,
    MirroredDebtRepository,
    SQLModelDebtRepository,
)


def test_json_mode_without_database(isolated_environment):
    repository = build_repository(BaseConfig())

    assert isinstance(repository, JSONDebtRepository)
    assert repository.path == isolated_environment.resolve() / "debts.json"


def test_database_mode(monkeypatch, make_debt):
    monkeypatch.setenv("DEBTWISE_STORAGE_MODE", "database")

    repository = build_repository(BaseConfig())

    assert isinstance(repository, SQLModelDebtRepository)
    assert repository.create(make_debt()).id == 1


def test_json_mode_with_mirror(monkeypatch, tmp_path, make_debt):
    monkeypatch.setenv("DEBTWISE_DATABASE_URL", f"sqlite:///{tmp_path / 'mirror.db'}")

    repository = build_repository(BaseConfig())

    assert isinstance(repository, MirroredDebtRepository)
    created = repository.create(make_debt(description="Mirrored"))
    assert repository.mirror.get_by_id(created.id).description == "Mirrored"


def test_unreachable_mirror_falls_back_to_json(monkeypatch, tmp_path, caplog):
    # A directory that cannot exist makes SQLite fail when the schema is created.
    monkeypatch.setenv(
        "DEBTWISE_DATABASE_URL", f"sqlite:///{tmp_path / 'missing' / 'nested' / 'mirror.db'}"
    )

    repository = build_repository(BaseConfig())

    assert isinstance(repository, JSONDebtRepository)
    assert "Database mirror unavailable" in caplog.text


def test_create_app_uses_configured_repository():
    app = create_app("testing")

    assert isinstance(app.extensions[EXTENSION_KEY], JSONDebtRepository)
    assert app.config["TESTING"] is True

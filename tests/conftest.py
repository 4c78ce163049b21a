"""Pytest configuration and shared fixtures for DebtWise tests.

Provides isolated storage (a temporary JSON file and a temporary SQLite
database), a debt factory, and a Flask app wired to temporary storage so no
test touches the real data directory.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from debtwise import create_app
from debtwise.infra.database import create_session_factory
from debtwise.infra.repositories import JSONDebtRepository, SQLModelDebtRepository
from debtwise.models import Debt

# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point every DEBTWISE_* setting at a per-test directory."""

    for name in list(os.environ):
        if name.startswith("DEBTWISE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEBTWISE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DEBTWISE_SECRET_KEY", "test-secret")
    yield tmp_path / "data"


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def json_path(tmp_path) -> Path:
    """Location of a JSON store that does not exist yet."""
    return tmp_path / "store" / "debts.json"


@pytest.fixture
def json_repository(json_path) -> JSONDebtRepository:
    return JSONDebtRepository(json_path)


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with the ``debt`` table created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture
def session_factory(db_engine):
    """Transactional session scopes bound to the test database."""
    return create_session_factory(db_engine)


@pytest.fixture
def sql_repository(session_factory) -> SQLModelDebtRepository:
    return SQLModelDebtRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def make_debt():
    """Factory for unsaved Debt instances.

    Returns:
        Callable: Function that builds a Debt with sensible defaults
    """

    def _make_debt(
        description: str = "Test Debt",
        principal: float = 1000.0,
        annual_rate_percent: float = 18.0,
        minimum_payment: float = 50.0,
        id: int | None = None,
    ) -> Debt:
        return Debt(
            id=id,
            description=description,
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            minimum_payment=minimum_payment,
        )

    return _make_debt


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(json_repository):
    """Flask app in testing mode backed by the temporary JSON store."""

    app = create_app("testing", repository=json_repository)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()

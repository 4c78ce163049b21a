"""Database infrastructure for the relational debt store."""

from __future__ import annotations

from contextlib import contextmanager
from functools import partial
from typing import Callable, ContextManager, Iterator, Tuple

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..config import BaseConfig

SessionFactory = Callable[[], ContextManager[Session]]


def create_db_engine(config: BaseConfig) -> Engine:
    """Create the engine for ``DATABASE_URL`` with the configured pool options."""
    return create_engine(config.DATABASE_URL, **config.sqlalchemy_engine_options())


def init_database(engine: Engine) -> None:
    """Create the ``debt`` table if it does not exist yet."""
    from .. import models  # noqa: F401  # register tables with SQLModel metadata

    SQLModel.metadata.create_all(engine)


@contextmanager
def debt_session(engine: Engine) -> Iterator[Session]:
    """One unit of work against the debt table.

    Commits when the block exits cleanly and rolls back otherwise. Loaded
    debts stay readable after the session closes.
    """

    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        session.commit()


def create_session_factory(engine: Engine) -> SessionFactory:
    """Bind :func:`debt_session` to *engine* for the SQL repository."""
    return partial(debt_session, engine)


def bootstrap_database(config: BaseConfig) -> Tuple[Engine, SessionFactory]:
    """Connect to the debt database, ensure its schema and return a session factory."""

    engine = create_db_engine(config)
    init_database(engine)
    return engine, create_session_factory(engine)

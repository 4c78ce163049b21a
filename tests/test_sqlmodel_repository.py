"""Unit tests for the SQLModel debt repository."""

from __future__ import annotations

import pytest
from sqlmodel import Session, select

from debtwise.domain.exceptions import DebtNotFoundError
from debtwise.models import Debt


def test_create_assigns_id_and_timestamp(sql_repository, make_debt):
    debt = sql_repository.create(make_debt(description="Personal loan", principal=50000))

    assert debt.id is not None
    assert debt.created_at is not None
    assert sql_repository.get_by_id(debt.id).description == "Personal loan"


def test_fetch_all_newest_first(sql_repository, make_debt):
    for n in range(3):
        sql_repository.create(make_debt(description=f"Debt {n + 1}"))

    debts = sql_repository.fetch_all()

    assert [debt.description for debt in debts] == ["Debt 3", "Debt 2", "Debt 1"]


def test_returned_objects_usable_after_session_closes(sql_repository, make_debt):
    sql_repository.create(make_debt(principal=321.5))

    (debt,) = sql_repository.fetch_all()

    assert debt.principal == 321.5


def test_update_changes_editable_fields(sql_repository, make_debt):
    original = sql_repository.create(make_debt())

    updated = sql_repository.update(
        make_debt(
            id=original.id,
            description="Renamed",
            principal=10.0,
            annual_rate_percent=1.5,
            minimum_payment=2.0,
        )
    )

    assert updated.description == "Renamed"
    assert updated.annual_rate_percent == 1.5
    assert sql_repository.get_by_id(original.id).principal == 10.0


def test_update_unknown_raises(sql_repository, make_debt):
    with pytest.raises(DebtNotFoundError):
        sql_repository.update(make_debt(id=404))


def test_delete(sql_repository, make_debt):
    debt = sql_repository.create(make_debt())

    sql_repository.delete(debt.id)
    sql_repository.delete(debt.id)

    assert sql_repository.get_by_id(debt.id) is None


def test_save_inserts_with_given_id(sql_repository, make_debt, db_engine):
    sql_repository.save(make_debt(id=12, description="Mirrored"))

    with Session(db_engine) as session:
        row = session.exec(select(Debt).where(Debt.id == 12)).one()
    assert row.description == "Mirrored"


def test_save_overwrites_existing_row(sql_repository, make_debt):
    sql_repository.save(make_debt(id=5, description="Before"))
    sql_repository.save(make_debt(id=5, description="After", principal=99.0))

    stored = sql_repository.get_by_id(5)
    assert stored.description == "After"
    assert stored.principal == 99.0
    assert len(sql_repository.fetch_all()) == 1


def test_session_scope_commits_on_success(session_factory, db_engine, make_debt):
    with session_factory() as session:
        session.add(make_debt(description="Committed"))

    with Session(db_engine) as session:
        assert [d.description for d in session.exec(select(Debt))] == ["Committed"]


def test_session_scope_rolls_back_on_error(session_factory, db_engine, make_debt):
    with pytest.raises(RuntimeError):
        with session_factory() as session:
            session.add(make_debt(description="Discarded"))
            session.flush()
            raise RuntimeError("boom")

    with Session(db_engine) as session:
        assert session.exec(select(Debt)).all() == []

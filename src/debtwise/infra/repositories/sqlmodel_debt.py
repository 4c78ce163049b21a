"""SQLModel implementation of the debt repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...domain.exceptions import DebtNotFoundError
from ...models.debt import Debt, utcnow
from ..database import SessionFactory

EDITABLE_FIELDS = ("description", "principal", "annual_rate_percent", "minimum_payment")


class SQLModelDebtRepository:
    """SQLModel-based debt repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def fetch_all(self) -> list[Debt]:
        """List all debts, newest id first."""
        with self.session_factory() as session:
            statement = select(Debt).order_by(Debt.id.desc())  # type: ignore[union-attr]
            return list(session.exec(statement).all())

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        with self.session_factory() as session:
            return session.get(Debt, debt_id)

    def create(self, debt: Debt) -> Debt:
        """Insert a new debt; the database assigns the id when none is given."""
        with self.session_factory() as session:
            if debt.created_at is None:
                debt.created_at = utcnow()
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def update(self, debt: Debt) -> Debt:
        """Update an existing debt's editable fields."""
        with self.session_factory() as session:
            stored = session.get(Debt, debt.id) if debt.id is not None else None
            if stored is None:
                raise DebtNotFoundError(debt.id)
            for field in EDITABLE_FIELDS:
                setattr(stored, field, getattr(debt, field))
            session.add(stored)
            session.commit()
            session.refresh(stored)
            return stored

    def save(self, debt: Debt) -> Debt:
        """Insert or overwrite the row with ``debt.id``, keeping the caller's id."""
        with self.session_factory() as session:
            merged = session.merge(
                Debt(
                    id=debt.id,
                    description=debt.description,
                    principal=debt.principal,
                    annual_rate_percent=debt.annual_rate_percent,
                    minimum_payment=debt.minimum_payment,
                    created_at=debt.created_at or utcnow(),
                )
            )
            session.commit()
            session.refresh(merged)
            return merged

    def delete(self, debt_id: int) -> None:
        """Delete a debt by ID."""
        with self.session_factory() as session:
            debt = session.get(Debt, debt_id)
            if debt:
                session.delete(debt)
                session.commit()

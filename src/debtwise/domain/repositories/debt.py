"""Debt repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt import Debt


class DebtRepository(Protocol):
    """Repository for managing debt records."""

    def fetch_all(self) -> list[Debt]:
        """List every debt, newest id first."""
        ...

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        ...

    def create(self, debt: Debt) -> Debt:
        """Store a new debt, assigning ``id`` and ``created_at`` when unset."""
        ...

    def update(self, debt: Debt) -> Debt:
        """Overwrite the editable fields of an existing debt.

        Raises:
            DebtNotFoundError: if no debt has ``debt.id``
        """
        ...

    def delete(self, debt_id: int) -> None:
        """Delete a debt by ID; unknown ids are ignored."""
        ...

"""Primary repository with best-effort replication to a secondary store."""

from __future__ import annotations

from typing import Optional, Protocol

from ...domain.repositories import DebtRepository
from ...logging_config import get_logger
from ...models.debt import Debt

logger = get_logger(__name__)


class MirrorTarget(Protocol):
    """Write-only view of the secondary store."""

    def save(self, debt: Debt) -> Debt:  # pragma: no cover - interface
        ...

    def delete(self, debt_id: int) -> None:  # pragma: no cover - interface
        ...


class MirroredDebtRepository:
    """Serve reads and writes from *primary*, copying writes to *mirror*.

    The primary result is what the caller sees. Mirror writes happen after the
    primary write succeeds and any failure there is logged and dropped.
    """

    def __init__(self, primary: DebtRepository, mirror: MirrorTarget):
        self.primary = primary
        self.mirror = mirror

    def _replicate(self, operation: str, debt_id: Optional[int], action) -> None:
        try:
            action()
        except Exception as exc:
            logger.warning(
                "Mirror sync failed for %s: %s",
                operation,
                exc,
                extra={"operation": operation, "debt_id": debt_id},
            )

    def fetch_all(self) -> list[Debt]:
        return self.primary.fetch_all()

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        return self.primary.get_by_id(debt_id)

    def create(self, debt: Debt) -> Debt:
        created = self.primary.create(debt)
        self._replicate("INSERT", created.id, lambda: self.mirror.save(created))
        return created

    def update(self, debt: Debt) -> Debt:
        updated = self.primary.update(debt)
        self._replicate("UPDATE", updated.id, lambda: self.mirror.save(updated))
        return updated

    def delete(self, debt_id: int) -> None:
        self.primary.delete(debt_id)
        self._replicate("DELETE", debt_id, lambda: self.mirror.delete(debt_id))

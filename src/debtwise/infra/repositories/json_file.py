"""JSON file implementation of the debt repository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Optional

from ...domain.exceptions import DebtNotFoundError, DebtStoreCorruptError
from ...logging_config import get_logger
from ...models.debt import Debt, utcnow

logger = get_logger(__name__)

FIELDS = ("id", "description", "principal", "annual_rate_percent", "minimum_payment")


def _serialize(debt: Debt) -> dict[str, Any]:
    row: dict[str, Any] = {field: getattr(debt, field) for field in FIELDS}
    row["created_at"] = debt.created_at.isoformat() if debt.created_at else None
    return row


def _deserialize(row: dict[str, Any]) -> Debt:
    created_at = row.get("created_at")
    return Debt(
        id=int(row["id"]),
        description=str(row["description"]),
        principal=float(row["principal"]),
        annual_rate_percent=float(row["annual_rate_percent"]),
        minimum_payment=float(row["minimum_payment"]),
        created_at=datetime.fromisoformat(created_at) if created_at else None,
    )


def next_id(debts: list[Debt]) -> int:
    """Return one past the largest id in *debts*, starting at 1."""

    return max((debt.id or 0 for debt in debts), default=0) + 1


class JSONDebtRepository:
    """Debt repository backed by a single pretty-printed JSON array."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self, *, for_write: bool = False) -> list[Debt]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        try:
            rows = json.loads(raw)
            return [_deserialize(row) for row in rows]
        except (ValueError, KeyError, TypeError) as exc:
            if for_write:
                raise DebtStoreCorruptError(self.path) from exc
            logger.warning("Unreadable debt file, treating as empty", extra={"path": str(self.path)})
            return []

    def _write(self, debts: list[Debt]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([_serialize(debt) for debt in debts], indent=2, ensure_ascii=False)
        # Readers see either the previous file or the new one, never a partial write.
        with NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
        ) as tmp:
            tmp.write(payload)
        Path(tmp.name).replace(self.path)

    def fetch_all(self) -> list[Debt]:
        return sorted(self._read(), key=lambda debt: debt.id or 0, reverse=True)

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        return next((debt for debt in self._read() if debt.id == debt_id), None)

    def create(self, debt: Debt) -> Debt:
        debts = self._read(for_write=True)
        if debt.id is None:
            debt.id = next_id(debts)
        elif any(existing.id == debt.id for existing in debts):
            raise ValueError(f"Debt id {debt.id} already exists")
        if debt.created_at is None:
            debt.created_at = utcnow()

        debts.append(debt)
        self._write(debts)
        return debt

    def update(self, debt: Debt) -> Debt:
        debts = self._read(for_write=True)
        for index, existing in enumerate(debts):
            if existing.id == debt.id:
                break
        else:
            raise DebtNotFoundError(debt.id)

        updated = Debt(
            id=existing.id,
            description=debt.description,
            principal=debt.principal,
            annual_rate_percent=debt.annual_rate_percent,
            minimum_payment=debt.minimum_payment,
            created_at=existing.created_at,
        )
        debts[index] = updated
        self._write(debts)
        return updated

    def delete(self, debt_id: int) -> None:
        debts = self._read(for_write=True)
        self._write([debt for debt in debts if debt.id != debt_id])


__all__ = ["JSONDebtRepository", "next_id"]

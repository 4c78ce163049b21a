"""Debt record entity."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Debt(SQLModel, table=True):
    """A debt tracked by DebtWise, paid down with a fixed minimum payment."""

    __tablename__: ClassVar[str] = "debt"

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(nullable=False, max_length=255)
    principal: float = Field(nullable=False)
    annual_rate_percent: float = Field(default=0.0, nullable=False)
    minimum_payment: float = Field(nullable=False)
    created_at: Optional[datetime] = Field(default=None)

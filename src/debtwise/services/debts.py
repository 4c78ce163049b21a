"""Debt record operations used by the web routes and CLI commands.

Every function takes the repository explicitly; nothing here reaches for
global storage. Unexpected storage failures are logged and re-raised as
``DebtServiceError`` while ``DebtNotFoundError`` passes through untouched so
callers can answer with a 404.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from ..domain.exceptions import DebtNotFoundError, DebtServiceError
from ..domain.repositories import DebtRepository
from ..logging_config import get_logger
from ..models.debt import Debt
from .projections import PortfolioSummary, project, summarize

logger = get_logger(__name__)

SAMPLE_DEBTS: tuple[dict, ...] = (
    {
        "id": 1,
        "description": "Credit card",
        "principal": 15000.0,
        "annual_rate_percent": 36.0,
        "minimum_payment": 500.0,
    },
    {
        "id": 2,
        "description": "Personal loan",
        "principal": 50000.0,
        "annual_rate_percent": 18.0,
        "minimum_payment": 2000.0,
    },
    {
        "id": 3,
        "description": "Department store card",
        "principal": 8000.0,
        "annual_rate_percent": 42.0,
        "minimum_payment": 400.0,
    },
)


@contextmanager
def _storage_errors(message: str) -> Iterator[None]:
    try:
        yield
    except DebtNotFoundError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise DebtServiceError(message) from exc


def register_debt(
    repository: DebtRepository,
    *,
    description: str,
    principal: float,
    annual_rate_percent: float,
    minimum_payment: float,
) -> Debt:
    """Create and persist a new debt."""

    debt = Debt(
        description=description,
        principal=float(principal),
        annual_rate_percent=float(annual_rate_percent),
        minimum_payment=float(minimum_payment),
    )
    with _storage_errors("Failed to register debt."):
        created = repository.create(debt)
    logger.info("Debt registered", extra={"debt_id": created.id})
    return created


def list_debts(repository: DebtRepository) -> list[Debt]:
    with _storage_errors("Failed to fetch debts."):
        return repository.fetch_all()


def get_debt(repository: DebtRepository, debt_id: int) -> Optional[Debt]:
    with _storage_errors("Failed to fetch debt."):
        return repository.get_by_id(debt_id)


def update_debt(
    repository: DebtRepository,
    debt_id: int,
    *,
    description: str,
    principal: float,
    annual_rate_percent: float,
    minimum_payment: float,
) -> Debt:
    """Replace the editable fields of debt *debt_id*.

    Raises:
        DebtNotFoundError: if the debt does not exist
    """

    changes = Debt(
        id=debt_id,
        description=description,
        principal=float(principal),
        annual_rate_percent=float(annual_rate_percent),
        minimum_payment=float(minimum_payment),
    )
    with _storage_errors("Failed to update debt."):
        updated = repository.update(changes)
    logger.info("Debt updated", extra={"debt_id": debt_id})
    return updated


def delete_debt(repository: DebtRepository, debt_id: int) -> None:
    with _storage_errors("Failed to delete debt."):
        repository.delete(debt_id)
    logger.info("Debt deleted", extra={"debt_id": debt_id})


def portfolio_summary(repository: DebtRepository) -> PortfolioSummary:
    """Summarize every stored debt under the minimum-payment policy."""

    with _storage_errors("Failed to calculate debt summary."):
        debts = repository.fetch_all()

    stalled = [debt.id for debt in debts if project(debt).infeasible]
    if stalled:
        logger.debug(
            "Non-amortizing debts left out of summary totals", extra={"debt_ids": stalled}
        )
    return summarize(debts)


def seed_sample_debts(repository: DebtRepository) -> int:
    """Insert the sample debts whose ids are not taken yet; return how many were added."""

    inserted = 0
    with _storage_errors("Failed to seed sample debts."):
        for sample in SAMPLE_DEBTS:
            if repository.get_by_id(sample["id"]) is not None:
                continue
            repository.create(Debt(**sample))
            inserted += 1
    logger.info("Sample debts seeded", extra={"inserted": inserted})
    return inserted


__all__ = [
    "SAMPLE_DEBTS",
    "delete_debt",
    "get_debt",
    "list_debts",
    "portfolio_summary",
    "register_debt",
    "seed_sample_debts",
    "update_debt",
]

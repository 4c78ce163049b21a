"""Minimum-payment payoff projections.

``project`` simulates a single debt month by month when only the minimum
payment is made; ``summarize`` folds those projections into portfolio totals.
Both are pure functions: callers fetch the debts and hand them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

MAX_MONTHS = 1200  # 100 years
PAID_OFF_THRESHOLD = 0.01  # balances below one cent count as paid
NON_AMORTIZING_REASON = "Minimum payment does not reduce the balance"


class DebtTerms(Protocol):
    """Anything carrying the three numbers a projection needs."""

    principal: float
    annual_rate_percent: float
    minimum_payment: float


@dataclass(frozen=True, slots=True)
class Projection:
    """Outcome of paying only the minimum on one debt."""

    months: int
    total_interest: float
    total_paid: float
    infeasible: bool = False
    reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PortfolioSummary:
    """Totals across every debt in a portfolio."""

    total_principal: float
    total_interest: float
    max_months: int
    total_to_pay: float


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage into a monthly fraction (36 -> 0.03)."""

    return annual_rate_percent / 100 / 12


def project(debt: DebtTerms) -> Projection:
    """Project the payoff of *debt* when only the minimum payment is made.

    A minimum payment that does not exceed the first month's interest can
    never shrink the balance, so the result is flagged ``infeasible`` with
    zeroed figures instead of iterating. Otherwise the balance is rolled
    forward month by month until it drops below one cent, or until
    ``MAX_MONTHS`` payments have been made; hitting the cap is reported as a
    regular projection of exactly ``MAX_MONTHS`` months.
    """

    principal = debt.principal
    payment = debt.minimum_payment
    rate = monthly_rate(debt.annual_rate_percent)

    if payment <= principal * rate:
        return Projection(
            months=0,
            total_interest=0.0,
            total_paid=0.0,
            infeasible=True,
            reason=NON_AMORTIZING_REASON,
        )

    balance = principal
    months = 0
    total_interest = 0.0
    while balance > 0 and months < MAX_MONTHS:
        interest = balance * rate
        balance = balance + interest - payment
        total_interest += interest
        months += 1

        if balance < PAID_OFF_THRESHOLD:
            balance = 0.0

    return Projection(
        months=months,
        total_interest=total_interest,
        total_paid=principal + total_interest,
    )


def summarize(debts: Iterable[DebtTerms]) -> PortfolioSummary:
    """Aggregate projections across *debts*.

    Every principal counts toward ``total_principal``. Infeasible debts are
    left out of the interest and payoff-time figures so one bad record cannot
    spoil the whole summary.
    """

    total_principal = 0.0
    total_interest = 0.0
    max_months = 0

    for debt in debts:
        total_principal += debt.principal
        projection = project(debt)
        if projection.infeasible:
            continue

        total_interest += projection.total_interest
        max_months = max(max_months, projection.months)

    return PortfolioSummary(
        total_principal=total_principal,
        total_interest=total_interest,
        max_months=max_months,
        total_to_pay=total_principal + total_interest,
    )


__all__ = [
    "MAX_MONTHS",
    "NON_AMORTIZING_REASON",
    "PAID_OFF_THRESHOLD",
    "PortfolioSummary",
    "Projection",
    "monthly_rate",
    "project",
    "summarize",
]

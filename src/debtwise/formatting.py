"""Display helpers shared by templates and CLI output."""

from __future__ import annotations


def format_currency(amount: float | None) -> str:
    """Render *amount* as dollars with thousands separators (``$1,234.50``)."""

    return f"${(amount or 0.0):,.2f}"


def format_percentage(amount: float | None) -> str:
    return f"{(amount or 0.0):.2f}%"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_months(months: int) -> str:
    """Spell out a month count as years and months.

    >>> format_months(27)
    '2 years and 3 months'
    """

    years, remainder = divmod(int(months), 12)
    if years == 0:
        return _plural(remainder, "month", "months")
    if remainder == 0:
        return _plural(years, "year", "years")
    return f"{_plural(years, 'year', 'years')} and {_plural(remainder, 'month', 'months')}"

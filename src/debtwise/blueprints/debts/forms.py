"""Debt form definitions and validation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Mapping

DESCRIPTION_MAX_LENGTH = 255
MAX_RATE = Decimal("100")


@dataclass(slots=True)
class DebtForm:
    """Represents debt inputs and associated validation errors."""

    description: str = ""
    principal: Decimal | str | None = None
    annual_rate_percent: Decimal | str | None = None
    minimum_payment: Decimal | str | None = None
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "DebtForm":
        """Build a form from request form data or a JSON body."""

        def _raw(key: str):
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            description=str(data.get("description") or ""),
            principal=_raw("principal"),
            annual_rate_percent=_raw("annual_rate_percent"),
            minimum_payment=_raw("minimum_payment"),
        )

    def validate(self) -> bool:
        """Validate debt inputs returning True when all values are acceptable."""

        self.errors.clear()

        if not self.description or not self.description.strip():
            self.errors.setdefault("description", []).append("Enter a description for the debt.")
        else:
            self.description = self.description.strip()
            if len(self.description) > DESCRIPTION_MAX_LENGTH:
                self.errors.setdefault("description", []).append(
                    f"Keep the description under {DESCRIPTION_MAX_LENGTH} characters."
                )

        self.principal = self._parse_amount("principal", self.principal, minimum=Decimal("0.01"))
        self.annual_rate_percent = self._parse_amount(
            "annual_rate_percent", self.annual_rate_percent, minimum=Decimal("0")
        )
        self.minimum_payment = self._parse_amount(
            "minimum_payment", self.minimum_payment, minimum=Decimal("0.01")
        )

        if isinstance(self.annual_rate_percent, Decimal) and self.annual_rate_percent > MAX_RATE:
            self.errors.setdefault("annual_rate_percent", []).append(
                "Interest rate must be between 0 and 100 percent."
            )

        return not self.errors

    def _parse_amount(
        self,
        field: str,
        value: Decimal | str | None,
        *,
        minimum: Decimal,
    ) -> Decimal | None:
        """Parse and validate numeric input, storing errors when parsing fails."""

        if value is None or (isinstance(value, str) and not value.strip()):
            self.errors.setdefault(field, []).append("This field is required.")
            return None

        if not isinstance(value, Decimal):
            try:
                value = Decimal(str(value).strip())
            except (InvalidOperation, TypeError, ValueError):
                self.errors.setdefault(field, []).append("Enter a valid number.")
                return None

        if not value.is_finite() or not math.isfinite(float(value)):
            self.errors.setdefault(field, []).append("Enter a valid number.")
            return None

        if value < minimum:
            message = (
                "Amount must be greater than zero."
                if minimum > 0
                else "Amount must be at least zero."
            )
            self.errors.setdefault(field, []).append(message)
        return value

    def cleaned_data(self) -> dict:
        """Return validated values as floats, ready for the debt service."""

        return {
            "description": self.description,
            "principal": float(self.principal),
            "annual_rate_percent": float(self.annual_rate_percent),
            "minimum_payment": float(self.minimum_payment),
        }

    @property
    def error_messages(self) -> Iterable[str]:
        """Flattened iterable of error strings for summaries."""

        for messages in self.errors.values():
            yield from messages

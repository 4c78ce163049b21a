"""Domain-specific exceptions."""

from __future__ import annotations


class DebtWiseError(Exception):
    """Base exception for DebtWise."""


class DebtNotFoundError(DebtWiseError, LookupError):
    """No stored debt has the requested id."""

    def __init__(self, debt_id: int) -> None:
        super().__init__(f"Debt {debt_id} not found")
        self.debt_id = debt_id


class DebtServiceError(DebtWiseError, RuntimeError):
    """A storage operation failed; the original error is chained as ``__cause__``."""


class DebtStoreCorruptError(DebtWiseError, ValueError):
    """The debt file exists but cannot be parsed, so it must not be overwritten."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Debt file {path} is unreadable; refusing to overwrite it")
        self.path = path

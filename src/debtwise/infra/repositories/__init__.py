"""Repository implementations."""

from .json_file import JSONDebtRepository
from .mirrored import MirroredDebtRepository
from .sqlmodel_debt import SQLModelDebtRepository

__all__ = [
    "JSONDebtRepository",
    "MirroredDebtRepository",
    "SQLModelDebtRepository",
]

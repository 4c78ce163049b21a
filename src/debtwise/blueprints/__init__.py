"""Blueprint exports."""

from . import debts, home, summary

__all__ = ["debts", "home", "summary"]

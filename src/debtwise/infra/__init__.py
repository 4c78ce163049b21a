"""Storage backends for DebtWise."""

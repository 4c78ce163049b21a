"""Service layer exports."""

from .projections import PortfolioSummary, Projection, project, summarize

__all__ = ["PortfolioSummary", "Projection", "project", "summarize"]

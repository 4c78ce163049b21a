"""Helpers shared by blueprints that answer both browsers and JSON clients."""

from __future__ import annotations

from dataclasses import asdict

from flask import request

from ..models.debt import Debt
from ..services.projections import Projection, monthly_rate


def prefers_json_response() -> bool:
    accepts = request.accept_mimetypes
    return request.is_json or accepts["application/json"] > accepts["text/html"]


def debt_payload(debt: Debt, projection: Projection | None = None) -> dict:
    payload = {
        "id": debt.id,
        "description": debt.description,
        "principal": debt.principal,
        "annual_rate_percent": debt.annual_rate_percent,
        "minimum_payment": debt.minimum_payment,
        "monthly_rate_percent": monthly_rate(debt.annual_rate_percent) * 100,
        "created_at": debt.created_at.isoformat() if debt.created_at else None,
    }
    if projection is not None:
        payload["projection"] = asdict(projection)
    return payload

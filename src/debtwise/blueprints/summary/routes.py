"""Portfolio summary routes."""

from __future__ import annotations

from dataclasses import asdict

from flask import jsonify, render_template

from ...domain.exceptions import DebtServiceError
from ...extensions import get_repository
from ...services.debts import portfolio_summary
from ..responses import prefers_json_response
from . import bp


@bp.get("/")
def show_summary():
    """Show portfolio totals assuming only minimum payments are made."""

    try:
        summary = portfolio_summary(get_repository())
    except DebtServiceError as exc:
        if prefers_json_response():
            return jsonify({"error": str(exc)}), 500
        return render_template("debts/error.html", message=str(exc)), 500

    if prefers_json_response():
        return jsonify(asdict(summary))
    return render_template("summary/index.html", summary=summary)

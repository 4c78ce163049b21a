"""Debt routes."""

from __future__ import annotations

from collections.abc import Mapping

from flask import abort, flash, jsonify, redirect, render_template, request, url_for

from ...domain.exceptions import DebtNotFoundError, DebtServiceError
from ...extensions import get_repository
from ...services import debts as debt_service
from ...services.projections import monthly_rate, project
from ..responses import debt_payload, prefers_json_response
from . import bp
from .forms import DebtForm


def _submitted_form() -> DebtForm:
    data = request.get_json(silent=True) if request.is_json else request.form
    if not isinstance(data, Mapping):
        data = {}
    return DebtForm.from_mapping(data)


def _form_errors(form: DebtForm, *, template: str, **context):
    if prefers_json_response():
        return jsonify({"errors": form.errors}), 400
    return render_template(template, form=form, **context), 400


@bp.errorhandler(DebtServiceError)
def _service_error(exc: DebtServiceError):
    if prefers_json_response():
        return jsonify({"error": str(exc)}), 500
    return render_template("debts/error.html", message=str(exc)), 500


@bp.get("/")
def list_debts():
    """Display every debt with its minimum-payment projection."""

    debts = debt_service.list_debts(get_repository())
    rows = [
        {
            "debt": debt,
            "projection": project(debt),
            "monthly_rate_percent": monthly_rate(debt.annual_rate_percent) * 100,
        }
        for debt in debts
    ]
    if prefers_json_response():
        return jsonify([debt_payload(row["debt"], row["projection"]) for row in rows])
    return render_template("debts/index.html", rows=rows)


@bp.get("/new")
def new_debt():
    """Render creation form for a debt."""

    return render_template("debts/form.html", form=DebtForm(), debt_id=None)


@bp.post("/new")
def create_debt():
    """Validate the payload and store a new debt."""

    form = _submitted_form()
    if not form.validate():
        return _form_errors(form, template="debts/form.html", debt_id=None)

    debt = debt_service.register_debt(get_repository(), **form.cleaned_data())
    if prefers_json_response():
        return jsonify(debt_payload(debt, project(debt))), 201

    flash(f"Saved “{debt.description}”.", "success")
    return redirect(url_for("debts.list_debts"))


@bp.get("/<int:debt_id>/edit")
def edit_debt(debt_id: int):
    """Render the edit form pre-filled with the stored values."""

    debt = debt_service.get_debt(get_repository(), debt_id)
    if debt is None:
        abort(404)

    form = DebtForm(
        description=debt.description,
        principal=str(debt.principal),
        annual_rate_percent=str(debt.annual_rate_percent),
        minimum_payment=str(debt.minimum_payment),
    )
    return render_template("debts/form.html", form=form, debt_id=debt_id)


@bp.post("/<int:debt_id>/edit")
def update_debt(debt_id: int):
    """Validate the payload and overwrite the stored debt."""

    form = _submitted_form()
    if not form.validate():
        return _form_errors(form, template="debts/form.html", debt_id=debt_id)

    try:
        debt = debt_service.update_debt(get_repository(), debt_id, **form.cleaned_data())
    except DebtNotFoundError:
        if prefers_json_response():
            return jsonify({"error": "debt_not_found", "debt_id": debt_id}), 404
        abort(404)

    if prefers_json_response():
        return jsonify(debt_payload(debt, project(debt)))

    flash(f"Updated “{debt.description}”.", "success")
    return redirect(url_for("debts.list_debts"))


@bp.post("/<int:debt_id>/delete")
def delete_debt(debt_id: int):
    """Remove a debt; JSON clients get a success flag instead of a redirect."""

    try:
        debt_service.delete_debt(get_repository(), debt_id)
    except DebtServiceError:
        if prefers_json_response():
            return jsonify({"success": False, "error": "Failed to delete debt"}), 500
        flash("Failed to delete debt.", "error")
        return redirect(url_for("debts.list_debts"))

    if prefers_json_response():
        return jsonify({"success": True})

    flash("Debt deleted.", "success")
    return redirect(url_for("debts.list_debts"))

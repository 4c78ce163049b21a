"""Summary blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("summary", __name__, url_prefix="/summary")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]

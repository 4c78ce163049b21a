"""DebtWise application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig
from .domain.repositories import DebtRepository
from .formatting import format_currency, format_months, format_percentage

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "debtwise.blueprints.home"
    yield "debtwise.blueprints.debts"
    yield "debtwise.blueprints.summary"


def create_app(
    config_name: str | None = None, *, repository: DebtRepository | None = None
) -> Flask:
    """Create and configure the Flask application instance.

    Args:
        config_name: ``development``, ``testing`` or ``default``
        repository: storage to use instead of the one the config describes
    """

    app = Flask(__name__)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["DEBTWISE_CONFIG"] = config_obj

    from .logging_config import setup_logging

    setup_logging(config_obj)

    from .extensions import init_repository

    init_repository(app, repository)
    _register_blueprints(app)
    _register_filters(app)
    _cli.init_app(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


def _register_filters(app: Flask) -> None:
    app.add_template_filter(format_currency, "currency")
    app.add_template_filter(format_months, "months")
    app.add_template_filter(format_percentage, "percentage")


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]

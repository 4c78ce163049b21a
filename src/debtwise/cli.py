"""Flask CLI commands for DebtWise."""

from __future__ import annotations

import click

from .formatting import format_currency, format_months


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("debtwise-seed")
    def debtwise_seed() -> None:
        """Insert the sample debts that are not stored yet."""

        from .extensions import get_repository
        from .services.debts import seed_sample_debts

        inserted = seed_sample_debts(get_repository())
        click.echo(f"Seeded {inserted} sample debt(s).")

    @app.cli.command("debtwise-list")
    def debtwise_list() -> None:
        """Print every debt with its minimum-payment projection."""

        from .extensions import get_repository
        from .services.debts import list_debts
        from .services.projections import project

        debts = list_debts(get_repository())
        if not debts:
            click.echo("No debts recorded.")
            return

        for debt in debts:
            projection = project(debt)
            click.echo(
                f"#{debt.id} {debt.description}: {format_currency(debt.principal)} "
                f"at {debt.annual_rate_percent:g}% paying {format_currency(debt.minimum_payment)}/month"
            )
            if projection.infeasible:
                click.echo(f"    {projection.reason}")
            else:
                click.echo(
                    f"    {format_months(projection.months)}, "
                    f"interest {format_currency(projection.total_interest)}, "
                    f"total {format_currency(projection.total_paid)}"
                )

    @app.cli.command("debtwise-summary")
    def debtwise_summary() -> None:
        """Print portfolio totals assuming only minimum payments are made."""

        from .extensions import get_repository
        from .services.debts import portfolio_summary

        summary = portfolio_summary(get_repository())
        click.echo(f"Total owed:      {format_currency(summary.total_principal)}")
        click.echo(f"Total interest:  {format_currency(summary.total_interest)}")
        click.echo(f"Time to pay off: {format_months(summary.max_months)}")
        click.echo(f"Total to pay:    {format_currency(summary.total_to_pay)}")

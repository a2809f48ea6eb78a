import click

from ledger_engine.config.settings import DEFAULT_MAX_MONTHS, LOG_FORMAT, LOG_LEVEL
from ledger_engine.core.accounts import compute_utilization
from ledger_engine.core.balance_history import compute_drift
from ledger_engine.core.calculator import (
    calc_standard_payment,
    calculate_extra_payment_impact,
    calculate_payment_split,
    generate_amortization_schedule,
    schedule_to_frame,
)
from ledger_engine.core.validators import (
    validate_credit_limit,
    validate_extra_payment,
    validate_loan_terms,
    validate_standard_loan,
)
from ledger_engine.utils.logging_config import configure_logging


def _check(result):
    ok, message = result
    if not ok:
        raise click.UsageError(message)


@click.group()
@click.option('--log-level', default=LOG_LEVEL, show_default=True, help='Logging level')
@click.option('--log-format', type=click.Choice(['console', 'json']), default=LOG_FORMAT, show_default=True)
def cli(log_level, log_format):
    """Ledger calculation engine CLI."""
    configure_logging(log_level, log_format)


@cli.command('payment-split')
@click.option('--balance', type=str, required=True, help='Current loan balance')
@click.option('--apr', type=str, required=True, help='Annual percentage rate, e.g. 6.5')
@click.option('--payment', type=str, required=True, help='Monthly payment')
def payment_split(balance, apr, payment):
    """Splits one monthly payment into principal and interest."""
    _check(validate_loan_terms(balance, apr, payment))
    split = calculate_payment_split(balance, apr, payment)
    click.echo(f"Interest: {split.interest}")
    click.echo(f"Principal: {split.principal}")


@cli.command('schedule')
@click.option('--balance', type=str, required=True, help='Current loan balance')
@click.option('--apr', type=str, required=True, help='Annual percentage rate')
@click.option('--payment', type=str, required=True, help='Monthly payment')
@click.option('--max-months', type=int, default=DEFAULT_MAX_MONTHS, show_default=True, help='Months to simulate')
def schedule(balance, apr, payment, max_months):
    """Generates an amortization schedule and outputs it as CSV."""
    _check(validate_loan_terms(balance, apr, payment, max_months))
    rows = generate_amortization_schedule(balance, apr, payment, max_months)
    click.echo(schedule_to_frame(rows).to_csv(index=False), nl=False)


@cli.command('extra-payment')
@click.option('--balance', type=str, required=True, help='Current loan balance')
@click.option('--apr', type=str, required=True, help='Annual percentage rate')
@click.option('--payment', type=str, required=True, help='Regular monthly payment')
@click.option('--extra', type=str, required=True, help='Additional amount paid each month')
@click.option('--max-months', type=int, default=DEFAULT_MAX_MONTHS, show_default=True, help='Months to simulate')
def extra_payment(balance, apr, payment, extra, max_months):
    """Shows months and interest saved by paying extra each month."""
    _check(validate_loan_terms(balance, apr, payment, max_months))
    _check(validate_extra_payment(extra))
    impact = calculate_extra_payment_impact(balance, apr, payment, extra, max_months)
    click.echo(f"Payoff months: {impact.new_payoff_months}")
    click.echo(f"Interest saved: {impact.interest_saved}")
    click.echo(f"New total interest: {impact.new_total_interest}")
    if impact.new_payoff_months >= max_months:
        click.echo(f"Not paid off within {max_months} months")


@cli.command('standard-payment')
@click.option('--principal', type=str, required=True, help='Loan principal')
@click.option('--apr', type=str, required=True, help='Annual percentage rate')
@click.option('--term-months', type=int, required=True, help='Loan term in months')
def standard_payment(principal, apr, term_months):
    """Calculates the level monthly payment and total interest for a loan term."""
    _check(validate_standard_loan(principal, apr, term_months))
    monthly, total_interest = calc_standard_payment(principal, apr, term_months)
    click.echo(f"Monthly payment: {monthly}")
    click.echo(f"Total interest: {total_interest}")


@cli.command('utilization')
@click.option('--balance', type=str, required=True, help='Card balance')
@click.option('--limit', 'credit_limit', type=str, required=True, help='Credit limit')
def utilization(balance, credit_limit):
    """Calculates credit utilization as a percentage of the limit."""
    _check(validate_credit_limit(credit_limit))
    click.echo(f"Utilization: {compute_utilization(balance, credit_limit)}%")


@cli.command('drift')
@click.option('--stored', type=str, required=True, help='Stored account balance')
@click.option('--calculated', type=str, required=True, help='Balance recomputed from transactions')
def drift(stored, calculated):
    """Shows the difference between a recomputed and a stored balance."""
    click.echo(f"Drift: {compute_drift(stored, calculated)}")


if __name__ == '__main__':
    cli()

"""Loan math: payment split, amortization schedule, extra-payment impact"""
import math
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import List, Optional, Tuple

import pandas as pd

from ledger_engine.config.constants import AMORTIZATION_SCHEDULE_COLUMNS
from ledger_engine.config.settings import CENT, DEFAULT_MAX_MONTHS, MONTHS_PER_YEAR
from ledger_engine.utils.logging_config import get_logger
from ledger_engine.utils.rounding import round_cents, sum_cents, to_decimal

logger = get_logger(__name__)

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class PaymentSplit:
    principal: Decimal
    interest: Decimal


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class ExtraPaymentImpact:
    new_payoff_months: int
    interest_saved: Decimal
    new_total_interest: Decimal


def _monthly_rate(annual_rate) -> Decimal:
    return to_decimal(annual_rate) / 100 / MONTHS_PER_YEAR


def calc_monthly_interest(balance, annual_rate) -> Decimal:
    """One period's interest on |balance|, rounded to cents"""
    return round_cents(abs(to_decimal(balance)) * (to_decimal(annual_rate) / 100) / MONTHS_PER_YEAR)


def calculate_payment_split(balance, annual_rate, payment) -> PaymentSplit:
    """
    Split one monthly payment into interest and principal.

    Interest is rounded to cents before it is taken out of the payment.
    A payment that does not cover the interest is all interest.
    """
    monthly_interest = calc_monthly_interest(balance, annual_rate)
    payment = round_cents(payment)

    if payment <= monthly_interest:
        return PaymentSplit(principal=ZERO, interest=payment)
    return PaymentSplit(
        principal=round_cents(payment - monthly_interest),
        interest=monthly_interest,
    )


def generate_amortization_schedule(
    balance,
    annual_rate,
    monthly_payment,
    max_months: int,
) -> List[AmortizationRow]:
    """
    Month-by-month payoff schedule for |balance|.

    Stops on payoff or after max_months rows, whichever comes first. The
    last payment is capped at remaining balance plus that month's interest.
    """
    remaining = round_cents(abs(to_decimal(balance)))
    monthly_payment = round_cents(monthly_payment)
    rows: List[AmortizationRow] = []

    for month in range(1, max_months + 1):
        if remaining <= 0:
            break
        interest = calc_monthly_interest(remaining, annual_rate)
        payment = min(monthly_payment, remaining + interest)
        split = calculate_payment_split(remaining, annual_rate, payment)
        remaining = round_cents(remaining - split.principal)

        rows.append(AmortizationRow(
            month=month,
            payment=payment,
            principal=split.principal,
            interest=split.interest,
            remaining_balance=remaining,
        ))

    if rows and remaining > 0:
        logger.debug(
            "amortization_horizon_reached",
            months=len(rows),
            remaining_balance=str(remaining),
        )
    return rows


def schedule_to_frame(rows: List[AmortizationRow]) -> pd.DataFrame:
    """Schedule as a DataFrame with running principal/interest totals"""
    records = []
    cum_principal = ZERO
    cum_interest = ZERO
    for row in rows:
        cum_principal = round_cents(cum_principal + row.principal)
        cum_interest = round_cents(cum_interest + row.interest)
        records.append({
            "month": row.month,
            "payment": row.payment,
            "principal": row.principal,
            "interest": row.interest,
            "remaining_balance": row.remaining_balance,
            "cumulative_principal": cum_principal,
            "cumulative_interest": cum_interest,
        })
    return pd.DataFrame(records, columns=AMORTIZATION_SCHEDULE_COLUMNS)


def calculate_extra_payment_impact(
    balance,
    annual_rate,
    monthly_payment,
    extra_amount,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> ExtraPaymentImpact:
    """
    Compare the payoff at monthly_payment with the payoff at
    monthly_payment + extra_amount, both simulated up to max_months.

    A new_payoff_months equal to max_months means the loan is not paid off
    within the simulated horizon.
    """
    base = generate_amortization_schedule(balance, annual_rate, monthly_payment, max_months)
    augmented = generate_amortization_schedule(
        balance,
        annual_rate,
        to_decimal(monthly_payment) + to_decimal(extra_amount),
        max_months,
    )

    base_total_interest = sum_cents(row.interest for row in base)
    new_total_interest = sum_cents(row.interest for row in augmented)

    return ExtraPaymentImpact(
        new_payoff_months=len(augmented),
        interest_saved=round_cents(base_total_interest - new_total_interest),
        new_total_interest=new_total_interest,
    )


def calculate_total_interest_remaining(
    balance,
    annual_rate,
    monthly_payment,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> Decimal:
    """Interest still to be paid over the life of the loan"""
    schedule = generate_amortization_schedule(balance, annual_rate, monthly_payment, max_months)
    return sum_cents(row.interest for row in schedule)


def calc_standard_payment(
    principal,
    annual_rate,
    term_months: int,
) -> Tuple[Decimal, Decimal]:
    """Level payment over term_months: returns (monthly payment, total interest)"""
    principal = to_decimal(principal)
    if term_months <= 0:
        return ZERO, ZERO
    r = _monthly_rate(annual_rate)
    if r == 0:
        return round_cents(principal / term_months), ZERO
    with localcontext() as ctx:
        ctx.prec = 40
        growth = (1 + r) ** term_months
        monthly = principal * r * growth / (growth - 1)
        total_interest = monthly * term_months - principal
    return round_cents(monthly), round_cents(total_interest)


def calc_closed_form_total_interest(balance, annual_rate, monthly_payment) -> Optional[Decimal]:
    """
    Total interest of the exact level-payment process, without per-period
    rounding: rem_k = B(1+r)^k - P((1+r)^k - 1)/r, last payment capped.

    Returns None when the payment never amortizes the balance.
    """
    b = abs(to_decimal(balance))
    p = to_decimal(monthly_payment)
    if b == 0:
        return ZERO
    if p <= 0:
        return None
    r = _monthly_rate(annual_rate)
    if r == 0:
        return ZERO
    if p <= b * r:
        return None

    with localcontext() as ctx:
        ctx.prec = 40
        ratio = float(b * r / p)
        periods = math.ceil(-math.log(1 - ratio) / math.log(1 + float(r)))
        periods = max(periods, 1)

        def remaining_after(k: int) -> Decimal:
            growth = (1 + r) ** k
            return b * growth - p * (growth - 1) / r

        # float log can land one period off the true payoff
        while periods > 1 and remaining_after(periods - 1) <= 0:
            periods -= 1
        while remaining_after(periods) > 0:
            periods += 1
        final_payment = remaining_after(periods - 1) * (1 + r)
        total_paid = p * (periods - 1) + final_payment
        return round_cents(total_paid - b)


def calc_rounding_error_bound(annual_rate, months: int) -> Decimal:
    """
    Most that per-period cent rounding can add to a schedule's total
    interest, compared with calc_closed_form_total_interest.

    Each period's interest is off by at most half a cent, and that error
    stays in the balance, compounding at the loan rate until payoff:
    0.005 * sum((1 + r)^j for j in 0..months), plus one cent for rounding
    the two totals. months is the length of the generated schedule.
    """
    if months <= 0:
        return CENT
    r = _monthly_rate(annual_rate)
    with localcontext() as ctx:
        ctx.prec = 40
        if r == 0:
            compounded = Decimal(months + 1)
        else:
            compounded = ((1 + r) ** (months + 1) - 1) / r
        bound = Decimal("0.005") * compounded + CENT
        return bound.quantize(CENT, rounding=ROUND_CEILING)

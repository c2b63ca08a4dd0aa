"""Monthly installment and French amortization schedule calculations"""

import math
from typing import List
from credit_evaluation.domain.models import AmortizationRow, CreditApplication, MAX_TERM_MONTHS
from credit_evaluation.domain.exceptions import InvalidRateError, InvalidTermError

# Beyond this, (1 + im)^n / ((1 + im)^n - 1) equals 1 to float precision
# and expm1 would overflow
_MAX_GROWTH_EXPONENT = 700.0


def _validate_term(term_months: int) -> None:
    if isinstance(term_months, bool) or not isinstance(term_months, int) or term_months <= 0:
        raise InvalidTermError(f"Term must be a positive number of months, got {term_months!r}")
    if term_months > MAX_TERM_MONTHS:
        raise InvalidTermError(f"Term must be at most {MAX_TERM_MONTHS} months, got {term_months}")


def monthly_rate(annual_nominal_rate: float) -> float:
    """
    Convert an annual nominal rate to the monthly rate.

    Rates are decimal fractions: 0.18 means 18% a year, giving 0.015 a month.

    Raises:
        InvalidRateError: If the rate is negative, NaN or infinite
    """
    if not math.isfinite(annual_nominal_rate) or annual_nominal_rate < 0:
        raise InvalidRateError(f"Annual nominal rate must be non-negative, got {annual_nominal_rate}")
    return annual_nominal_rate / 12


def monthly_installment(
    application: CreditApplication,
    annual_nominal_rate: float,
    term_months: int,
) -> float:
    """
    Fixed monthly payment for the requested amount (French amortization).

    Formula:
        payment = M * (im * (1 + im)^n) / ((1 + im)^n - 1)

    A zero rate degenerates to M / n. (1 + im)^n - 1 is evaluated as
    expm1(n * log1p(im)) so rates too small to change 1 + im still
    give a non-zero denominator.

    Raises:
        InvalidTermError: If term_months is not an integer in [1, MAX_TERM_MONTHS]
        InvalidRateError: If the annual rate is invalid or the payment overflows
    """
    _validate_term(term_months)
    im = monthly_rate(annual_nominal_rate)
    amount = application.requested_amount

    if im == 0:
        return amount / term_months

    exponent = term_months * math.log1p(im)
    if exponent > _MAX_GROWTH_EXPONENT:
        installment = amount * im
    else:
        growth = math.expm1(exponent)
        installment = amount * (im / growth) * (growth + 1)

    if not math.isfinite(installment):
        raise InvalidRateError(f"Annual nominal rate {annual_nominal_rate} is too large")
    return installment


def generate_amortization_schedule(
    application: CreditApplication,
    annual_nominal_rate: float,
    term_months: int,
) -> List[AmortizationRow]:
    """
    Build the period-by-period French amortization schedule.

    Each payment is split into interest on the outstanding balance and
    principal. The last period repays whatever balance is left so the
    schedule always closes at exactly zero.

    Example:
        1200 at 0% over 12 months -> 12 rows of 100 principal, 0 interest
    """
    payment = monthly_installment(application, annual_nominal_rate, term_months)
    im = monthly_rate(annual_nominal_rate)

    balance = application.requested_amount
    schedule = []
    for period in range(1, term_months + 1):
        interest = balance * im

        if period == term_months:
            principal = balance
            row_payment = principal + interest
        else:
            principal = payment - interest
            row_payment = payment

        balance -= principal
        if period == term_months:
            balance = 0.0

        schedule.append(
            AmortizationRow(
                period=period,
                payment=row_payment,
                interest=interest,
                principal=principal,
                balance=balance,
            )
        )

    return schedule

"""Time-value-of-money solver for compound-interest investments.

Everything here is a pure function of its arguments: the forward projection
plus one inverse solver per unknown. Degenerate inputs return sentinel values
(usually 0) instead of raising.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import List, Optional

from compound_calc.schemas.calculation import (
    CalculationParams,
    CalculationResult,
    YearResult,
)

DAYS_PER_YEAR = 365.25
MIN_GOAL_YEARS = 0.1

# bisection bracket for the annual rate, as a decimal (0% .. 1000%)
RATE_SEARCH_LOW = 0.0
RATE_SEARCH_HIGH = 10.0
RATE_SEARCH_TOLERANCE = 1e-6
RATE_SEARCH_MAX_ITERATIONS = 100


def _growth_factor(periodic_rate: float, periods: float) -> float:
    """(1 + i)^N as a float: inf when it overflows, nan for a negative base."""
    base = 1 + periodic_rate
    if base < 0 and not float(periods).is_integer():
        return math.nan
    try:
        return base ** periods
    except OverflowError:
        return math.inf


def _balance(principal: float, pmt: float, rate: float, periodic_rate: float, periods: float) -> float:
    """FV of a lump sum plus an ordinary annuity over `periods` periods."""
    if rate == 0:
        return principal + pmt * periods
    factor = _growth_factor(periodic_rate, periods)
    # zero terms stay 0 rather than 0 * inf
    amount = principal * factor if principal else 0.0
    if pmt:
        amount += pmt * (factor - 1) / periodic_rate
    return amount


def compute_future_value(params: CalculationParams) -> CalculationResult:
    """
    Project the nominal and inflation-adjusted balance of an investment.

        FV = P(1 + i)^N + PMT * ((1 + i)^N - 1) / i
        i  = (rate / 100) / n,   N = n * years

    A zero rate uses the linear form FV = P + PMT * N. The breakdown has one
    point per whole year from 0 to ceil(years); a fractional horizon gets a
    final point at exactly `years`, replacing the whole-year point that
    overshoots it.
    """
    principal = params.principal
    pmt = params.contribution
    n = params.compoundsPerYear
    t = params.years
    inflation = (params.inflationRate or 0.0) / 100

    i = (params.rate / 100) / n
    total_periods = n * t

    amount = _balance(principal, pmt, params.rate, i, total_periods)
    total_invested = principal + pmt * total_periods
    total_interest = amount - total_invested
    amount_real = amount / _growth_factor(inflation, t)

    breakdown: List[YearResult] = [
        YearResult(
            year=0,
            principal=principal,
            interest=0.0,
            total=principal,
            realValue=principal,
        )
    ]

    for year in range(1, math.ceil(t) + 1):
        periods = n * year
        invested = principal + pmt * periods
        year_amount = _balance(principal, pmt, params.rate, i, periods)
        breakdown.append(
            YearResult(
                year=year,
                principal=invested,
                interest=year_amount - invested,
                total=year_amount,
                realValue=year_amount / _growth_factor(inflation, year),
            )
        )

    if t > 0 and not float(t).is_integer():
        if breakdown[-1].year > t:
            breakdown.pop()
        breakdown.append(
            YearResult(
                year=t,
                principal=total_invested,
                interest=total_interest,
                total=amount,
                realValue=amount_real,
            )
        )

    return CalculationResult(
        futureValue=amount,
        totalInterest=total_interest,
        futureValueReal=amount_real,
        breakdown=breakdown,
    )


def solve_required_principal(
    future_value: float,
    rate: float,
    years: float,
    compounds_per_year: int,
    contribution: float = 0.0,
) -> float:
    """Lump sum needed today: P = (FV - PMT * ((1+i)^N - 1)/i) / (1+i)^N."""
    if years <= 0:
        return future_value

    i = (rate / 100) / compounds_per_year
    total_periods = compounds_per_year * years

    if rate == 0:
        return future_value - contribution * total_periods

    factor = _growth_factor(i, total_periods)
    if math.isinf(factor):
        # limit as (1+i)^N grows without bound
        return -contribution / i
    annuity_part = contribution * (factor - 1) / i
    return (future_value - annuity_part) / factor


def solve_required_contribution(
    principal: float,
    future_value: float,
    rate: float,
    years: float,
    compounds_per_year: int,
) -> float:
    """Per-period contribution: PMT = (FV - P(1+i)^N) / (((1+i)^N - 1)/i)."""
    if years <= 0:
        return 0.0

    i = (rate / 100) / compounds_per_year
    total_periods = compounds_per_year * years

    if rate == 0:
        return (future_value - principal) / total_periods

    factor = _growth_factor(i, total_periods)
    if math.isinf(factor):
        return -principal * i
    return (future_value - principal * factor) / ((factor - 1) / i)


def solve_required_rate(
    principal: float,
    future_value: float,
    years: float,
    compounds_per_year: int,
    contribution: float = 0.0,
) -> float:
    """
    Annual rate (as a percentage) that grows `principal` into `future_value`.

    Without contributions this is closed form. With contributions there is no
    algebraic inverse, so the decimal annual rate is bisected over [0, 10]
    using the fact that FV increases with the rate. The search stops as soon
    as the implied FV is within 1e-6 of the target and otherwise returns the
    lower bracket after the iteration cap.
    """
    if years <= 0:
        return 0.0
    # already there, or it would take negative growth
    if principal >= future_value and contribution >= 0:
        return 0.0

    n = compounds_per_year
    total_periods = n * years

    if contribution == 0:
        if principal <= 0:
            return 0.0
        base = (future_value / principal) ** (1 / total_periods)
        return n * (base - 1) * 100

    low, high = RATE_SEARCH_LOW, RATE_SEARCH_HIGH
    for _ in range(RATE_SEARCH_MAX_ITERATIONS):
        mid = (low + high) / 2
        guess = _balance(principal, contribution, mid, mid / n, total_periods)

        if abs(guess - future_value) < RATE_SEARCH_TOLERANCE:
            return mid * 100

        if guess < future_value:
            low = mid
        else:
            high = mid

    return low * 100


def solve_required_time(
    principal: float,
    future_value: float,
    rate: float,
    compounds_per_year: int,
    contribution: float = 0.0,
) -> float:
    """
    Years until `principal` plus contributions reaches `future_value`.

        N = ln((FV*i + PMT) / (P*i + PMT)) / ln(1 + i),  years = N / n

    Returns 0 when the goal is already met and also when it can never be
    reached (no growth and no contributions, or a non-positive log argument).
    """
    n = compounds_per_year

    if future_value <= principal and contribution >= 0:
        return 0.0

    if rate == 0:
        if contribution <= 0:
            return 0.0
        return (future_value - principal) / contribution / n

    i = (rate / 100) / n
    numerator_arg = future_value * i + contribution
    denominator_arg = principal * i + contribution
    if numerator_arg <= 0 or denominator_arg <= 0 or 1 + i <= 0:
        return 0.0

    total_periods = math.log(numerator_arg / denominator_arg) / math.log(1 + i)
    return total_periods / n


def years_until(target_date: str, now: Optional[datetime] = None) -> float:
    """Years between `now` and an ISO date, never less than 0.1."""
    if target_date.endswith(("Z", "z")):
        target_date = target_date[:-1] + "+00:00"
    end = datetime.fromisoformat(target_date)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)

    start = now or datetime.now(timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)

    diff_days = (end - start).total_seconds() / 86400
    return max(MIN_GOAL_YEARS, diff_days / DAYS_PER_YEAR)

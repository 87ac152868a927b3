"""Period-by-period balance simulation shared by the calculators."""

from __future__ import annotations

from typing import List, Sequence

from investcalc.schemas.common import PeriodDataPoint


def simulate_growth(
    opening_balance: float,
    periodic_rate: float,
    periods: int,
    contribution: float = 0.0,
    contribute_at_start: bool = False,
) -> List[PeriodDataPoint]:
    """
    Compound a balance one period at a time.

    Order of operations (per period):
      - contribute_at_start=True (annuity due): add contribution, then grow.
      - contribute_at_start=False (ordinary annuity): grow, then add contribution.

    The contribution added at the end of a period does not grow in that period.
    """
    balance = float(opening_balance)
    rows: List[PeriodDataPoint] = []

    for period in range(1, periods + 1):
        opening = balance
        if contribute_at_start:
            balance += contribution
            growth = balance * periodic_rate
            balance += growth
        else:
            growth = balance * periodic_rate
            balance += growth + contribution

        rows.append(
            PeriodDataPoint(
                period=period,
                opening_balance=opening,
                growth=growth,
                contribution=contribution,
                closing_balance=balance,
            )
        )

    return rows


def aggregate_by_year(rows: Sequence[PeriodDataPoint], periods_per_year: int) -> List[PeriodDataPoint]:
    """Collapse per-period rows into yearly rows (flows summed, balances at the edges)."""
    years: List[PeriodDataPoint] = []
    for start in range(0, len(rows), periods_per_year):
        chunk = rows[start:start + periods_per_year]
        years.append(
            PeriodDataPoint(
                period=len(years) + 1,
                opening_balance=chunk[0].opening_balance,
                growth=sum(row.growth for row in chunk),
                contribution=sum(row.contribution for row in chunk),
                withdrawal=sum(row.withdrawal for row in chunk),
                closing_balance=chunk[-1].closing_balance,
            )
        )
    return years

"""Month-by-month accumulation shared by every projector.

Each month the contribution is added first and interest is then earned on the
new balance, so money contributed in a month compounds in that same month.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from investcalc.config import MONTHS_PER_YEAR

# (year, month) -> (contribution, monthly_rate); both counters are 1-based.
MonthlyPolicy = Callable[[int, int], Tuple[float, float]]


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage (e.g. 9 for 9%) into a monthly fraction."""
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


@dataclass
class Ledger:
    balance: float
    contributed: float = 0.0
    interest: float = 0.0

    def step(self, contribution: float, rate: float) -> None:
        self.balance += contribution
        self.contributed += contribution
        earned = self.balance * rate
        self.balance += earned
        self.interest += earned


def level_policy(contribution: float, rate: float) -> MonthlyPolicy:
    """Same contribution and rate every month."""

    def policy(year: int, month: int) -> Tuple[float, float]:
        return contribution, rate

    return policy


def run_years(principal: float, years: int, policy: MonthlyPolicy) -> Tuple[List[float], Ledger]:
    """
    Step ``years`` x 12 months from ``principal``.

    Returns the balance at the start (index 0) and at the end of every year,
    plus the ledger with running totals.
    """
    ledger = Ledger(balance=float(principal))
    balances = [ledger.balance]
    for year in range(1, years + 1):
        for month in range(1, MONTHS_PER_YEAR + 1):
            contribution, rate = policy(year, month)
            ledger.step(contribution, rate)
        balances.append(ledger.balance)
    return balances, ledger


def run_months(principal: float, months: int, policy: MonthlyPolicy) -> Ledger:
    """Step a month count that need not be a whole number of years."""
    ledger = Ledger(balance=float(principal))
    for index in range(months):
        year, month = divmod(index, MONTHS_PER_YEAR)
        contribution, rate = policy(year + 1, month + 1)
        ledger.step(contribution, rate)
    return ledger

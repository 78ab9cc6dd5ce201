"""Vesting engine: one-year cliff, then linear vesting over four years.

Elapsed time is counted in whole calendar months and ignores the day of
the month, so vesting steps happen on the first of each month.
"""

import logging
from datetime import date

from pydantic import BaseModel, ConfigDict

from stockclerk.models.equity import Equity, StockPosition
from stockclerk.models.grant import Grant
from stockclerk.models.money import Money

logger = logging.getLogger(__name__)

CLIFF_MONTHS = 12
VESTING_MONTHS = 48


class VestingEvent(BaseModel):
    """Cumulative vested shares as of the first day of a month."""

    model_config = ConfigDict(frozen=True)

    vests_on: date
    elapsed_months: int
    vested_shares: int
    fraction: float


def months_between(start: date, later: date) -> int:
    """Calendar months from ``start`` to ``later``; negative if ``later`` is earlier."""
    return (later.year - start.year) * 12 + (later.month - start.month)


def vested_fraction(start: date, as_of: date) -> float:
    elapsed = months_between(start, as_of)
    if elapsed < CLIFF_MONTHS:
        return 0.0
    return min(elapsed * 0.25 / 12, 1.0)


def vested_shares(grant: Grant, as_of: date) -> int:
    """Whole shares vested by ``as_of``, never more than the grant total."""
    elapsed = months_between(grant.start, as_of)
    if elapsed < CLIFF_MONTHS:
        return 0
    return min(grant.total * elapsed // VESTING_MONTHS, grant.total)


class VestingEvaluator:
    """Splits a grant into vested and unvested positions as of a date."""

    def evaluate(self, grant: Grant, as_of: date, share_price: Money) -> Equity:
        vested = vested_shares(grant, as_of)
        logger.debug("Grant %s: %d of %d shares vested as of %s", grant, vested, grant.total, as_of)
        return Equity(
            vested=StockPosition.priced(vested, grant.price, share_price),
            unvested=StockPosition.priced(grant.total - vested, grant.price, share_price),
        )


def vesting_schedule(grant: Grant) -> list[VestingEvent]:
    """Every month in which the grant's vested share count increases."""
    events: list[VestingEvent] = []
    previous = 0
    for elapsed in range(CLIFF_MONTHS, VESTING_MONTHS + 1):
        year, month_index = divmod(grant.start.month - 1 + elapsed, 12)
        vests_on = date(grant.start.year + year, month_index + 1, 1)
        shares = vested_shares(grant, vests_on)
        if shares > previous:
            events.append(
                VestingEvent(
                    vests_on=vests_on,
                    elapsed_months=elapsed,
                    vested_shares=shares,
                    fraction=vested_fraction(grant.start, vests_on),
                )
            )
            previous = shares
    return events

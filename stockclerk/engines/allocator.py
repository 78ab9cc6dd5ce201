"""Marginal bracket allocation for exercise profit.

The profit is stacked on top of the filer's existing income. Walking the
brackets from the top down, each bracket takes the part of the profit that
falls inside it, until the whole profit has been placed. The result answers
"which rates does the new profit fall into", not "what is the filer's
total tax".
"""

import logging

from stockclerk.models.enums import FilingStatus
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxedAmount, TaxTable

logger = logging.getLogger(__name__)


class TaxBracketAllocator:
    """Splits profit across the marginal brackets it lands in."""

    def allocate(
        self,
        profit: Money,
        filer_income: Money,
        filing_status: FilingStatus,
        table: TaxTable,
    ) -> list[TaxedAmount]:
        """Allocate ``profit`` on top of ``filer_income``.

        Args:
            profit: Amount to place above the filer's income.
            filer_income: Gross income before the exercise.
            filing_status: Selects the bracket list and standard deduction.
            table: Tax table to allocate against.

        Returns:
            TaxedAmounts ordered from the highest rate down. Their amounts sum
            to exactly ``profit``. Profit below the standard deduction is
            returned as a final 0% amount.
        """
        info = table.for_status(filing_status)
        zero = Money.zero()
        if profit == zero:
            return []

        # Brackets are on taxable income; shift them by the deduction so they
        # can be compared against gross income directly. Intervals are [start, next).
        top = filer_income + profit
        remaining = profit
        allocations: list[TaxedAmount] = []

        for bracket, upper in reversed(info.ranges()):
            if remaining == zero:
                break
            start = bracket.start + info.deduction
            if start >= top:
                continue
            ceiling = top if upper is None else min(upper + info.deduction, top)
            taxed = min(remaining, ceiling - start)
            remaining -= taxed
            allocations.append(TaxedAmount(rate=bracket.rate, amount=taxed))
            logger.debug("Allocated %s at %d%%", taxed, bracket.rate)

        if remaining > zero:
            if allocations and allocations[-1].rate == 0:
                allocations[-1] = TaxedAmount(rate=0, amount=allocations[-1].amount + remaining)
            else:
                allocations.append(TaxedAmount(rate=0, amount=remaining))
            logger.debug("Allocated %s below the taxable threshold", remaining)

        return allocations

"""Stock clerk: combines vesting and bracket allocation into one calculation."""

import logging
from collections.abc import Iterable
from datetime import date

from stockclerk.engines.allocator import TaxBracketAllocator
from stockclerk.engines.vesting import VestingEvaluator
from stockclerk.exceptions import UnderwaterPositionError
from stockclerk.models.calculation import GrantPosition, StockCalculation
from stockclerk.models.equity import Equity
from stockclerk.models.grant import Filer, Grant
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxTable

logger = logging.getLogger(__name__)


class StockClerk:
    """Computes the outcome of exercising and selling every vested share."""

    def __init__(
        self,
        tax_table: TaxTable,
        evaluator: VestingEvaluator | None = None,
        allocator: TaxBracketAllocator | None = None,
    ) -> None:
        self.tax_table = tax_table
        self.evaluator = evaluator or VestingEvaluator()
        self.allocator = allocator or TaxBracketAllocator()

    def calculate(
        self,
        filer: Filer,
        grants: Iterable[Grant],
        exercise_date: date,
        share_price: Money,
    ) -> StockCalculation:
        """Exercise and sell all vested shares on ``exercise_date`` at ``share_price``.

        Identical grants are counted once. Raises UnderwaterPositionError when
        the vested shares are worth less than their exercise cost.
        """
        equities: dict[Grant, Equity] = {}
        for grant in grants:
            if grant in equities:
                logger.info("Duplicate grant %s counted once", grant)
                continue
            equities[grant] = self.evaluator.evaluate(grant, exercise_date, share_price)

        total = sum(equities.values(), Equity.empty())
        vested = total.vested
        if vested.is_underwater:
            raise UnderwaterPositionError(vested.cost, vested.revenue)

        gross_profit = vested.gross_profit
        taxes = self.allocator.allocate(
            gross_profit, filer.income, filer.filing_status, self.tax_table
        )
        total_taxes = sum((taxed.taxes for taxed in taxes), Money.zero())
        logger.debug(
            "Gross profit %s, taxes %s across %d bracket(s)", gross_profit, total_taxes, len(taxes)
        )

        return StockCalculation(
            exercise_date=exercise_date,
            share_price=share_price,
            filing_status=filer.filing_status,
            income=filer.income,
            positions=[GrantPosition(grant=g, equity=e) for g, e in equities.items()],
            vested=vested,
            unvested=total.unvested,
            gross_profit=gross_profit,
            taxes=taxes,
            total_taxes=total_taxes,
            net_profit=gross_profit - total_taxes,
            break_even_shares=self.break_even_shares(vested.cost + total_taxes, share_price),
        )

    @staticmethod
    def break_even_shares(needed: Money, share_price: Money) -> int:
        """Fewest shares that must be sold at ``share_price`` to raise ``needed``."""
        if needed == Money.zero():
            return 0
        return -(-needed.in_cents // share_price.in_cents)

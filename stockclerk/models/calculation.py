"""Result of a stock exercise calculation."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from stockclerk.models.enums import FilingStatus
from stockclerk.models.equity import Equity, StockPosition
from stockclerk.models.grant import Grant
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxedAmount


class GrantPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    grant: Grant
    equity: Equity


class StockCalculation(BaseModel):
    """Outcome of exercising and selling every vested share on one date."""

    model_config = ConfigDict(frozen=True)

    exercise_date: date
    share_price: Money
    filing_status: FilingStatus
    income: Money
    positions: list[GrantPosition]
    vested: StockPosition
    unvested: StockPosition
    gross_profit: Money
    taxes: list[TaxedAmount]
    total_taxes: Money
    net_profit: Money
    break_even_shares: int

    @property
    def exercise_cost(self) -> Money:
        return self.vested.cost
